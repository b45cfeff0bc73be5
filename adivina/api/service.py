"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to game events
2. Manages hosted games
3. Formats game state and intents for clients

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ..config import GameConfig
from ..engine_core.event import Event
from ..engine_core.intent import Intent, TransitionResult
from ..engine_core.state import GamePhase
from ..session import SessionManager, Session, SessionState
from .schemas import (
    CreateGameRequest,
    UtteranceRequest,
    GameResponse,
    IntentInfo,
    ErrorResponse,
    ErrorCode,
    GameStatus,
)

_REVEALED_PHASES = {GamePhase.SESSION_ENDED, GamePhase.AWAITING_REPLAY_ANSWER, GamePhase.CLOSING}


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        response = service.create_game(CreateGameRequest())
        response = service.playback_finished(response.game_id)
        response = service.submit_utterance(response.game_id, UtteranceRequest(text="50"))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_game(self, request: CreateGameRequest) -> GameResponse:
        """
        Create and start a game.

        Raises ValueError for an invalid configuration.
        """
        config = GameConfig(
            min_number=request.min_number,
            max_number=request.max_number,
            max_attempts=request.max_attempts,
            log_secret=request.log_secret,
            replay_match=request.replay_match.value,
            seed=request.seed,
        )
        session = self.session_manager.create_session(config)
        return self._session_to_response(session)

    def get_game(self, game_id: str) -> GameResponse | ErrorResponse:
        """Get game state and the intents of the last event."""
        session = self.session_manager.get_session(game_id)
        if not session:
            return self._not_found(game_id)
        return self._session_to_response(session)

    def submit_utterance(
        self, game_id: str, request: UtteranceRequest
    ) -> GameResponse | ErrorResponse:
        """Feed recognized text to the game."""
        return self._dispatch(game_id, Event.utterance(request.text))

    def playback_finished(self, game_id: str) -> GameResponse | ErrorResponse:
        """Report that the client finished playing the last messages."""
        return self._dispatch(game_id, Event.playback_finished())

    def end_game(self, game_id: str) -> bool:
        """End a game and drop it from memory."""
        return self.session_manager.end_session(game_id, reason="user_ended")

    def list_games(self) -> list[str]:
        """List active game IDs."""
        return self.session_manager.list_active_sessions()

    def _dispatch(self, game_id: str, event: Event) -> GameResponse | ErrorResponse:
        session = self.session_manager.get_session(game_id)
        if not session:
            return self._not_found(game_id)

        with session.lock:
            result = session.game.dispatch(event)
            if not result.success:
                return ErrorResponse(
                    error=result.error or "Event rejected",
                    error_code=ErrorCode.INVALID_EVENT,
                    details={"phase": session.game.phase.value, "event": event.event_type.value},
                )
            session.touch(result.intents)
            return self._session_to_response(session, result)

    def _not_found(self, game_id: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Game {game_id} not found",
            error_code=ErrorCode.GAME_NOT_FOUND,
        )

    def _session_to_response(
        self, session: Session, result: TransitionResult | None = None
    ) -> GameResponse:
        game = session.game
        game_session = game.session

        return GameResponse(
            game_id=session.session_id,
            status=self._status(session),
            phase=game.phase.value,
            session_number=game_session.session_number,
            min_number=game_session.min_number,
            max_number=game_session.max_number,
            max_attempts=game_session.max_attempts,
            attempts_remaining=game_session.attempts_remaining,
            last_guess=game_session.last_guess,
            intents=[self._intent_to_info(i) for i in session.last_intents],
            error_code=result.error_code.value if result and result.error_code else None,
            guess=result.guess if result else None,
            outcome=result.outcome.value if result and result.outcome else None,
            revealed_secret=game_session.secret if game.phase in _REVEALED_PHASES else None,
        )

    def _status(self, session: Session) -> GameStatus:
        if session.state == SessionState.ABANDONED:
            return GameStatus.ABANDONED
        if not session.is_active():
            return GameStatus.CLOSED
        return GameStatus.ACTIVE

    def _intent_to_info(self, intent: Intent) -> IntentInfo:
        return IntentInfo(
            kind=intent.kind.value,
            message=intent.message,
            category=intent.category.value if intent.category else None,
            params=dict(intent.params),
        )
