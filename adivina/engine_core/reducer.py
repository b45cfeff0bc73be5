"""
Reducer - Applies events to game state.

The reducer is the single point of state mutation.
All state changes must go through apply_event().

Design principles:
- (state, event) -> TransitionResult with new state and intents
- Never waits: speech, playback and listening belong to the host
- Recoverable conditions (unparsable guess, out of range, repeated guess,
  unclear replay answer) are successful transitions with an error_code
- Events the current phase cannot take are failures that keep the state
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable
import logging
import random

from ..config import GameConfig
from .answers import ReplayAnswer, classify_replay_answer
from .event import Event, EventType
from .intent import GuessError, GuessOutcome, Intent, MessageCategory, TransitionResult
from .messages import MessageCatalog
from .number_parser import NumberParser
from .state import GamePhase, GameSession, GameState

logger = logging.getLogger(__name__)

SecretSource = Callable[[int, int], int]


@dataclass
class Reducer:
    """
    Reducer applies events to game state.

    secret_source(min, max) draws the secret for each new session; it
    defaults to a random.Random seeded from the config.
    """
    config: GameConfig = field(default_factory=GameConfig)
    secret_source: SecretSource | None = None
    parser: NumberParser = field(default_factory=NumberParser)
    messages: MessageCatalog = field(default_factory=MessageCatalog)

    def __post_init__(self):
        if self.secret_source is None:
            self.secret_source = random.Random(self.config.seed).randint

    def apply(self, state: GameState, event: Event) -> TransitionResult:
        """
        Apply an event to the game state.

        Returns TransitionResult with new state and intents.
        """
        handler = self._get_handler(state, event.event_type)
        if not handler:
            logger.debug("Rejected %s event in phase %s", event.event_type.value, state.phase.value)
            return TransitionResult.failure(
                f"Cannot handle {event.event_type.value} in phase {state.phase.value}",
                error_code=GuessError.INVALID_EVENT,
                state=state,
            )

        result = handler(state, event)
        logger.debug(
            "%s: %s -> %s (%s)",
            event.event_type.value,
            state.phase.value,
            result.new_state.phase.value,
            result.error_code.value if result.error_code else "ok",
        )
        return result

    def _get_handler(self, state: GameState, event_type: EventType):
        """Get the handler for an event in the current phase."""
        if event_type == EventType.START:
            return self._handle_start if state.session is None else None

        if state.session is None:
            return None

        handlers = {
            (GamePhase.AWAITING_GUESS, EventType.UTTERANCE): self._handle_guess,
            (GamePhase.AWAITING_REPLAY_ANSWER, EventType.UTTERANCE): self._handle_replay_answer,
            (GamePhase.INTRO, EventType.PLAYBACK_FINISHED): self._handle_intro_finished,
            (GamePhase.SESSION_ENDED, EventType.PLAYBACK_FINISHED): self._handle_session_ended,
        }
        handler = handlers.get((state.phase, event_type))
        if handler is None and event_type == EventType.PLAYBACK_FINISHED:
            # Playback ends after every spoken batch, farewell included;
            # only two phases care
            return self._handle_ignored_playback
        return handler

    # =========================================================================
    # Session lifecycle
    # =========================================================================

    def _new_session(self, session_number: int) -> GameSession:
        secret = self.secret_source(self.config.min_number, self.config.max_number)
        return GameSession.create(
            secret=secret,
            min_number=self.config.min_number,
            max_number=self.config.max_number,
            max_attempts=self.config.max_attempts,
            session_number=session_number,
        )

    def _intro(self, session: GameSession) -> Intent:
        params = {
            "min_number": session.min_number,
            "max_number": session.max_number,
            "max_attempts": session.max_attempts,
        }
        return Intent.speak(
            MessageCategory.INTRO,
            self.messages.render(MessageCategory.INTRO, **params),
            **params,
        )

    def _handle_start(self, state: GameState, event: Event) -> TransitionResult:
        session = self._new_session(session_number=1)
        logger.info("Session %d started (range %d-%d, %d attempts)",
                    session.session_number, session.min_number, session.max_number,
                    session.max_attempts)
        new_state = GameState(phase=GamePhase.INTRO, session=session)
        return TransitionResult.success_with_state(new_state, [self._intro(session)])

    def _handle_intro_finished(self, state: GameState, event: Event) -> TransitionResult:
        return TransitionResult.success_with_state(
            state.with_phase(GamePhase.AWAITING_GUESS),
            [Intent.listen_for_guess()],
        )

    def _handle_session_ended(self, state: GameState, event: Event) -> TransitionResult:
        return TransitionResult.success_with_state(
            state.with_phase(GamePhase.AWAITING_REPLAY_ANSWER),
            [
                Intent.speak(
                    MessageCategory.ASK_REPLAY,
                    self.messages.render(MessageCategory.ASK_REPLAY),
                ),
                Intent.listen_for_replay_answer(),
            ],
        )

    def _handle_ignored_playback(self, state: GameState, event: Event) -> TransitionResult:
        return TransitionResult.success_with_state(state)

    # =========================================================================
    # Guessing
    # =========================================================================

    def _handle_guess(self, state: GameState, event: Event) -> TransitionResult:
        """Handle an utterance while waiting for a guess."""
        session = state.session
        value = self.parser.parse(event.text)

        if value is None:
            return self._reject_guess(
                state, MessageCategory.NOT_UNDERSTOOD, GuessError.PARSE_FAILURE,
                min_number=session.min_number, max_number=session.max_number,
            )

        if not session.in_range(value):
            return self._reject_guess(
                state, MessageCategory.OUT_OF_RANGE, GuessError.OUT_OF_RANGE,
                guess=value, min_number=session.min_number, max_number=session.max_number,
            )

        if value == session.last_guess:
            return self._reject_guess(
                state, MessageCategory.REPEATED, GuessError.REPEATED_GUESS, guess=value,
            )

        evaluating = state.with_phase(GamePhase.EVALUATING).with_session(session.with_guess(value))
        return self._evaluate(evaluating, value)

    def _reject_guess(
        self,
        state: GameState,
        category: MessageCategory,
        error_code: GuessError,
        **params,
    ) -> TransitionResult:
        """Answer a guess that does not count and listen again."""
        return TransitionResult.success_with_state(
            state,
            [
                Intent.speak(category, self.messages.render(category, **params), **params),
                Intent.listen_for_guess(),
            ],
            error_code=error_code,
        )

    def _evaluate(self, state: GameState, value: int) -> TransitionResult:
        """Compare an accepted guess with the secret."""
        session = state.session

        if value == session.secret:
            outcome = GuessOutcome.CORRECT
            category = MessageCategory.VICTORY
        elif session.is_exhausted:
            outcome = GuessOutcome.EXHAUSTED
            category = MessageCategory.DEFEAT
        else:
            outcome = GuessOutcome.HIGHER if value < session.secret else GuessOutcome.LOWER
            category = MessageCategory.HIGHER if outcome == GuessOutcome.HIGHER else MessageCategory.LOWER

        logger.debug("Guess %d: %s, %d attempts remaining",
                     value, outcome.value, session.attempts_remaining)

        if outcome in {GuessOutcome.CORRECT, GuessOutcome.EXHAUSTED}:
            params = {"secret": session.secret, "attempts_used": session.attempts_used}
            logger.info("Session %d ended: %s", session.session_number, outcome.value)
            return TransitionResult.success_with_state(
                state.with_phase(GamePhase.SESSION_ENDED),
                [Intent.speak(category, self.messages.render(category, **params), **params)],
                guess=value,
                outcome=outcome,
            )

        params = {"attempts_remaining": session.attempts_remaining}
        return TransitionResult.success_with_state(
            state.with_phase(GamePhase.AWAITING_GUESS),
            [
                Intent.speak(category, self.messages.render(category, **params), **params),
                Intent.listen_for_guess(),
            ],
            guess=value,
            outcome=outcome,
        )

    # =========================================================================
    # Play again
    # =========================================================================

    def _handle_replay_answer(self, state: GameState, event: Event) -> TransitionResult:
        """Handle the answer to the play-again question."""
        answer = classify_replay_answer(event.text, policy=self.config.replay_match)

        if answer == ReplayAnswer.YES:
            session = self._new_session(session_number=state.session.session_number + 1)
            logger.info("Session %d started after replay", session.session_number)
            return TransitionResult.success_with_state(
                GameState(phase=GamePhase.INTRO, session=session),
                [
                    Intent.speak(
                        MessageCategory.REPLAY_ACK,
                        self.messages.render(MessageCategory.REPLAY_ACK),
                    ),
                    self._intro(session),
                ],
            )

        if answer == ReplayAnswer.NO:
            logger.info("Player declined to play again, closing")
            return TransitionResult.success_with_state(
                state.with_phase(GamePhase.CLOSING),
                [
                    Intent.speak(
                        MessageCategory.FAREWELL,
                        self.messages.render(MessageCategory.FAREWELL),
                    ),
                    Intent.terminate(),
                ],
            )

        logger.debug("Replay answer not understood: %r", event.text)
        return TransitionResult.success_with_state(
            state,
            [
                Intent.speak(
                    MessageCategory.REPLAY_NOT_UNDERSTOOD,
                    self.messages.render(MessageCategory.REPLAY_NOT_UNDERSTOOD),
                ),
                Intent.listen_for_replay_answer(),
            ],
            error_code=GuessError.AMBIGUOUS_REPLAY_ANSWER,
        )


def apply_event(config: GameConfig, state: GameState, event: Event) -> TransitionResult:
    """
    Convenience function to apply an event.

    Creates a Reducer and applies the event.
    """
    reducer = Reducer(config=config)
    return reducer.apply(state, event)
