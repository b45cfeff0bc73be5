"""
GuessGame - The stateful front of the reducer.

A host owns exactly one GuessGame per player and calls:

    game = GuessGame(GameConfig(min_number=0, max_number=100))
    intents = game.start()               # Speak(intro)
    intents = game.on_playback_finished() # ListenForGuess
    intents = game.on_utterance("cincuenta")

and executes the returned intents in order.
"""

from __future__ import annotations
from typing import Callable
import logging

from ..config import GameConfig
from .event import Event
from .intent import Intent, TransitionResult
from .messages import MessageCatalog
from .number_parser import NumberParser
from .reducer import Reducer, SecretSource
from .state import GamePhase, GameSession, GameState

logger = logging.getLogger(__name__)

SecretHook = Callable[[GameSession], None]


def log_secret(session: GameSession) -> None:
    """Diagnostic hook that logs the secret of a new session."""
    logger.info("[DEBUG] Número secreto (partida %d): %d", session.session_number, session.secret)


class GuessGame:
    """
    Holds the current GameState and feeds events through the Reducer.

    on_secret_drawn is called with every new session. When it is not given
    and config.log_secret is on, the secret is logged.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        secret_source: SecretSource | None = None,
        parser: NumberParser | None = None,
        messages: MessageCatalog | None = None,
        on_secret_drawn: SecretHook | None = None,
    ):
        self.config = config or GameConfig()
        self.reducer = Reducer(
            config=self.config,
            secret_source=secret_source,
            parser=parser or NumberParser(),
            messages=messages or MessageCatalog(),
        )
        self.state = GameState()
        self.last_result: TransitionResult | None = None

        if on_secret_drawn is None and self.config.log_secret:
            on_secret_drawn = log_secret
        self._on_secret_drawn = on_secret_drawn

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    @property
    def session(self) -> GameSession | None:
        return self.state.session

    @property
    def attempts_remaining(self) -> int | None:
        return self.state.session.attempts_remaining if self.state.session else None

    @property
    def is_closed(self) -> bool:
        return self.state.is_closed

    def start(self) -> list[Intent]:
        """Start the first session."""
        return self.dispatch(Event.start()).intents

    def on_utterance(self, text: str | None) -> list[Intent]:
        """Feed a recognized utterance. None or "" means nothing was recognized."""
        return self.dispatch(Event.utterance(text)).intents

    def on_playback_finished(self) -> list[Intent]:
        """Signal that everything spoken so far has been played."""
        return self.dispatch(Event.playback_finished()).intents

    def dispatch(self, event: Event) -> TransitionResult:
        """Apply an event and keep the resulting state."""
        previous = self.state.session
        result = self.reducer.apply(self.state, event)
        self.last_result = result

        if result.success and result.new_state is not None:
            self.state = result.new_state

        current = self.state.session
        if current is not None and (
            previous is None or current.session_number != previous.session_number
        ):
            self._notify_secret(current)

        return result

    def _notify_secret(self, session: GameSession) -> None:
        if self._on_secret_drawn is not None:
            self._on_secret_drawn(session)
