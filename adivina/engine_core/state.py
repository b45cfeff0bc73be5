"""
Game State - Session and dialogue state for the guessing game.

Design principles:
- Immutable-friendly: all mutations return new state
- Serializable: plain ints, enums and optionals
- One GameSession per play-through; a replay replaces it wholesale
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum


class GamePhase(Enum):
    """Dialogue phases of the game."""
    INTRO = "intro"  # Intro is being played, not listening yet
    AWAITING_GUESS = "awaiting_guess"
    EVALUATING = "evaluating"  # Transient while a guess is checked
    SESSION_ENDED = "session_ended"  # Victory/defeat is being played
    AWAITING_REPLAY_ANSWER = "awaiting_replay_answer"
    CLOSING = "closing"  # Terminal


@dataclass(frozen=True)
class GameSession:
    """
    One play-through.

    The secret is drawn once when the session is created and never changes.
    """
    secret: int
    min_number: int
    max_number: int
    max_attempts: int
    attempts_remaining: int
    last_guess: int | None = None
    session_number: int = 1

    @classmethod
    def create(
        cls,
        secret: int,
        min_number: int,
        max_number: int,
        max_attempts: int,
        session_number: int = 1,
    ) -> GameSession:
        """Create a fresh session with a full attempt budget."""
        if not min_number <= secret <= max_number:
            raise ValueError(
                f"Secret {secret} outside range [{min_number}, {max_number}]"
            )
        return cls(
            secret=secret,
            min_number=min_number,
            max_number=max_number,
            max_attempts=max_attempts,
            attempts_remaining=max_attempts,
            last_guess=None,
            session_number=session_number,
        )

    @property
    def attempts_used(self) -> int:
        return self.max_attempts - self.attempts_remaining

    @property
    def is_exhausted(self) -> bool:
        return self.attempts_remaining == 0

    def in_range(self, value: int) -> bool:
        return self.min_number <= value <= self.max_number

    def with_guess(self, value: int) -> GameSession:
        """Return new session with the guess recorded and one attempt spent."""
        return replace(
            self,
            last_guess=value,
            attempts_remaining=max(self.attempts_remaining - 1, 0),
        )


@dataclass(frozen=True)
class GameState:
    """
    Complete game state at a point in time.

    All state changes go through the reducer.
    """
    phase: GamePhase = GamePhase.INTRO
    session: GameSession | None = None

    @property
    def is_closed(self) -> bool:
        return self.phase == GamePhase.CLOSING

    @property
    def is_listening(self) -> bool:
        return self.phase in {GamePhase.AWAITING_GUESS, GamePhase.AWAITING_REPLAY_ANSWER}

    def with_phase(self, phase: GamePhase) -> GameState:
        return replace(self, phase=phase)

    def with_session(self, session: GameSession) -> GameState:
        return replace(self, session=session)
