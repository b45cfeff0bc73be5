"""
Intents and transition results.

The game never talks to a speaker or a microphone. Each transition returns
an ordered list of intents that the host executes:

    Speak                   say a message (clip or synthesized speech)
    ListenForGuess          resume capture, expecting a number
    ListenForReplayAnswer   resume capture, expecting yes/no
    Terminate               shut the host down
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class IntentKind(Enum):
    SPEAK = "speak"
    LISTEN_FOR_GUESS = "listen_for_guess"
    LISTEN_FOR_REPLAY_ANSWER = "listen_for_replay_answer"
    TERMINATE = "terminate"


class MessageCategory(Enum):
    """
    Semantic category of a spoken message.

    Hosts with pre-recorded audio map categories to clips; TTS hosts just
    say the rendered message.
    """
    INTRO = "intro"
    HIGHER = "higher"
    LOWER = "lower"
    VICTORY = "victory"
    DEFEAT = "defeat"
    NOT_UNDERSTOOD = "not_understood"
    OUT_OF_RANGE = "out_of_range"
    REPEATED = "repeated"
    ASK_REPLAY = "ask_replay"
    REPLAY_ACK = "replay_ack"
    REPLAY_NOT_UNDERSTOOD = "replay_not_understood"
    FAREWELL = "farewell"


class GuessError(Enum):
    """Recoverable conditions reported on a transition result."""
    PARSE_FAILURE = "PARSE_FAILURE"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    REPEATED_GUESS = "REPEATED_GUESS"
    AMBIGUOUS_REPLAY_ANSWER = "AMBIGUOUS_REPLAY_ANSWER"
    INVALID_EVENT = "INVALID_EVENT"


@dataclass(frozen=True)
class Intent:
    """
    Something the host should do next.

    Only SPEAK intents carry a message and category. params holds the
    values the message was rendered from (secret, attempts, ...).
    """
    kind: IntentKind
    message: str | None = None
    category: MessageCategory | None = None
    params: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def speak(cls, category: MessageCategory, message: str, **params: Any) -> Intent:
        return cls(kind=IntentKind.SPEAK, message=message, category=category, params=params)

    @classmethod
    def listen_for_guess(cls) -> Intent:
        return cls(kind=IntentKind.LISTEN_FOR_GUESS)

    @classmethod
    def listen_for_replay_answer(cls) -> Intent:
        return cls(kind=IntentKind.LISTEN_FOR_REPLAY_ANSWER)

    @classmethod
    def terminate(cls) -> Intent:
        return cls(kind=IntentKind.TERMINATE)

    @property
    def is_listen(self) -> bool:
        return self.kind in {IntentKind.LISTEN_FOR_GUESS, IntentKind.LISTEN_FOR_REPLAY_ANSWER}


class GuessOutcome(Enum):
    """Result of an accepted guess."""
    CORRECT = "correct"
    HIGHER = "higher"  # The secret is higher than the guess
    LOWER = "lower"
    EXHAUSTED = "exhausted"


@dataclass
class TransitionResult:
    """
    Result of applying an event.

    Contains:
    - Whether the event was accepted
    - New state (unchanged state for recoverable errors)
    - Intents for the host, in execution order
    - Error code for rejected guesses and answers
    """
    success: bool
    new_state: Any | None = None  # GameState
    intents: list[Intent] = field(default_factory=list)
    error: str | None = None
    error_code: GuessError | None = None

    # Set when a guess consumed an attempt
    guess: int | None = None
    outcome: GuessOutcome | None = None

    @classmethod
    def failure(cls, error: str, error_code: GuessError, state: Any | None = None) -> TransitionResult:
        """Create a failure result for an event the current phase cannot take."""
        return cls(success=False, new_state=state, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        intents: list[Intent] | None = None,
        error_code: GuessError | None = None,
        guess: int | None = None,
        outcome: GuessOutcome | None = None,
    ) -> TransitionResult:
        """Create a success result with new state."""
        return cls(
            success=True,
            new_state=state,
            intents=intents or [],
            error_code=error_code,
            guess=guess,
            outcome=outcome,
        )

    @property
    def messages(self) -> list[str]:
        """Messages of the SPEAK intents, in order."""
        return [i.message for i in self.intents if i.kind == IntentKind.SPEAK and i.message]

    @property
    def categories(self) -> list[MessageCategory]:
        return [i.category for i in self.intents if i.kind == IntentKind.SPEAK and i.category]
