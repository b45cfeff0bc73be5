"""
Engine Core - Number parsing and the guessing dialogue state machine.

The engine is the runtime that:
1. Draws a secret number per session
2. Parses recognized speech into guesses
3. Applies events via the reducer
4. Emits intents (speak, listen, terminate) for the host to execute
"""

from .number_parser import NumberParser, parse_number, recognition_phrases, tokenize
from .state import GamePhase, GameSession, GameState
from .event import Event, EventType
from .intent import (
    Intent,
    IntentKind,
    MessageCategory,
    GuessError,
    GuessOutcome,
    TransitionResult,
)
from .messages import MessageCatalog
from .answers import ReplayAnswer, classify_replay_answer
from .reducer import Reducer, apply_event
from .game import GuessGame, log_secret

__all__ = [
    "NumberParser",
    "parse_number",
    "recognition_phrases",
    "tokenize",
    "GamePhase",
    "GameSession",
    "GameState",
    "Event",
    "EventType",
    "Intent",
    "IntentKind",
    "MessageCategory",
    "GuessError",
    "GuessOutcome",
    "TransitionResult",
    "MessageCatalog",
    "ReplayAnswer",
    "classify_replay_answer",
    "Reducer",
    "apply_event",
    "GuessGame",
    "log_secret",
]
