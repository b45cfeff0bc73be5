"""
Session Module - Hosts that drive the game.

A host connects one GuessGame to the outside world:
- GameHost executes intents against a recognizer and a speaker
- SessionManager keeps many games in memory for the HTTP API

Sessions are EPHEMERAL:
- No persistence to database
- A replay starts a fresh game session inside the same host
"""

from .speech import (
    SpeechRecognizer,
    QueueRecognizer,
    ConsoleRecognizer,
    Speaker,
    ConsoleSpeaker,
    build_recognize_request,
    extract_transcript,
)
from .host import GameHost, HostState
from .manager import SessionManager, Session, SessionState

__all__ = [
    "SpeechRecognizer",
    "QueueRecognizer",
    "ConsoleRecognizer",
    "Speaker",
    "ConsoleSpeaker",
    "build_recognize_request",
    "extract_transcript",
    "GameHost",
    "HostState",
    "SessionManager",
    "Session",
    "SessionState",
]
