"""
Session Manager - Creates and tracks games for multi-player hosts.

LIFECYCLE:
1. Client creates a game → new GuessGame, intro intents returned
2. Client reports playback completion and recognized utterances
3. Game closes (player said "no") or client ends it → entry removed

PERSISTENCE RULES:
- NO database: games live in memory only
- A restart loses every game
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import threading
import time
import uuid

from ..config import GameConfig
from ..engine_core.game import GuessGame
from ..engine_core.intent import Intent
from ..engine_core.reducer import SecretSource

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a hosted game."""
    ACTIVE = "active"
    CLOSED = "closed"  # Player declined to play again
    ABANDONED = "abandoned"  # Ended by the client or cleanup


@dataclass
class Session:
    """
    A hosted game.

    The lock serializes events for one game; the game itself is not
    thread-safe.
    """
    session_id: str
    game: GuessGame
    created_at: float
    state: SessionState = SessionState.ACTIVE
    last_activity: float = 0.0
    last_intents: list[Intent] = field(default_factory=list)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE and not self.game.is_closed

    def touch(self, intents: list[Intent]):
        self.last_intents = intents
        self.last_activity = time.time()
        if self.game.is_closed:
            self.state = SessionState.CLOSED


class SessionManager:
    """
    Manages hosted games.

    Responsibilities:
    - Create games from configs
    - Track active games
    - Clean up finished and stale games
    """

    def __init__(self, secret_source: SecretSource | None = None):
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()
        self.secret_source = secret_source

    def create_session(self, config: GameConfig | None = None) -> Session:
        """
        Create a game and start it.

        The intro intents are stored in last_intents.
        """
        session_id = str(uuid.uuid4())
        game = GuessGame(config=config, secret_source=self.secret_source)
        now = time.time()
        session = Session(session_id=session_id, game=game, created_at=now, last_activity=now)

        with session.lock:
            session.touch(game.start())

        with self._lock:
            self._sessions[session_id] = session

        logger.info("Created game %s", session_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a game by ID."""
        with self._lock:
            return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "abandoned") -> bool:
        """
        Remove a game from memory.

        Returns False if there was no such game.
        """
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if not session:
            return False

        if session.state == SessionState.ACTIVE:
            session.state = SessionState.ABANDONED
        logger.info("Ended game %s (%s)", session_id, reason)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active games."""
        with self._lock:
            return [
                sid for sid, session in self._sessions.items()
                if session.is_active()
            ]

    def cleanup_stale_sessions(self, max_idle_seconds: int = 3600) -> list[str]:
        """
        Remove closed games and games idle for longer than max_idle_seconds.

        Returns the removed IDs.
        """
        now = time.time()
        with self._lock:
            to_remove = [
                sid for sid, session in self._sessions.items()
                if not session.is_active() or now - session.last_activity > max_idle_seconds
            ]

        for session_id in to_remove:
            self.end_session(session_id, reason="stale")
        return to_remove
