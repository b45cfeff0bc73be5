"""
Tests for the session manager.
"""

import pytest

from ..config import GameConfig
from ..engine_core.intent import MessageCategory
from ..session.manager import SessionManager, SessionState
from .conftest import fixed_secret


@pytest.fixture
def manager():
    return SessionManager(secret_source=fixed_secret(42))


@pytest.fixture
def quiet():
    return GameConfig(log_secret=False)


class TestSessionManager:
    """Tests for game lifecycle."""

    def test_create_starts_game(self, manager, quiet):
        session = manager.create_session(quiet)

        assert session.is_active()
        assert [i.category for i in session.last_intents] == [MessageCategory.INTRO]
        assert manager.get_session(session.session_id) is session
        assert manager.list_active_sessions() == [session.session_id]

    def test_ids_are_unique(self, manager, quiet):
        ids = {manager.create_session(quiet).session_id for _ in range(5)}
        assert len(ids) == 5

    def test_end_session(self, manager, quiet):
        session = manager.create_session(quiet)

        assert manager.end_session(session.session_id)
        assert session.state == SessionState.ABANDONED
        assert manager.get_session(session.session_id) is None
        assert not manager.end_session(session.session_id)

    def test_closed_game_not_active(self, manager, quiet):
        session = manager.create_session(quiet)
        game = session.game
        game.on_playback_finished()
        game.on_utterance("42")
        game.on_playback_finished()
        session.touch(game.on_utterance("no"))

        assert session.state == SessionState.CLOSED
        assert manager.list_active_sessions() == []

    def test_cleanup_removes_closed_and_idle(self, manager, quiet):
        idle = manager.create_session(quiet)
        fresh = manager.create_session(quiet)
        closed = manager.create_session(quiet)
        closed.state = SessionState.CLOSED
        idle.last_activity -= 7200

        removed = manager.cleanup_stale_sessions(max_idle_seconds=3600)

        assert sorted(removed) == sorted([idle.session_id, closed.session_id])
        assert manager.list_active_sessions() == [fresh.session_id]
        assert closed.state == SessionState.CLOSED
