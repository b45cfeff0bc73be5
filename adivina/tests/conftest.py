"""
Pytest fixtures for Adivina tests.
"""

import pytest

from ..config import GameConfig
from ..engine_core import GuessGame, Intent, Reducer
from ..session.speech import Speaker

SECRET = 42


def fixed_secret(value: int):
    """Secret source that always draws the same number."""
    def source(low: int, high: int) -> int:
        return value
    return source


def sequence_secret(*values: int):
    """Secret source that draws the given numbers in order."""
    remaining = iter(values)

    def source(low: int, high: int) -> int:
        return next(remaining)
    return source


class RecordingSpeaker(Speaker):
    """Speaker that records intents and finishes playback immediately."""

    def __init__(self):
        self.intents: list[Intent] = []

    @property
    def messages(self) -> list[str]:
        return [i.message for i in self.intents]

    @property
    def categories(self):
        return [i.category for i in self.intents]

    def speak(self, intent, on_done):
        self.intents.append(intent)
        on_done()


class DeferredSpeaker(Speaker):
    """Speaker whose playback finishes only when the test says so."""

    def __init__(self):
        self.intents: list[Intent] = []
        self._pending = []

    @property
    def is_playing(self) -> bool:
        return bool(self._pending)

    def speak(self, intent, on_done):
        self.intents.append(intent)
        self._pending.append(on_done)

    def finish(self):
        self._pending.pop(0)()


@pytest.fixture
def config() -> GameConfig:
    """Default range and attempts, secret logging off."""
    return GameConfig(log_secret=False)


@pytest.fixture
def reducer(config: GameConfig) -> Reducer:
    """Reducer whose secret is always 42."""
    return Reducer(config=config, secret_source=fixed_secret(SECRET))


@pytest.fixture
def game(config: GameConfig) -> GuessGame:
    """Unstarted game whose secret is always 42."""
    return GuessGame(config=config, secret_source=fixed_secret(SECRET))


@pytest.fixture
def listening_game(game: GuessGame) -> GuessGame:
    """Game past the intro, waiting for the first guess."""
    game.start()
    game.on_playback_finished()
    return game
