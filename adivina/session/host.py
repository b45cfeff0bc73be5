"""
Game Host - Executes the game's intents against speech collaborators.

The host loop:
1. Start the game, speak the intro
2. Report playback completion to the game
3. Resume listening when the game asks for it
4. Stop listening while an utterance is answered
5. Repeat until the game asks to terminate

Nothing here waits on its own: a speaker reports completion through a
callback and the host continues from there.
"""

from __future__ import annotations
from collections import deque
from enum import Enum
from typing import Callable
import logging

from ..engine_core.game import GuessGame
from ..engine_core.intent import Intent, IntentKind
from .speech import SpeechRecognizer, Speaker

logger = logging.getLogger(__name__)


class HostState(Enum):
    """State of the host."""
    IDLE = "idle"  # Not started
    SPEAKING = "speaking"
    LISTENING = "listening"
    PROCESSING = "processing"
    CLOSED = "closed"


class GameHost:
    """
    Drives one GuessGame with a recognizer and a speaker.

    Usage:
        host = GameHost(game, ConsoleRecognizer(), ConsoleSpeaker())
        host.run()
    """

    def __init__(
        self,
        game: GuessGame,
        recognizer: SpeechRecognizer,
        speaker: Speaker,
        on_terminate: Callable[[], None] | None = None,
    ):
        self.game = game
        self.recognizer = recognizer
        self.speaker = speaker
        self.on_terminate = on_terminate
        self.state = HostState.IDLE

        # Every Speak intent played, in order
        self.spoken: list[Intent] = []

        self._queue: deque[Intent] = deque()
        self._spoke_in_batch = False
        self._waiting_playback = False
        self._inside_speak = False

        self.recognizer.on_recognized(self.handle_utterance)

    @property
    def closed(self) -> bool:
        return self.state == HostState.CLOSED

    def start(self):
        """Start the game and play the intro."""
        if self.state != HostState.IDLE:
            return
        self._execute(self.game.start())

    def run(self):
        """
        Run until the game terminates or the recognizer runs dry.

        Only useful with pull-based recognizers; push-based ones deliver
        utterances through handle_utterance on their own.
        """
        self.start()
        while not self.closed and self.recognizer.pump():
            pass

    def handle_utterance(self, text: str):
        """Called by the recognizer with recognized text."""
        if self.state != HostState.LISTENING:
            logger.warning("Dropping utterance %r: host is %s", text, self.state.value)
            return

        logger.debug("Recognized: %r", text)
        self.recognizer.stop_listening()
        self.state = HostState.PROCESSING
        self._execute(self.game.on_utterance(text))

    def _execute(self, intents: list[Intent]):
        self._queue.extend(intents)
        self._drain()

    def _drain(self):
        while self._queue:
            intent = self._queue.popleft()

            if intent.kind == IntentKind.SPEAK:
                if not self._speak(intent):
                    # Resumed from _playback_done
                    return

            elif intent.is_listen:
                self.state = HostState.LISTENING
                self.recognizer.start_listening()

            elif intent.kind == IntentKind.TERMINATE:
                self._terminate()
                return

        if self._spoke_in_batch and not self.closed:
            self._spoke_in_batch = False
            self._execute(self.game.on_playback_finished())

    def _speak(self, intent: Intent) -> bool:
        """Play a message. Returns True if playback already finished."""
        self.state = HostState.SPEAKING
        self.spoken.append(intent)
        self._spoke_in_batch = True
        self._waiting_playback = True

        self._inside_speak = True
        try:
            self.speaker.speak(intent, self._playback_done)
        finally:
            self._inside_speak = False

        return not self._waiting_playback

    def _playback_done(self):
        self._waiting_playback = False
        if not self._inside_speak:
            self._drain()

    def _terminate(self):
        logger.info("Game terminated")
        self._queue.clear()
        self.recognizer.stop_listening()
        self.state = HostState.CLOSED
        if self.on_terminate:
            self.on_terminate()
