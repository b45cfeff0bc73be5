"""
Speech collaborators - Interfaces the host drives.

A recognizer turns microphone audio into text and reports it through
on_recognized callbacks. A speaker plays a Speak intent (recorded clip or
synthesized voice) and calls on_done once playback has finished.

Any back-end (OS dictation, a cloud speech-to-text client, a console)
implements the same interface, so the game never knows which one is used.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Iterable
import base64
import json
import logging
import time

from ..engine_core.intent import Intent
from ..engine_core.number_parser import recognition_phrases

logger = logging.getLogger(__name__)

RecognizedCallback = Callable[[str], None]


class SpeechRecognizer(ABC):
    """
    Abstract base class for speech recognizers.

    Subclasses call _emit(text) when an utterance is recognized. An empty
    string means something was heard but nothing was recognized.
    """

    def __init__(self):
        self._callbacks: list[RecognizedCallback] = []
        self._listening = False

    @property
    def is_listening(self) -> bool:
        return self._listening

    def on_recognized(self, callback: RecognizedCallback):
        """Register a callback for recognized text."""
        self._callbacks.append(callback)

    def start_listening(self):
        self._listening = True

    def stop_listening(self):
        self._listening = False

    def pump(self) -> bool:
        """
        Give a pull-based recognizer the chance to deliver one utterance.

        Returns False when no more input will ever arrive. Push-based
        recognizers (background threads, callbacks) keep the default.
        """
        return False

    def _emit(self, text: str):
        for callback in list(self._callbacks):
            callback(text)


class QueueRecognizer(SpeechRecognizer):
    """
    Recognizer fed with canned utterances.

    Each pump() delivers the next queued utterance if the host is listening.
    """

    def __init__(self, utterances: Iterable[str] = ()):
        super().__init__()
        self._queue: deque[str] = deque(utterances)

    def push(self, text: str):
        self._queue.append(text)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def pump(self) -> bool:
        if not self._queue:
            return False
        if not self._listening:
            return True
        self._emit(self._queue.popleft())
        return True


class ConsoleRecognizer(SpeechRecognizer):
    """Reads typed utterances from the console."""

    def __init__(self, input_fn: Callable[[str], str] | None = None, prompt: str = "> "):
        super().__init__()
        self.input_fn = input_fn
        self.prompt = prompt

    def pump(self) -> bool:
        if not self._listening:
            return True
        read = self.input_fn or input
        try:
            text = read(self.prompt)
        except EOFError:
            return False
        self._emit(text)
        return True


class Speaker(ABC):
    """
    Abstract base class for speakers.

    speak() must call on_done exactly once, when the message has been
    played. Blocking speakers call it before returning.
    """

    @abstractmethod
    def speak(self, intent: Intent, on_done: Callable[[], None]):
        pass


class ConsoleSpeaker(Speaker):
    """Prints messages instead of playing them."""

    def __init__(
        self,
        pause: float = 0.0,
        output: Callable[[str], Any] = print,
        sleep: Callable[[float], Any] = time.sleep,
    ):
        self.pause = pause
        self.output = output
        self.sleep = sleep

    def speak(self, intent: Intent, on_done: Callable[[], None]):
        self.output(intent.message or "")
        if self.pause:
            self.sleep(self.pause)
        on_done()


# =============================================================================
# Cloud speech-to-text payloads
# =============================================================================

def build_recognize_request(
    audio: bytes,
    language_code: str = "es-ES",
    single_word_mode: bool = True,
    boost: float = 20,
) -> dict[str, Any]:
    """
    Build the JSON body of a Google Speech-to-Text v1 speech:recognize call.

    audio is 16-bit PCM. In single word mode the recognizer is tuned for
    short commands and biased towards the number vocabulary.
    """
    config: dict[str, Any] = {"languageCode": language_code}
    if single_word_mode:
        config["model"] = "command_and_search"
        config["speechContexts"] = [{"phrases": recognition_phrases(), "boost": boost}]

    return {
        "config": config,
        "audio": {"content": base64.b64encode(audio).decode("ascii")},
    }


def extract_transcript(response: str | dict[str, Any] | None) -> str:
    """
    Extract the first transcript from a speech:recognize response.

    Returns "" when the response holds no transcript, which the game treats
    as an utterance it did not understand.
    """
    if not response:
        return ""

    if isinstance(response, str):
        try:
            response = json.loads(response)
        except json.JSONDecodeError:
            logger.warning("Speech response is not valid JSON")
            return ""

    if not isinstance(response, dict):
        return ""

    for result in response.get("results") or []:
        for alternative in result.get("alternatives") or []:
            transcript = alternative.get("transcript")
            if transcript:
                return transcript.strip()

    return ""
