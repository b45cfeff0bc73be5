"""
Replay answer classification ("¿Quieres jugar otra vez?").

Two matching policies:

- token: the answer is split into words and a word must be one of the
  markers exactly. "no sé" is negative, "bueno" is not.
- substring: multi-letter markers match anywhere in the answer and the
  single-letter shorthands must be the whole answer. "bueno" counts as
  negative because it contains "no"; "así" counts as affirmative.

Affirmative markers are checked before negative ones in both policies.
"""

from __future__ import annotations
from enum import Enum

from .number_parser import tokenize

AFFIRMATIVE_MARKERS = ("si", "sí", "vale")
NEGATIVE_MARKERS = ("no",)
AFFIRMATIVE_SHORTHANDS = ("s",)
NEGATIVE_SHORTHANDS = ("n",)

_PUNCTUATION = "¡!¿?\"'()"


class ReplayAnswer(Enum):
    YES = "yes"
    NO = "no"
    UNKNOWN = "unknown"


def classify_replay_answer(text: str | None, policy: str = "token") -> ReplayAnswer:
    """Classify an answer to the play-again question."""
    answer = (text or "").strip().lower()
    if not answer:
        return ReplayAnswer.UNKNOWN

    if policy == "substring":
        return _classify_substring(answer)
    if policy == "token":
        return _classify_tokens(answer)
    raise ValueError(f"Unknown replay match policy: {policy!r}")


def _classify_substring(answer: str) -> ReplayAnswer:
    if any(m in answer for m in AFFIRMATIVE_MARKERS) or answer in AFFIRMATIVE_SHORTHANDS:
        return ReplayAnswer.YES
    if any(m in answer for m in NEGATIVE_MARKERS) or answer in NEGATIVE_SHORTHANDS:
        return ReplayAnswer.NO
    return ReplayAnswer.UNKNOWN


def _classify_tokens(answer: str) -> ReplayAnswer:
    words = {t.strip(_PUNCTUATION) for t in tokenize(answer)}
    words.discard("")

    if words & set(AFFIRMATIVE_MARKERS + AFFIRMATIVE_SHORTHANDS):
        return ReplayAnswer.YES
    if words & set(NEGATIVE_MARKERS + NEGATIVE_SHORTHANDS):
        return ReplayAnswer.NO
    return ReplayAnswer.UNKNOWN
