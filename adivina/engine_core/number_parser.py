"""
Number Parser - Extracts an integer from recognized Spanish speech.

Recognizers return free-form text ("creo que es el 42", "cuarenta y dos",
"Veintidós."). The parser scans the utterance token by token and returns
the first number it can resolve:

- Literal base-10 integers ("42", "-5")
- Spanish number words from cero to cien
- "veinti-" compounds (veintiuno ... veintinueve)
- "X y Y" compounds (treinta y cinco ... noventa y nueve)

Numbers above cien are not supported as words.
"""

from __future__ import annotations
from dataclasses import dataclass
import re

_TOKEN_SEPARATORS = re.compile(r"[\s,.:;]+")
_INTEGER = re.compile(r"[+-]?[0-9]+")

# Characters trimmed from a token before word lookup.
_TOKEN_TRIM = "¡!¿?\"'()"

UNIT_WORDS: dict[str, int] = {
    "uno": 1,
    "dos": 2,
    "tres": 3,
    "cuatro": 4,
    "cinco": 5,
    "seis": 6,
    "siete": 7,
    "ocho": 8,
    "nueve": 9,
}

# Suffixes accepted after "veinti"; recognizers often keep the written accent.
VEINTI_SUFFIXES: dict[str, int] = {
    **UNIT_WORDS,
    "ún": 1,
    "dós": 2,
    "trés": 3,
    "séis": 6,
}

TENS_WORDS: dict[str, int] = {
    "veinte": 20,
    "treinta": 30,
    "cuarenta": 40,
    "cincuenta": 50,
    "sesenta": 60,
    "setenta": 70,
    "ochenta": 80,
    "noventa": 90,
}

NUMBER_WORDS: dict[str, int] = {
    "cero": 0,
    **UNIT_WORDS,
    "diez": 10,
    "once": 11,
    "doce": 12,
    "trece": 13,
    "catorce": 14,
    "quince": 15,
    "dieciseis": 16,
    "dieciséis": 16,
    "diecisiete": 17,
    "dieciocho": 18,
    "diecinueve": 19,
    "veinte": 20,
    "veintiuno": 21,
    "veintidos": 22,
    "veintidós": 22,
    "veintitres": 23,
    "veintitrés": 23,
    "veinticuatro": 24,
    "veinticinco": 25,
    "veintiseis": 26,
    "veintiséis": 26,
    "veintisiete": 27,
    "veintiocho": 28,
    "veintinueve": 29,
    "treinta": 30,
    "cuarenta": 40,
    "cincuenta": 50,
    "sesenta": 60,
    "setenta": 70,
    "ochenta": 80,
    "noventa": 90,
    "cien": 100,
}

COMPOUND_JOINER = "y"


def tokenize(text: str) -> list[str]:
    """Split an utterance on whitespace and , . : ; dropping empty tokens."""
    if not text:
        return []
    return [token for token in _TOKEN_SEPARATORS.split(text) if token]


@dataclass(frozen=True)
class NumberParser:
    """
    Parses recognized speech into an integer.

    Stateless. The first number found in the utterance wins, even if a
    later one is more plausible.
    """

    def parse(self, text: str | None) -> int | None:
        """
        Return the first number in the utterance, or None if there is none.
        """
        tokens = tokenize(text or "")

        for i, token in enumerate(tokens):
            stripped = token.strip(_TOKEN_TRIM)
            if _INTEGER.fullmatch(stripped):
                return int(stripped)

            value = self.resolve_word(stripped)
            if value is None:
                continue

            # "treinta y cinco" arrives as three tokens
            if value in TENS_WORDS.values() and i + 2 < len(tokens):
                joiner = tokens[i + 1].strip(_TOKEN_TRIM).lower()
                unit = UNIT_WORDS.get(tokens[i + 2].strip(_TOKEN_TRIM).lower())
                if joiner == COMPOUND_JOINER and unit is not None:
                    return value + unit

            return value

        return None

    def resolve_word(self, word: str) -> int | None:
        """
        Resolve a single Spanish number word (case-insensitive).

        Also accepts a whitespace-joined "X y Y" phrase such as
        "treinta y cinco".
        """
        word = word.strip().strip(_TOKEN_TRIM).lower()
        if not word:
            return None

        if word in NUMBER_WORDS:
            return NUMBER_WORDS[word]

        if word.startswith("veinti"):
            unit = VEINTI_SUFFIXES.get(word[6:])
            if unit is not None:
                return 20 + unit

        parts = word.split()
        if len(parts) == 3 and parts[1] == COMPOUND_JOINER:
            return self._resolve_compound(parts[0], parts[2])

        return None

    def _resolve_compound(self, tens_word: str, unit_word: str) -> int | None:
        """Resolve "<tens> y <unit>" where tens >= 20 and unit < 10."""
        tens = TENS_WORDS.get(tens_word)
        unit = UNIT_WORDS.get(unit_word)
        if tens is None or unit is None:
            return None
        return tens + unit


def parse_number(text: str | None) -> int | None:
    """
    Convenience function to parse an utterance.

    Creates a NumberParser and parses the text.
    """
    return NumberParser().parse(text)


def recognition_phrases() -> list[str]:
    """
    Phrases to boost in a speech recognizer's context.

    Digits 0-10, the tens up to 100, and the matching base words.
    """
    digits = [str(n) for n in range(0, 11)] + [str(n) for n in range(20, 101, 10)]
    words = [w for w, n in NUMBER_WORDS.items() if n <= 10]
    words += list(TENS_WORDS.keys()) + ["cien"]
    return digits + words
