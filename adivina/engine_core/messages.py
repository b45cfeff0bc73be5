"""
Spanish messages spoken by the game.

Templates use str.format placeholders. The catalog can be replaced per game
(e.g. unaccented text for a TTS voice that mispronounces accents).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from .intent import MessageCategory

DEFAULT_TEMPLATES: dict[MessageCategory, str] = {
    MessageCategory.INTRO: (
        "He elegido un número entre {min_number} y {max_number}. "
        "Tienes {max_attempts} {attempts_word} para adivinarlo. Dime un número."
    ),
    MessageCategory.HIGHER: "Mayor. Te quedan {attempts_remaining} {remaining_word}.",
    MessageCategory.LOWER: "Menor. Te quedan {attempts_remaining} {remaining_word}.",
    MessageCategory.VICTORY: "¡Correcto! Has adivinado el número {secret}.",
    MessageCategory.DEFEAT: "Has agotado tus intentos. El número era {secret}.",
    MessageCategory.NOT_UNDERSTOOD: (
        "No he entendido. Por favor, dime un número del {min_number} al {max_number}."
    ),
    MessageCategory.OUT_OF_RANGE: "Solo son válidos números entre {min_number} y {max_number}.",
    MessageCategory.REPEATED: "Ese número ya lo has dicho.",
    MessageCategory.ASK_REPLAY: "¿Quieres jugar otra vez? Responde sí o no.",
    MessageCategory.REPLAY_ACK: "¡Muy bien! Vamos a jugar otra vez.",
    MessageCategory.REPLAY_NOT_UNDERSTOOD: (
        "No te he entendido. ¿Quieres jugar otra vez? Responde sí o no."
    ),
    MessageCategory.FAREWELL: "Gracias por jugar. Hasta pronto.",
}


def attempts_word(count: int) -> str:
    return "intento" if count == 1 else "intentos"


def remaining_word(count: int) -> str:
    return "intento restante" if count == 1 else "intentos restantes"


@dataclass(frozen=True)
class MessageCatalog:
    """Renders message categories into spoken text."""
    templates: dict[MessageCategory, str] = field(
        default_factory=lambda: dict(DEFAULT_TEMPLATES)
    )

    def render(self, category: MessageCategory, **params: Any) -> str:
        template = self.templates.get(category)
        if template is None:
            raise KeyError(f"No message template for category: {category.value}")

        values = dict(params)
        if "max_attempts" in values:
            values.setdefault("attempts_word", attempts_word(values["max_attempts"]))
        if "attempts_remaining" in values:
            values.setdefault("remaining_word", remaining_word(values["attempts_remaining"]))
        return template.format(**values)

    def with_overrides(self, overrides: dict[MessageCategory, str]) -> MessageCatalog:
        templates = dict(self.templates)
        templates.update(overrides)
        return MessageCatalog(templates=templates)
