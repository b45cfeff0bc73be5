"""
Game configuration.

One GameConfig is fixed per game. Hosts build it explicitly or from
environment variables:

    ADIVINA_MIN             lower bound of the guess range (default 0)
    ADIVINA_MAX             upper bound of the guess range (default 100)
    ADIVINA_MAX_ATTEMPTS    attempts per session (default 5)
    ADIVINA_LOG_SECRET      log the secret for debugging (default on)
    ADIVINA_REPLAY_MATCH    "token" or "substring" (default "token")
    ADIVINA_MESSAGE_PAUSE   seconds hosts wait between messages (default 0.5)
    ADIVINA_SEED            seed for the secret generator (default unset)
"""

from __future__ import annotations
from dataclasses import dataclass
import os

REPLAY_MATCH_POLICIES = ("token", "substring")

_TRUE_VALUES = {"1", "true", "yes", "on", "si", "sí"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class GameConfig:
    """
    Settings for a guessing game.

    min_number/max_number bound the secret and the accepted guesses
    (both inclusive). message_pause is only used by hosts for pacing.
    """
    min_number: int = 0
    max_number: int = 100
    max_attempts: int = 5
    log_secret: bool = True
    replay_match: str = "token"
    message_pause: float = 0.5
    seed: int | None = None

    def __post_init__(self):
        if self.min_number > self.max_number:
            raise ValueError(
                f"min_number ({self.min_number}) must not exceed max_number ({self.max_number})"
            )
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.replay_match not in REPLAY_MATCH_POLICIES:
            raise ValueError(
                f"Unknown replay_match policy: {self.replay_match!r} "
                f"(expected one of {', '.join(REPLAY_MATCH_POLICIES)})"
            )
        if self.message_pause < 0:
            raise ValueError("message_pause must not be negative")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> GameConfig:
        """Build a config from ADIVINA_* environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()

        seed = _get_int(env, "ADIVINA_SEED", None)

        return cls(
            min_number=_get_int(env, "ADIVINA_MIN", defaults.min_number),
            max_number=_get_int(env, "ADIVINA_MAX", defaults.max_number),
            max_attempts=_get_int(env, "ADIVINA_MAX_ATTEMPTS", defaults.max_attempts),
            log_secret=_get_bool(env, "ADIVINA_LOG_SECRET", defaults.log_secret),
            replay_match=env.get("ADIVINA_REPLAY_MATCH", defaults.replay_match).strip().lower(),
            message_pause=_get_float(env, "ADIVINA_MESSAGE_PAUSE", defaults.message_pause),
            seed=seed,
        )


def _get_int(env, name: str, default: int | None) -> int | None:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _get_float(env, name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _get_bool(env, name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")
