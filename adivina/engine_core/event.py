"""
Event System - Stimuli delivered to the game by its host.

Events represent:
1. Game start (first session)
2. A recognized utterance from the speech collaborator
3. Completion of the last spoken message

All state changes flow through events.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import time


class EventType(Enum):
    """Types of events the game reacts to."""
    START = "start"
    UTTERANCE = "utterance"
    PLAYBACK_FINISHED = "playback_finished"


@dataclass(frozen=True)
class Event:
    """
    A single event to be applied to the game state.

    Events are applied one at a time; the host must not deliver an
    utterance while the previous one is still being answered.
    """
    event_type: EventType
    text: str | None = None
    timestamp: float = field(default_factory=time.time)

    @classmethod
    def start(cls) -> Event:
        """Factory for the game start event."""
        return cls(event_type=EventType.START)

    @classmethod
    def utterance(cls, text: str | None) -> Event:
        """Factory for a recognized utterance. None means nothing was recognized."""
        return cls(event_type=EventType.UTTERANCE, text=text or "")

    @classmethod
    def playback_finished(cls) -> Event:
        """Factory for the end of speech playback."""
        return cls(event_type=EventType.PLAYBACK_FINISHED)
