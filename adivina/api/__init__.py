"""
API Module - HTTP interface for voice clients.

Exposes the engine via REST API. The client:
1. Creates a game and plays the intro
2. Reports when playback finishes
3. Sends recognized speech
4. Executes the returned intents

All state is in memory. No accounts, no persistence.
"""

from .schemas import (
    # Requests
    CreateGameRequest,
    UtteranceRequest,
    # Responses
    GameResponse,
    GameListResponse,
    EndGameResponse,
    HealthResponse,
    ErrorResponse,
    # Shared
    IntentInfo,
    ErrorCode,
    GameStatus,
    ReplayMatch,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateGameRequest",
    "UtteranceRequest",
    # Responses
    "GameResponse",
    "GameListResponse",
    "EndGameResponse",
    "HealthResponse",
    "ErrorResponse",
    # Shared
    "IntentInfo",
    "ErrorCode",
    "GameStatus",
    "ReplayMatch",
    # Service
    "APIService",
    "create_app",
]
