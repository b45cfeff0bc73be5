"""
Tests for API request and response schemas.
"""

import pytest
from pydantic import ValidationError

from ..api.schemas import (
    CreateGameRequest,
    ErrorCode,
    ErrorResponse,
    GameListResponse,
    ReplayMatch,
    UtteranceRequest,
)


class TestRequests:
    """Tests for request models."""

    def test_create_defaults(self):
        request = CreateGameRequest()

        assert request.min_number == 0
        assert request.max_number == 100
        assert request.max_attempts == 5
        assert request.replay_match == ReplayMatch.TOKEN
        assert request.seed is None

    def test_replay_match_from_string(self):
        assert CreateGameRequest(replay_match="substring").replay_match == ReplayMatch.SUBSTRING

    @pytest.mark.parametrize("kwargs", [{"max_attempts": 0}, {"replay_match": "fuzzy"}])
    def test_create_rejects(self, kwargs):
        with pytest.raises(ValidationError):
            CreateGameRequest(**kwargs)

    def test_utterance_defaults_to_empty(self):
        assert UtteranceRequest().text == ""


class TestResponses:
    """Tests for response models."""

    def test_error_response_json(self):
        error = ErrorResponse(error="Game x not found", error_code=ErrorCode.GAME_NOT_FOUND)

        assert error.model_dump(mode="json") == {
            "error": "Game x not found",
            "error_code": "GAME_NOT_FOUND",
            "details": None,
        }

    def test_game_list_defaults(self):
        assert GameListResponse().model_dump() == {"games": [], "count": 0}

    def test_error_codes_are_upper_snake_case(self):
        for code in ErrorCode:
            assert code.value == code.value.upper()

    def test_every_error_code_is_produced(self):
        """Only codes the service or app can return are declared."""
        assert {code.value for code in ErrorCode} == {
            "GAME_NOT_FOUND",
            "INVALID_CONFIG",
            "INVALID_EVENT",
            "VALIDATION_ERROR",
        }


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    def _schema(self):
        from adivina.api.app import app
        from fastapi.openapi.utils import get_openapi

        return get_openapi(title=app.title, version=app.version, routes=app.routes)

    def test_response_models_in_schema(self):
        """Response models appear in OpenAPI schema."""
        schemas = self._schema()["components"]["schemas"]

        for name in ["GameResponse", "IntentInfo", "GameListResponse", "ErrorResponse"]:
            assert name in schemas, f"Missing schema: {name}"

    def test_game_endpoints_documented(self):
        paths = self._schema()["paths"]

        assert "post" in paths["/api/v1/games"]
        assert "post" in paths["/api/v1/games/{game_id}/utterances"]
        assert "post" in paths["/api/v1/games/{game_id}/playback-finished"]
        assert "delete" in paths["/api/v1/games/{game_id}"]
