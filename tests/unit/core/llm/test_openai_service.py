"""
Unit tests for OpenAI service completions.

Tests verify:
- Schema unwrapping helper works correctly
- complete sends the JSON schema response_format and messages
- Guardrails catch invalid schemas
- Backend and parsing failures surface as CompletionError
"""
import json
from unittest.mock import MagicMock

import httpx
import openai
import pytest

from core.errors import CompletionError
from core.llm.openai_service import OpenAIService, _retry_after_seconds, _unwrap_schema_spec
from core.llm.system_prompts import REFINE_MATCH_SCORE_SCHEMA


class TestUnwrapSchemaSpec:
    """Tests for the schema unwrapping helper."""

    def test_wrapper_schema_returns_name_strict_and_inner_schema(self):
        name, strict, raw_schema = _unwrap_schema_spec(REFINE_MATCH_SCORE_SCHEMA)

        assert name == "refine_match_score"
        assert strict is False
        assert raw_schema.get("type") == "object"
        assert "refinedMatchScore" in raw_schema["properties"]

    def test_raw_schema_passes_through_unchanged(self):
        raw = {"type": "object", "properties": {"foo": {"type": "string"}}}
        name, strict, result = _unwrap_schema_spec(raw)

        assert name == "completion_response"
        assert strict is False
        assert result == raw

    def test_wrapper_missing_strict_defaults_to_false(self):
        wrapped = {"name": "test", "schema": {"type": "object", "properties": {}}}
        name, strict, _ = _unwrap_schema_spec(wrapped)

        assert name == "test"
        assert strict is False


def _response(content):
    mock_message = MagicMock()
    mock_message.content = content
    mock_choice = MagicMock()
    mock_choice.message = mock_message
    mock_response = MagicMock()
    mock_response.choices = [mock_choice]
    return mock_response


class TestComplete:

    @pytest.fixture
    def service(self):
        """Create service with mocked client."""
        svc = OpenAIService(api_key="test", model="test-model", temperature=0.1, max_attempts=1)
        svc.client = MagicMock()
        svc.client.chat.completions.create.return_value = _response(
            json.dumps({"refinedMatchScore": 81, "reasoning": "ok"})
        )
        return svc

    def test_returns_parsed_json(self, service):
        data = service.complete("prompt", REFINE_MATCH_SCORE_SCHEMA)
        assert data == {"refinedMatchScore": 81, "reasoning": "ok"}

    def test_sends_json_schema_response_format(self, service):
        service.complete("prompt", REFINE_MATCH_SCORE_SCHEMA, system_prompt="be brief")

        kwargs = service.client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["temperature"] == 0.1
        assert kwargs["messages"] == [
            {"role": "system", "content": "be brief"},
            {"role": "user", "content": "prompt"},
        ]
        response_format = kwargs["response_format"]
        assert response_format["type"] == "json_schema"
        assert response_format["json_schema"]["name"] == "refine_match_score"
        assert response_format["json_schema"]["schema"] == REFINE_MATCH_SCORE_SCHEMA["schema"]

    def test_schema_not_mutated(self, service):
        before = json.dumps(REFINE_MATCH_SCORE_SCHEMA, sort_keys=True)
        service.complete("prompt", REFINE_MATCH_SCORE_SCHEMA)
        assert json.dumps(REFINE_MATCH_SCORE_SCHEMA, sort_keys=True) == before

    def test_invalid_schema_rejected(self, service):
        with pytest.raises(ValueError, match="Not a valid JSON Schema object"):
            service.complete("prompt", {"name": "x", "schema": {"type": "array"}})
        service.client.chat.completions.create.assert_not_called()

    @pytest.mark.parametrize("content", ["not json", None, "[1, 2]"])
    def test_unusable_output_raises_completion_error(self, service, content):
        service.client.chat.completions.create.return_value = _response(content)
        with pytest.raises(CompletionError):
            service.complete("prompt", REFINE_MATCH_SCORE_SCHEMA)

    def test_api_error_wrapped(self, service):
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        service.client.chat.completions.create.side_effect = openai.APIConnectionError(request=request)
        with pytest.raises(CompletionError):
            service.complete("prompt", REFINE_MATCH_SCORE_SCHEMA)

    def test_transient_error_retried(self, service):
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        service.max_attempts = 2
        service.client.chat.completions.create.side_effect = [
            openai.APIConnectionError(request=request),
            _response(json.dumps({"refinedMatchScore": 70})),
        ]
        # One exponential backoff step (1s) happens before the second attempt
        data = service.complete("prompt", REFINE_MATCH_SCORE_SCHEMA)
        assert data == {"refinedMatchScore": 70}
        assert service.client.chat.completions.create.call_count == 2


class TestRetryAfter:

    def test_reads_header(self):
        exc = MagicMock()
        exc.response.headers = {"retry-after": "3"}
        assert _retry_after_seconds(exc) == 3.0

    def test_missing_response(self):
        assert _retry_after_seconds(Exception("x")) == 0.0
