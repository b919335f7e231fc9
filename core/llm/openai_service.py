"""
OpenAI Service - LLM implementation using the OpenAI API.

Provides single-prompt structured completions in JSON Schema mode.
"""
from typing import Dict, Any, Optional, Tuple
import copy
import json
import logging

import openai
from openai import OpenAI
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity import RetryCallState

from core.errors import CompletionError
from core.llm.interfaces import LLMProvider

logger = logging.getLogger(__name__)

TRANSIENT_ERRORS = (
    openai.RateLimitError,
    openai.APITimeoutError,
    openai.APIConnectionError,
    openai.InternalServerError,
)


# ---------------------------------------------------------------------------
# Retry helpers
# ---------------------------------------------------------------------------

def _log_retry(retry_state: RetryCallState) -> None:
    """Log a warning before each retry sleep."""
    exc = retry_state.outcome.exception()
    wait = retry_state.next_action.sleep if retry_state.next_action else 0
    logger.warning(
        "Completion call failed (attempt %s, %s). Waiting %.1fs before retry.",
        retry_state.attempt_number, type(exc).__name__, wait,
    )


def _retry_after_seconds(exc: BaseException) -> float:
    """Seconds requested by a ``retry-after`` header, or 0.0."""
    response = getattr(exc, "response", None)
    if response is None:
        return 0.0
    try:
        return float(response.headers.get("retry-after", "") or 0)
    except (TypeError, ValueError):
        return 0.0


def _wait_respecting_retry_after(retry_state: RetryCallState) -> float:
    """Honour the server's retry-after on rate limits, else exponential backoff."""
    exc = retry_state.outcome.exception()
    if isinstance(exc, openai.RateLimitError):
        wait = _retry_after_seconds(exc)
        if wait > 0:
            return min(wait, 60)  # safety cap

    # Fallback: exponential backoff 1 -> 2 -> 4 ... capped at 20s
    return wait_exponential(multiplier=1, min=1, max=20)(retry_state)


def _unwrap_schema_spec(spec: Dict[str, Any]) -> Tuple[str, bool, Dict[str, Any]]:
    """Split a wrapped spec {'name', 'strict', 'schema'} into its parts.

    Raw JSON schemas are returned with the default name and strict=False.
    """
    if isinstance(spec, dict) and "schema" in spec and "name" in spec:
        return spec.get("name", "completion_response"), bool(spec.get("strict", False)), spec["schema"]
    return "completion_response", False, spec


class OpenAIService(LLMProvider):
    """
    OpenAI (or OpenAI-compatible) completion service.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: str = "gpt-4o-mini",
        temperature: float = 0.2,
        timeout_seconds: float = 30.0,
        max_attempts: int = 3
    ):
        client_kwargs = {'timeout': timeout_seconds}
        if api_key:
            client_kwargs['api_key'] = api_key
        if base_url:
            client_kwargs['base_url'] = base_url

        self.client = OpenAI(**client_kwargs)
        self.model = model
        self.temperature = temperature
        self.max_attempts = max_attempts

    def complete(
        self,
        prompt: str,
        schema_spec: Dict[str, Any],
        system_prompt: Optional[str] = None
    ) -> Dict[str, Any]:
        name, strict, raw_schema = _unwrap_schema_spec(schema_spec)
        runtime_schema = copy.deepcopy(raw_schema)

        if runtime_schema.get("type") != "object" or "properties" not in runtime_schema:
            raise ValueError(f"Not a valid JSON Schema object. Top-level keys: {list(runtime_schema.keys())}")

        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        call = retry(
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            wait=_wait_respecting_retry_after,
            stop=stop_after_attempt(self.max_attempts),
            before_sleep=_log_retry,
            reraise=True,
        )(self.client.chat.completions.create)

        try:
            response = call(
                model=self.model,
                messages=messages,
                temperature=self.temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": name,
                        "schema": runtime_schema,
                        "strict": strict,
                    },
                },
            )
        except openai.OpenAIError as e:
            logger.error(f"Completion request to {self.model} failed: {e}")
            raise CompletionError(str(e)) from e

        try:
            content = response.choices[0].message.content
            data = json.loads(content)
        except (json.JSONDecodeError, IndexError, AttributeError, TypeError) as e:
            logger.error(f"Failed to parse completion response: {e}")
            raise CompletionError(f"Unparseable completion output: {e}") from e

        if not isinstance(data, dict):
            raise CompletionError(f"Expected a JSON object, got {type(data).__name__}")

        logger.debug(f"Completion ({self.model}) returned keys: {list(data.keys())}")
        return data
