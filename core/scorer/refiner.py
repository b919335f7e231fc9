#!/usr/bin/env python3
"""
Match Score Refiner - LLM-backed adjustment of the initial match score.

The refiner embeds the job description, candidate profile and initial score
in a fixed prompt, validates the structured output and guarantees a score
in [0, 100]:

- Out-of-range scores are clamped and flagged (``clamped=True``)
- Backend errors or malformed output keep the initial score (``fallback=True``)

Refinement is an enrichment: it never raises for backend problems, only for
invalid input.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity import RetryCallState

from core.errors import CompletionError
from core.llm.interfaces import LLMProvider
from core.llm.system_prompts import (
    REFINE_MATCH_SCORE_SYSTEM_PROMPT,
    REFINE_MATCH_SCORE_PROMPT_TEMPLATE,
    REFINE_MATCH_SCORE_SCHEMA,
)
from core.scorer.bounds import validate_score, clamp_score, MIN_SCORE, MAX_SCORE

logger = logging.getLogger(__name__)

RETRYABLE_ERRORS = (CompletionError, ValidationError, TimeoutError, ConnectionError)


class RefineMatchScoreOutput(BaseModel):
    """Schema the completion output must satisfy."""
    model_config = ConfigDict(populate_by_name=True)

    # Numbers only: booleans and numeric strings are rejected
    refined_match_score: float = Field(alias="refinedMatchScore", strict=True, allow_inf_nan=False)
    reasoning: Optional[str] = None


@dataclass
class RefinementResult:
    refined_match_score: float
    reasoning: Optional[str] = None
    clamped: bool = False
    fallback: bool = False
    error: Optional[str] = None


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception()
    logger.warning(
        "Match score refinement attempt %s failed: %s. Retrying.",
        retry_state.attempt_number, exc,
    )


class MatchScoreRefiner:
    """Refines an initial match score through an LLMProvider."""

    def __init__(self, llm: LLMProvider, retries: int = 1, backoff_seconds: float = 1.0):
        self.llm = llm
        self.retries = retries
        self.backoff_seconds = backoff_seconds
        self._complete = retry(
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            wait=wait_exponential(multiplier=backoff_seconds, max=30),
            stop=stop_after_attempt(retries + 1),
            before_sleep=_log_retry,
            reraise=True,
        )(self._complete_once)

    @staticmethod
    def build_prompt(initial_match_score: float, job_description: str, candidate_profile: str) -> str:
        return REFINE_MATCH_SCORE_PROMPT_TEMPLATE.format(
            job_description=job_description,
            candidate_profile=candidate_profile,
            initial_match_score=f"{initial_match_score:g}",
        )

    def _complete_once(self, prompt: str) -> RefineMatchScoreOutput:
        data = self.llm.complete(
            prompt,
            REFINE_MATCH_SCORE_SCHEMA,
            system_prompt=REFINE_MATCH_SCORE_SYSTEM_PROMPT,
        )
        return RefineMatchScoreOutput.model_validate(data)

    def refine(
        self,
        initial_match_score: float,
        job_description: str,
        candidate_profile: str
    ) -> RefinementResult:
        """
        Refine ``initial_match_score`` using the job and candidate texts.

        Raises:
            InvalidScoreError: ``initial_match_score`` is not a number in [0, 100]
        """
        initial = validate_score(initial_match_score)
        prompt = self.build_prompt(initial, job_description, candidate_profile)

        try:
            output = self._complete(prompt)
        except RETRYABLE_ERRORS as e:
            logger.warning(f"Match score refinement failed, keeping initial score {initial:g}: {e}")
            return RefinementResult(refined_match_score=initial, fallback=True, error=str(e))
        except Exception as e:
            logger.exception("Unexpected error from completion backend, keeping initial score")
            return RefinementResult(refined_match_score=initial, fallback=True, error=str(e))

        refined = float(output.refined_match_score)
        if MIN_SCORE <= refined <= MAX_SCORE:
            return RefinementResult(refined_match_score=refined, reasoning=output.reasoning)

        logger.warning(f"Refined score {refined:g} outside [0, 100], clamping")
        return RefinementResult(
            refined_match_score=clamp_score(refined),
            reasoning=output.reasoning,
            clamped=True,
        )
