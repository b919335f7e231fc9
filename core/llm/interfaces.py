"""
LLM Provider Interface - Abstract base for text-completion providers.

This module defines the interface the match-score refiner talks to
(OpenAI, Ollama and any other OpenAI-compatible endpoint).
"""
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional


class LLMProvider(ABC):
    """
    Abstract Interface for text-completion providers.
    """

    @abstractmethod
    def complete(
        self,
        prompt: str,
        schema_spec: Dict[str, Any],
        system_prompt: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Run a single prompt and return the structured output.

        Args:
            prompt: Fully interpolated user prompt
            schema_spec: Either a wrapped spec {'name', 'strict', 'schema'} or raw JSON schema
            system_prompt: Optional system instruction

        Raises:
            CompletionError: backend failure or output that is not a JSON object
        """
        pass
