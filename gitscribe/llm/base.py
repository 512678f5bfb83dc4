"""Abstract commit message generator for gitscribe."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from gitscribe.llm.models import LLMConfig, LLMResponse, MissingCredentialError
from gitscribe.prompts import build_prompts

logger = logging.getLogger(__name__)

EXTRACTION_FAILED_MESSAGE = "Failed to extract commit message from response"


def clean_message(text: str) -> str:
    """Trim whitespace and one layer of wrapping double quotes."""
    text = text.strip()
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        text = text[1:-1]
    return text.strip()


def extract_or_sentinel(response: LLMResponse) -> str:
    """Return the cleaned response text, or the sentinel when nothing is left."""
    text = clean_message(response.content or "")
    if not text:
        logger.warning("No text content in %s response, using placeholder", response.model)
        return EXTRACTION_FAILED_MESSAGE
    return text


class CommitMessageGenerator(ABC):
    """Provider-agnostic interface for commit message generation.

    Subclasses only translate a (system, user) prompt pair into one SDK call
    and pull the first text block out of the result. Prompt building, the
    missing-text placeholder and cleanup happen here so every backend behaves
    the same.
    """

    def __init__(self, config: LLMConfig) -> None:
        if not config.api_key:
            raise MissingCredentialError(config.provider.api_key_env)
        self.config = config

    @property
    def model(self) -> str:
        return self.config.model

    async def generate(self, diff: str) -> str:
        """Generate a cleaned commit message for the given diff."""
        system, user = build_prompts(diff)
        logger.info("Generating commit message with %s (%s)", self.config.provider, self.model)
        response = await self._complete(system, user)
        logger.debug(
            "%s usage: %d input tokens, %d output tokens",
            response.model,
            response.usage.input_tokens,
            response.usage.output_tokens,
        )
        return extract_or_sentinel(response)

    @abstractmethod
    async def _complete(self, system: str, user: str) -> LLMResponse:
        """Send one completion request and return its first text block."""
        ...
