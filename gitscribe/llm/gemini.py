"""Google Gemini adapter for gitscribe."""

from __future__ import annotations

import logging

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from gitscribe.llm.base import CommitMessageGenerator
from gitscribe.llm.models import LLMConfig, LLMResponse, ProviderRequestError, TokenUsage
from gitscribe.prompts import flatten_prompts

logger = logging.getLogger(__name__)


def _first_text(response) -> str | None:
    """Text of the first text part of the first candidate."""
    if not response.candidates:
        return None
    content = response.candidates[0].content
    for part in content.parts if content else []:
        if part.text:
            return part.text
    return None


class GeminiProvider(CommitMessageGenerator):
    """Gemini adapter using the google-generativeai async SDK.

    Gemini is sent a single user turn, so the system prompt is folded into it.
    """

    def __init__(self, config: LLMConfig) -> None:
        super().__init__(config)
        genai.configure(api_key=config.api_key)
        self._model = genai.GenerativeModel(config.model)

    async def _complete(self, system: str, user: str) -> LLMResponse:
        request_options = {"timeout": self.config.timeout} if self.config.timeout else None
        try:
            response = await self._model.generate_content_async(
                flatten_prompts(system, user),
                generation_config=genai.types.GenerationConfig(
                    max_output_tokens=self.config.max_tokens,
                    temperature=self.config.temperature,
                ),
                request_options=request_options,
            )
        except google_exceptions.GoogleAPIError as e:
            logger.error("Error from Gemini API: %s", e)
            raise ProviderRequestError("gemini", "generate", e) from e

        usage = TokenUsage()
        if response.usage_metadata:
            usage = TokenUsage(
                input_tokens=response.usage_metadata.prompt_token_count,
                output_tokens=response.usage_metadata.candidates_token_count,
            )
        return LLMResponse(content=_first_text(response), usage=usage, model=self.config.model)
