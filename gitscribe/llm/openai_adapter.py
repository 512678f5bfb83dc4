"""OpenAI adapter for gitscribe."""

from __future__ import annotations

import logging

from openai import APIError, AsyncOpenAI

from gitscribe.llm.base import CommitMessageGenerator
from gitscribe.llm.models import LLMConfig, LLMResponse, ProviderRequestError, TokenUsage

logger = logging.getLogger(__name__)


class OpenAIProvider(CommitMessageGenerator):
    """OpenAI adapter using the async SDK."""

    def __init__(self, config: LLMConfig) -> None:
        super().__init__(config)
        kwargs = {"timeout": config.timeout} if config.timeout else {}
        self._client = AsyncOpenAI(api_key=config.api_key, max_retries=0, **kwargs)

    async def _complete(self, system: str, user: str) -> LLMResponse:
        try:
            response = await self._client.chat.completions.create(
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
                n=1,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
            )
        except APIError as e:
            logger.error("Error from OpenAI API: %s", e)
            raise ProviderRequestError("openai", "generate", e) from e

        content = response.choices[0].message.content if response.choices else None
        usage = TokenUsage()
        if response.usage:
            usage = TokenUsage(
                input_tokens=response.usage.prompt_tokens,
                output_tokens=response.usage.completion_tokens,
            )
        return LLMResponse(content=content, usage=usage, model=response.model)
