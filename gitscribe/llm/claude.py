"""Anthropic Claude adapter for gitscribe."""

from __future__ import annotations

import logging

from anthropic import APIError, AsyncAnthropic

from gitscribe.llm.base import CommitMessageGenerator
from gitscribe.llm.models import LLMConfig, LLMResponse, ProviderRequestError, TokenUsage

logger = logging.getLogger(__name__)


class ClaudeProvider(CommitMessageGenerator):
    """Claude adapter using the Anthropic async SDK."""

    def __init__(self, config: LLMConfig) -> None:
        super().__init__(config)
        kwargs = {"timeout": config.timeout} if config.timeout else {}
        self._client = AsyncAnthropic(api_key=config.api_key, max_retries=0, **kwargs)

    async def _complete(self, system: str, user: str) -> LLMResponse:
        try:
            message = await self._client.messages.create(
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
                system=system,
                messages=[{"role": "user", "content": user}],
            )
        except APIError as e:
            logger.error("Error from Claude API: %s", e)
            raise ProviderRequestError("claude", "generate", e) from e

        text = next(
            (block.text for block in message.content if block.type == "text"),
            None,
        )
        return LLMResponse(
            content=text,
            usage=TokenUsage(
                input_tokens=message.usage.input_tokens,
                output_tokens=message.usage.output_tokens,
            ),
            model=message.model,
        )
