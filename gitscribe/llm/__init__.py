"""LLM provider abstraction layer."""

from __future__ import annotations

import logging
import os

from gitscribe.config.models import LLMSettings
from gitscribe.llm.base import (
    EXTRACTION_FAILED_MESSAGE,
    CommitMessageGenerator,
    clean_message,
)
from gitscribe.llm.claude import ClaudeProvider
from gitscribe.llm.gemini import GeminiProvider
from gitscribe.llm.models import (
    GitscribeError,
    LLMConfig,
    LLMError,
    LLMResponse,
    MissingCredentialError,
    Provider,
    ProviderRequestError,
    TokenUsage,
    UnknownProviderError,
)
from gitscribe.llm.openai_adapter import OpenAIProvider

logger = logging.getLogger(__name__)

_PROVIDER_MAP: dict[Provider, type[CommitMessageGenerator]] = {
    Provider.CLAUDE: ClaudeProvider,
    Provider.OPENAI: OpenAIProvider,
    Provider.GEMINI: GeminiProvider,
}


def resolve_setting(explicit: str | None, env_var: str, default: str | None = None) -> str | None:
    """Return the explicit value, else the env var's value, else the default.

    Empty strings count as unset at every level.
    """
    if explicit:
        return explicit
    from_env = os.environ.get(env_var)
    if from_env:
        return from_env
    return default


def create_generator(
    provider: Provider,
    model: str | None = None,
    settings: LLMSettings | None = None,
) -> CommitMessageGenerator:
    """Build the adapter for a provider.

    The API key comes from the provider's env var; the model from the
    explicit override, then the provider's model env var, then its default.
    """
    settings = settings or LLMSettings()
    api_key = resolve_setting(None, provider.api_key_env)
    if not api_key:
        raise MissingCredentialError(provider.api_key_env)

    resolved_model = resolve_setting(model, provider.model_env, provider.default_model)
    logger.info("Using provider %s with model %s", provider, resolved_model)

    llm_config = LLMConfig(
        provider=provider,
        model=resolved_model,
        api_key=api_key,
        max_tokens=settings.max_tokens,
        temperature=settings.temperature,
        timeout=settings.timeout,
    )
    return _PROVIDER_MAP[provider](llm_config)


__all__ = [
    "EXTRACTION_FAILED_MESSAGE",
    "ClaudeProvider",
    "CommitMessageGenerator",
    "GeminiProvider",
    "GitscribeError",
    "LLMConfig",
    "LLMError",
    "LLMResponse",
    "MissingCredentialError",
    "OpenAIProvider",
    "Provider",
    "ProviderRequestError",
    "TokenUsage",
    "UnknownProviderError",
    "clean_message",
    "create_generator",
    "resolve_setting",
]
