"""Pydantic models, provider identity and errors for the LLM subsystem."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class GitscribeError(Exception):
    """Base class for every error gitscribe reports to the user."""


class UnknownProviderError(GitscribeError, ValueError):
    """Raised when a provider name does not match any supported backend."""

    def __init__(self, name: str) -> None:
        self.name = name
        valid = ", ".join(p.value for p in Provider)
        super().__init__(f"Unknown provider: {name}. Available providers: {valid}")


class MissingCredentialError(GitscribeError, ValueError):
    """Raised when the API key for the selected provider is not set."""

    def __init__(self, env_var: str) -> None:
        self.env_var = env_var
        super().__init__(f"{env_var} environment variable not set")


class LLMError(GitscribeError):
    """Wraps provider-specific exceptions with context."""

    def __init__(self, provider: str, operation: str, cause: Exception) -> None:
        self.provider = provider
        self.operation = operation
        super().__init__(f"{provider} {operation} failed: {cause}")
        self.__cause__ = cause


class ProviderRequestError(LLMError):
    """The remote completion request failed; carries the backend's error text."""


class Provider(str, Enum):
    """Supported text-generation backends."""

    CLAUDE = "claude"
    OPENAI = "openai"
    GEMINI = "gemini"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> Provider:
        """Case-insensitive lookup by canonical name."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnknownProviderError(name) from None

    @property
    def default_model(self) -> str:
        return _DEFAULT_MODELS[self]

    @property
    def api_key_env(self) -> str:
        return _API_KEY_ENVS[self]

    @property
    def model_env(self) -> str:
        return _MODEL_ENVS[self]


_DEFAULT_MODELS = {
    Provider.CLAUDE: "claude-3-5-haiku-20241022",
    Provider.OPENAI: "gpt-4o-mini",
    Provider.GEMINI: "gemini-1.5-flash",
}

_API_KEY_ENVS = {
    Provider.CLAUDE: "ANTHROPIC_API_KEY",
    Provider.OPENAI: "OPENAI_API_KEY",
    Provider.GEMINI: "GEMINI_API_KEY",
}

_MODEL_ENVS = {
    Provider.CLAUDE: "ANTHROPIC_MODEL",
    Provider.OPENAI: "OPENAI_MODEL",
    Provider.GEMINI: "GEMINI_MODEL",
}


class LLMConfig(BaseModel):
    """Configuration for an LLM provider."""

    provider: Provider
    model: str
    api_key: str = ""
    max_tokens: int = Field(default=500, gt=0)
    temperature: float = 0.7
    timeout: float | None = None


class TokenUsage(BaseModel):
    """Token usage stats from a single LLM call."""

    input_tokens: int = 0
    output_tokens: int = 0


class LLMResponse(BaseModel):
    """First text block of a provider response, if there was one."""

    content: str | None = None
    usage: TokenUsage = Field(default_factory=TokenUsage)
    model: str
