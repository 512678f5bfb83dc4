from typing import Literal

from pydantic import BaseModel, Field, field_validator


class LLMSettings(BaseModel):
    provider: Literal["claude", "openai", "gemini"] = "claude"
    max_tokens: int = Field(default=500, gt=0)
    temperature: float = Field(default=0.7, ge=0, le=2)
    timeout: float | None = Field(default=None, gt=0)

    @field_validator("provider", mode="before")
    @classmethod
    def _normalize_provider(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


class GitscribeConfig(BaseModel):
    llm: LLMSettings = Field(default_factory=LLMSettings)
    log_level: Literal["debug", "info", "warn", "error"] = "warn"
