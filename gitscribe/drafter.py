"""Drafter orchestrator: turns a staged diff into a commit message."""

from __future__ import annotations

import logging

from pydantic import BaseModel

from gitscribe.config import GitscribeConfig
from gitscribe.llm import create_generator
from gitscribe.llm.models import Provider

logger = logging.getLogger(__name__)


class DraftResult(BaseModel):
    """Outcome of a single drafting run."""

    message: str = ""
    provider: Provider | None = None
    model: str | None = None
    nothing_to_do: bool = False


class Drafter:
    """Orchestrates commit message generation.

    Pipeline:
        diff → Provider → credential + model → adapter → message
    """

    def __init__(self, config: GitscribeConfig | None = None) -> None:
        self.config = config or GitscribeConfig()

    async def draft(
        self,
        diff: str,
        provider: str | None = None,
        model: str | None = None,
    ) -> DraftResult:
        """Generate a commit message for a diff.

        Steps:
            1. Short-circuit on an empty diff
            2. Parse the provider name (CLI > config file > "claude")
            3. Build the adapter (credential and model resolution)
            4. Generate once
        """
        # 1. Nothing staged
        if not diff:
            logger.info("Empty diff, nothing to generate")
            return DraftResult(nothing_to_do=True)

        # 2. Provider
        selected = Provider.parse(provider or self.config.llm.provider)

        # 3. Adapter
        generator = create_generator(selected, model=model, settings=self.config.llm)

        # 4. Generate
        message = await generator.generate(diff)
        return DraftResult(message=message, provider=selected, model=generator.model)
