"""YAML config loading."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import GitscribeConfig

PROJECT_CONFIG_PATH = Path("gitscribe.yaml")


def user_config_path() -> Path:
    return Path.home() / ".gitscribe" / "config.yaml"


def load_config(cli_path: str | None = None) -> GitscribeConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults.

    An explicit `cli_path` must exist; the other locations are optional.
    """
    if cli_path and not Path(cli_path).is_file():
        raise ValueError(f"Config file not found: {cli_path}")

    config_paths = [
        Path(cli_path) if cli_path else None,
        PROJECT_CONFIG_PATH,
        user_config_path(),
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                return GitscribeConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return GitscribeConfig()


# Default YAML template for `gitscribe config init`
DEFAULT_CONFIG_TEMPLATE = """\
# gitscribe.yaml

# LLM Provider
llm:
  provider: "claude"           # claude | openai | gemini
  max_tokens: 500
  temperature: 0.7
  # timeout: 60                # seconds; unset uses the SDK default

# API keys are read from the environment:
#   claude -> ANTHROPIC_API_KEY   (model override: ANTHROPIC_MODEL)
#   openai -> OPENAI_API_KEY      (model override: OPENAI_MODEL)
#   gemini -> GEMINI_API_KEY      (model override: GEMINI_MODEL)

# Logging
log_level: "warn"              # debug | info | warn | error
"""
