"""gitscribe - commit messages for staged changes, written by Claude, OpenAI or Gemini."""

from gitscribe.config import GitscribeConfig, load_config
from gitscribe.drafter import Drafter, DraftResult
from gitscribe.llm import CommitMessageGenerator, Provider, create_generator
from gitscribe.vcs import commit, read_staged_diff

__version__ = "0.1.0"

__all__ = [
    "CommitMessageGenerator",
    "DraftResult",
    "Drafter",
    "GitscribeConfig",
    "Provider",
    "commit",
    "create_generator",
    "load_config",
    "read_staged_diff",
]
