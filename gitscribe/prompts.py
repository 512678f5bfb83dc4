"""Prompt templates for commit message generation."""

from __future__ import annotations

SYSTEM_PROMPT = (
    "You are a helpful assistant specialized in creating concise, "
    "meaningful git commit messages."
)

USER_PROMPT_TEMPLATE = """\
Generate a git commit message based on the following diff. Use the following format:
- First line: A concise summary using conventional commits format (type: description) where appropriate
- Leave a blank line after the first line
- Then add 2-3 bullet points explaining the key changes in more detail

Focus on WHAT changed and WHY, not HOW. Keep the first line under {max_subject_length} characters.
Return ONLY the commit message without any additional text.

```diff
{diff}
```"""

MAX_SUBJECT_LENGTH = 70


def build_user_prompt(diff: str) -> str:
    """Embed the diff verbatim in the format instructions."""
    return USER_PROMPT_TEMPLATE.format(
        diff=diff, max_subject_length=MAX_SUBJECT_LENGTH
    )


def build_prompts(diff: str) -> tuple[str, str]:
    """Return the (system, user) prompt pair for a diff."""
    return SYSTEM_PROMPT, build_user_prompt(diff)


def flatten_prompts(system: str, user: str) -> str:
    """Single-message form for backends without a system role."""
    return f"System: {system}\n\nUser: {user}"
