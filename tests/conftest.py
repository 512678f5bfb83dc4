"""Shared test fixtures for gitscribe."""

import pytest

from gitscribe.config import GitscribeConfig
from gitscribe.llm.models import LLMConfig, Provider

SAMPLE_DIFF = """\
diff --git a/app/auth.py b/app/auth.py
index 3b18e51..a9c2f4d 100644
--- a/app/auth.py
+++ b/app/auth.py
@@ -1,3 +1,8 @@
+def login(user, password):
+    if not user.check_password(password):
+        raise PermissionError("bad credentials")
+    return {"token": user.issue_token()}
+
 def logout(user):
     user.revoke_tokens()
"""


@pytest.fixture
def sample_diff():
    return SAMPLE_DIFF


@pytest.fixture
def sample_config():
    return GitscribeConfig()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every provider credential and model override from the environment."""
    for p in Provider:
        monkeypatch.delenv(p.api_key_env, raising=False)
        monkeypatch.delenv(p.model_env, raising=False)
    return monkeypatch


@pytest.fixture
def claude_config():
    return LLMConfig(provider=Provider.CLAUDE, model="claude-test", api_key="sk-ant-test")


@pytest.fixture
def openai_config():
    return LLMConfig(provider=Provider.OPENAI, model="gpt-test", api_key="sk-test")


@pytest.fixture
def gemini_config():
    return LLMConfig(provider=Provider.GEMINI, model="gemini-test", api_key="goog-test")

