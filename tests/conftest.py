"""Shared fixtures: fake git subprocesses and fake chat completions."""

import subprocess
from types import SimpleNamespace

import pytest
from openai.types.chat import ChatCompletion, ChatCompletionMessage
from openai.types.chat.chat_completion import Choice
from openai.types.completion_usage import CompletionUsage

from conventional_commits_ai.config import ENV_OVERRIDES

SAMPLE_DIFF = """diff --git a/src/auth.py b/src/auth.py
index e69de29..7f5a3d5 100644
--- a/src/auth.py
+++ b/src/auth.py
@@ -1,3 +1,5 @@
+if token.expired:
+    raise TokenExpired()
"""
SAMPLE_LOG = "feat(auth): add login endpoint\nfix(api): return 404 for missing user"
SAMPLE_BRANCH = "feature/expired-tokens"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from a known environment."""
    for var in ENV_OVERRIDES:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")


@pytest.fixture
def make_completion():
    """Return a factory for ChatCompletion objects as the SDK would return them."""
    def _make(content, refusal=None, choices=True):
        message = ChatCompletionMessage(role="assistant", content=content, refusal=refusal)
        return ChatCompletion(
            id="chatcmpl-test",
            object="chat.completion",
            created=0,
            model="gpt-4.1",
            choices=[Choice(index=0, finish_reason="stop", message=message)] if choices else [],
            usage=CompletionUsage(prompt_tokens=100, completion_tokens=12, total_tokens=112),
        )
    return _make


@pytest.fixture
def fake_git(monkeypatch):
    """Patch subprocess.run in the inspector; returns the list of recorded commands.

    Outputs and failures are keyed by git subcommand ("diff", "log", "branch").
    """
    calls = []
    outputs = {"diff": SAMPLE_DIFF, "log": SAMPLE_LOG, "branch": SAMPLE_BRANCH + "\n"}
    failures = {}

    def _run(cmd, **kwargs):
        calls.append(cmd)
        sub = cmd[1]
        if sub in failures:
            failure = failures[sub]
            if isinstance(failure, BaseException):
                raise failure
            raise subprocess.CalledProcessError(128, cmd, output="", stderr=failure)
        return subprocess.CompletedProcess(cmd, 0, stdout=outputs[sub], stderr="")

    monkeypatch.setattr("conventional_commits_ai.git.inspector.subprocess.run", _run)

    return SimpleNamespace(calls=calls, outputs=outputs, failures=failures)
