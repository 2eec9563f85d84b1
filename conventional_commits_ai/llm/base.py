"""LLM Shared Types and Errors"""

import re
from dataclasses import dataclass

from conventional_commits_ai import COMMIT_TYPE_NAMES


def validate_commit_message(content: str) -> tuple[bool, str]:
    """Check that a message looks like `<type>(<scope>): <subject>`."""
    if not content or not content.strip():
        return False, "Message is empty"

    types_pattern = '|'.join(COMMIT_TYPE_NAMES)
    pattern = rf'^({types_pattern})(\([^)]*\))?!?: \S'
    first_line = content.strip().split('\n')[0]

    if not re.match(pattern, first_line):
        return False, f"Missing conventional commit format. Got: {first_line[:50]}"

    return True, ""


@dataclass
class LLMResponse:
    """Raw payload of the first completion choice."""
    content: str
    model: str = ""
    tokens_used: int = 0


class LLMError(Exception):
    """Raised when commit message generation fails on the LLM side."""
    pass


class MissingCredentialError(LLMError):
    """Raised when no API key is available."""
    pass


class CompletionError(LLMError):
    """Raised when the completion endpoint call fails."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Chat completion failed: {reason}")


class DecodeError(LLMError):
    """Raised when the completion payload is not a valid commit message object."""

    def __init__(self, payload: str, reason: str):
        self.payload = payload
        self.reason = reason
        super().__init__(f"Failed to decode commit message response: {reason} (payload: {payload!r})")
