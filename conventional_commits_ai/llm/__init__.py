"""LLM Client Package"""

from conventional_commits_ai.llm.base import (
    LLMError,
    LLMResponse,
    MissingCredentialError,
    CompletionError,
    DecodeError,
    validate_commit_message,
)
from conventional_commits_ai.llm.response import (
    COMMIT_MESSAGE_SCHEMA,
    CommitMessageResult,
    decode_commit_message,
)
from conventional_commits_ai.llm.openai_client import OpenAIClient

__all__ = [
    "LLMError",
    "LLMResponse",
    "MissingCredentialError",
    "CompletionError",
    "DecodeError",
    "validate_commit_message",
    "COMMIT_MESSAGE_SCHEMA",
    "CommitMessageResult",
    "decode_commit_message",
    "OpenAIClient",
]
