"""OpenAI Chat Completions Client"""

import logging
import os

from openai import (
    OpenAI,
    APIConnectionError,
    APIError,
    APITimeoutError,
    AuthenticationError,
    RateLimitError,
)

from conventional_commits_ai.llm.base import LLMResponse, CompletionError, MissingCredentialError
from conventional_commits_ai.llm.response import COMMIT_MESSAGE_SCHEMA

logger = logging.getLogger(__name__)


class OpenAIClient:
    """OpenAI API client. Requires OPENAI_API_KEY env var."""

    DEFAULT_MODEL = "gpt-4.1"
    DEFAULT_TIMEOUT = 60.0
    SCHEMA_NAME = "commit_message"

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        schema: dict | None = None,
    ):
        self.api_key = api_key or os.environ.get("OPENAI_API_KEY")
        self.model = model or self.DEFAULT_MODEL
        self.timeout = timeout or self.DEFAULT_TIMEOUT
        self.schema = schema or COMMIT_MESSAGE_SCHEMA

        if not self.api_key:
            raise MissingCredentialError("OPENAI_API_KEY is not set")

        # Retries are left to the caller: one request, fail fast.
        self._client = OpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)

    @property
    def name(self) -> str:
        return f"OpenAI ({self.model})"

    def _response_format(self) -> dict:
        return {
            "type": "json_schema",
            "json_schema": {
                "name": self.SCHEMA_NAME,
                "description": "Commit message",
                "schema": self.schema,
                "strict": True,
            },
        }

    def generate(self, messages: list[dict[str, str]]) -> LLMResponse:
        logger.debug("Requesting completion from %s with %d messages", self.model, len(messages))
        try:
            completion = self._client.chat.completions.create(
                model=self.model,
                messages=messages,
                response_format=self._response_format(),
            )
        except AuthenticationError as e:
            raise CompletionError("invalid API key (check OPENAI_API_KEY)") from e
        except RateLimitError as e:
            raise CompletionError(f"rate limit or quota exceeded: {e.message}") from e
        except APITimeoutError as e:
            raise CompletionError(f"request timed out after {self.timeout:g}s") from e
        except APIConnectionError as e:
            raise CompletionError(f"could not reach the completion endpoint: {e.message}") from e
        except APIError as e:
            raise CompletionError(f"OpenAI API error: {e.message}") from e

        if not completion.choices:
            raise CompletionError("no choices returned")

        message = completion.choices[0].message
        if message.refusal:
            raise CompletionError(f"model refused the request: {message.refusal}")
        if not message.content:
            raise CompletionError("empty message returned")

        tokens_used = completion.usage.total_tokens if completion.usage else 0
        logger.debug("Completion used %d tokens", tokens_used)

        return LLMResponse(
            content=message.content,
            model=completion.model or self.model,
            tokens_used=tokens_used,
        )
