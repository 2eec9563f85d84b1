"""Structured response contract and decoding."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from conventional_commits_ai.llm.base import DecodeError

# Sent as the strict response_format schema. Strict mode accepts only a subset
# of JSON Schema; keep in step with CommitMessageResult.
COMMIT_MESSAGE_SCHEMA = {
    "type": "object",
    "properties": {
        "commit_message": {"type": "string"},
    },
    "required": ["commit_message"],
    "additionalProperties": False,
}


class CommitMessageResult(BaseModel):
    """The generated commit message."""
    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    commit_message: str = Field(..., min_length=1, description="Commit message")


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"{loc}: {err['msg']}" if loc else err["msg"]


def decode_commit_message(payload: str) -> CommitMessageResult:
    """Parse the raw completion text into a CommitMessageResult."""
    try:
        return CommitMessageResult.model_validate_json(payload)
    except ValidationError as e:
        raise DecodeError(payload, _first_error(e)) from e
