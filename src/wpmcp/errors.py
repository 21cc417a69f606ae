"""Exceptions raised by the client and tool handlers.

Every exception here is converted into an error envelope at the tool invocation
boundary; none of them escapes a tool call.
"""

from pydantic import ValidationError


class WordPressError(Exception):
    """Base class for failures talking to WordPress."""


class WordPressAPIError(WordPressError):
    """Non-2xx response or transport failure."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(WordPressError):
    """A lookup by unique key matched nothing."""


class MediaMetadataError(WordPressError):
    """The upload succeeded but the follow-up metadata update did not."""

    def __init__(self, media_id: int | None, reason: str):
        uploaded = "Media uploaded" if media_id is None else f"Media uploaded as ID {media_id}"
        super().__init__(
            f"{uploaded} but the metadata update failed "
            f"(the file keeps its default metadata): {reason}"
        )
        self.media_id = media_id
        self.reason = reason


class ToolArgumentError(ValueError):
    """Tool arguments failed schema validation."""

    def __init__(self, tool_name: str, problems: list[str]):
        super().__init__(f"Invalid arguments for {tool_name}: " + "; ".join(problems))
        self.tool_name = tool_name
        self.problems = problems

    @classmethod
    def from_validation_error(cls, tool_name: str, error: ValidationError) -> "ToolArgumentError":
        problems = []
        for item in error.errors():
            location = ".".join(str(part) for part in item["loc"]) or "arguments"
            problems.append(f"{location}: {item['msg']}")
        return cls(tool_name, problems)
