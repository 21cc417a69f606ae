"""Response envelope returned by every tool invocation."""

from typing import Any, Literal

from pydantic import BaseModel


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """Success envelope (``isError`` unset) or error envelope (``isError=True``)."""

    content: list[TextContent]
    isError: bool | None = None

    @property
    def is_error(self) -> bool:
        return bool(self.isError)

    @property
    def text(self) -> str:
        return "\n".join(item.text for item in self.content)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
