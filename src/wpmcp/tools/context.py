import httpx
from pydantic import BaseModel, Field

from wpmcp.client import WordPressClient
from wpmcp.config import Config


class ToolContext(BaseModel):
    """Shared context for all tools: the site configuration and its HTTP client."""

    model_config = {"arbitrary_types_allowed": True}
    config: Config = Field(default_factory=Config)
    client: WordPressClient = Field(default=None)  # type: ignore

    def model_post_init(self, _ctx):
        if self.client is None:
            self.client = WordPressClient(self.config)


def create_context(
    config: Config | None = None, transport: httpx.AsyncBaseTransport | None = None
) -> ToolContext:
    """Build the process-wide context from ``config`` (read from the environment if omitted)."""
    config = config or Config()
    return ToolContext(config=config, client=WordPressClient(config, transport=transport))
