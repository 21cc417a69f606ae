"""Configuration management for the WordPress tool server."""

from base64 import b64encode

from pydantic import Field
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Connection settings for the remote WordPress site.

    Values are read once from ``WP_*`` environment variables (or a ``.env`` file)
    and are immutable afterwards.
    """

    base_url: str = "http://localhost:8080"
    username: str = ""
    app_password: str = ""
    api_prefix: str = "/wp-json/wp/v2"
    timeout: float = Field(default=30.0, gt=0)

    model_config = {
        "env_prefix": "WP_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "forbid",
        "frozen": True,
    }

    @property
    def api_url(self) -> str:
        return self.base_url.rstrip("/") + self.api_prefix

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.app_password)

    def auth_header(self) -> str | None:
        """Basic auth header value, or None when credentials are incomplete."""
        if not self.has_credentials:
            return None
        token = b64encode(f"{self.username}:{self.app_password}".encode()).decode()
        return f"Basic {token}"
