"""Adapters exposing the tool registry to agent-facing protocols."""

from .fastmcp_adapter import create_fastmcp_server

__all__ = ["create_fastmcp_server"]
