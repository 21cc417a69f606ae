"""FastMCP entry point serving the WordPress tools over stdio."""

import logging
import sys

import wpmcp.tools  # noqa: F401  (registers the tool catalog)
from wpmcp.adapters.fastmcp_adapter import create_fastmcp_server
from wpmcp.registry import REGISTRY
from wpmcp.tools.context import create_context

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname).1s %(asctime)s %(filename)s:%(lineno)d - %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_server():
    context = create_context()
    if not context.config.has_credentials:
        logger.warning("WP_USERNAME/WP_APP_PASSWORD not set; requests are unauthenticated")
    logger.info(f"Available tools: {len(REGISTRY.functions)} registered")
    return create_fastmcp_server(context=context)


def main():
    configure_logging()
    build_server().run()


if __name__ == "__main__":
    main()
