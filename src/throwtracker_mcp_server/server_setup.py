"""Transport selection and startup for the MCP server."""

import logging

from mcp.server.fastmcp import FastMCP  # pylint: disable=import-error

from throwtracker_mcp_server.config import get_config

logger = logging.getLogger("throwtracker_mcp_server")

SUPPORTED_TRANSPORTS = ("stdio", "sse", "streamable-http")


def setup_transport() -> str:
    """Resolve the configured MCP transport.

    Raises:
        ValueError: If MCP_TRANSPORT names an unsupported transport
    """
    transport = get_config().transport
    if transport not in SUPPORTED_TRANSPORTS:
        raise ValueError(
            f"Unsupported MCP_TRANSPORT: {transport}. "
            f"Expected one of: {', '.join(SUPPORTED_TRANSPORTS)}."
        )
    return transport


def start_server(mcp_server: FastMCP, transport: str) -> None:
    """Run the server on the given transport until it exits."""
    logger.info("Starting ThrowTracker MCP server (transport=%s)", transport)
    mcp_server.run(transport=transport)
