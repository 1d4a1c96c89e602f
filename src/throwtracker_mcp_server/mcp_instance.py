"""
Shared FastMCP instance.

Tool modules import ``mcp`` from here to register themselves, which keeps
them free of a cyclic import on server.py.
"""

from mcp.server.fastmcp import FastMCP  # pylint: disable=import-error

mcp = FastMCP("throwtracker")
