"""ThrowTracker MCP Server: training analytics for throwing-sport athletes."""

__version__ = "1.0.0"
