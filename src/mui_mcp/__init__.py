"""MUI MCP Server - Material UI component reference for AI agents."""

from importlib.metadata import version

from mui_mcp.__main__ import _cli as main
from mui_mcp.server import mcp

__version__ = version("mui-mcp")
__all__ = ["mcp", "main", "__version__"]
