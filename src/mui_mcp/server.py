"""MUI MCP Server - Main server definition."""

import asyncio
import functools
import sys
from importlib.resources import files

from loguru import logger
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from mui_mcp.config import settings
from mui_mcp.query import format_component_list, format_search, search
from mui_mcp.security import wrap_external_content
from mui_mcp.sources.docs import fetch_component_docs, format_component_info

# Configure logging (stdout belongs to the stdio transport)
logger.remove()
logger.add(sys.stderr, level=settings.log_level)

# Initialize MCP server
mcp = FastMCP(
    name="Material UI Component Library",
    instructions=(
        "Material UI component reference. "
        "Use `list_components` or `search_components` to find components, "
        "`get_component_info` for details scraped from the live docs, and "
        "the guide tools for setup, customization and best practices."
    ),
    host=settings.mcp_host,
    port=settings.mcp_port,
)

# Grace period (seconds) given to a cancelled lookup before it is abandoned.
_CANCEL_GRACE_PERIOD = 5.0

_STATIC = ToolAnnotations(readOnlyHint=True, openWorldHint=False, idempotentHint=True)


def _wrap_tool(tool_name: str):
    """Decorator to wrap tool results with XPIA safety markers.

    Error responses are passed through unwrapped.
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            result = await func(*args, **kwargs)
            if not settings.wrap_untrusted:
                return result
            return wrap_external_content(tool_name, result)

        return wrapper

    return decorator


async def _with_timeout(coro, action: str) -> str:
    """Wrap coroutine with hard timeout.

    Uses ``asyncio.wait`` so the deadline holds even if the inner task is
    slow to honour cancellation; the task then gets a short grace period
    to close its connection before being abandoned.
    """
    timeout = settings.tool_timeout
    if timeout <= 0:
        return await coro

    task = asyncio.create_task(coro)
    done, _pending = await asyncio.wait({task}, timeout=timeout)

    if done:
        return task.result()

    task.cancel()
    logger.warning(f"Tool '{action}' timed out after {timeout}s, cancelling...")
    try:
        await asyncio.wait_for(asyncio.shield(task), timeout=_CANCEL_GRACE_PERIOD)
    except (asyncio.CancelledError, TimeoutError, Exception):
        # Task either cancelled cleanly, timed out again, or raised -- all OK
        pass

    logger.error(f"Tool '{action}' timed out after {timeout}s")
    return f"Error: '{action}' timed out after {timeout}s. Increase TOOL_TIMEOUT or retry."


def _read_doc(name: str) -> str:
    """Load a static markdown payload shipped in ``mui_mcp.docs``."""
    try:
        return files("mui_mcp.docs").joinpath(f"{name}.md").read_text(encoding="utf-8")
    except FileNotFoundError:
        return f"Error: No documentation found for '{name}'"
    except Exception as e:
        return f"Error loading documentation: {e}"


# ---------------------------------------------------------------------------
# Catalog tools
# ---------------------------------------------------------------------------


@mcp.tool(annotations=_STATIC)
async def list_components() -> str:
    """List all available Material UI components with their kebab-case keys."""
    return format_component_list()


@mcp.tool(annotations=_STATIC)
async def search_components(query: str) -> str:
    """Search components by use case or keyword.

    Example queries: 'form input', 'navigation', 'table data'.
    """
    result = search(query)
    logger.debug(f"search_components('{query}') -> {len(result.matches)} matches")
    return format_search(result)


@mcp.tool(
    annotations=ToolAnnotations(
        readOnlyHint=True,
        openWorldHint=True,
        idempotentHint=True,
    ),
)
@_wrap_tool("get_component_info")
async def get_component_info(component: str) -> str:
    """Get description, import statement and documentation link for a component.

    component: Component name in kebab-case (e.g. 'button', 'text-field', 'app-bar').
    """

    async def _lookup() -> str:
        return format_component_info(await fetch_component_docs(component))

    return await _with_timeout(_lookup(), "get_component_info")


# ---------------------------------------------------------------------------
# Static guides
# ---------------------------------------------------------------------------


@mcp.tool(annotations=_STATIC)
async def get_customization_guide() -> str:
    """Theming and styling options: createTheme, sx, styled(), overrides, dark mode."""
    return _read_doc("customization")


@mcp.tool(annotations=_STATIC)
async def get_setup_guide() -> str:
    """Installation and setup instructions for Material UI."""
    return _read_doc("setup")


@mcp.tool(annotations=_STATIC)
async def get_mui_guide() -> str:
    """Overview of Material UI, best practices and the available tools."""
    return _read_doc("guide")


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


@mcp.prompt()
def build_ui(feature: str) -> str:
    """Generate a prompt to build a UI feature with Material UI components."""
    return (
        f"Build the following UI feature with Material UI: {feature}\n\n"
        "1. Use search_components to find components that fit the use case.\n"
        "2. Use get_component_info on the best candidates for imports and docs links.\n"
        "3. Use get_customization_guide if the feature needs theming or custom styles."
    )


def main() -> None:
    """Entry point for the MCP server."""
    logger.info(f"Starting MUI MCP Server ({settings.mcp_transport})...")
    mcp.run(transport=settings.mcp_transport)


if __name__ == "__main__":
    main()
