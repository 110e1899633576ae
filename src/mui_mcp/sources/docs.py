"""Component documentation lookup.

Fetches one MUI documentation page per call and runs the extractor over
it. Every outcome is returned as a value: a ``DocsPage`` on success or a
``DocsFailure`` when the page is missing or the request itself fails.
Pages are not cached; repeated lookups re-fetch.
"""

from dataclasses import dataclass
from typing import Literal

import httpx
from loguru import logger

from mui_mcp.naming import to_key, to_url
from mui_mcp.query import resolve_key
from mui_mcp.sources.extractor import Extraction, extract_page


@dataclass(frozen=True)
class DocsPage:
    component: str
    title: str
    url: str
    extraction: Extraction


@dataclass(frozen=True)
class DocsFailure:
    component: str
    url: str
    kind: Literal["not_found", "error"]
    message: str = ""


DocsResult = DocsPage | DocsFailure


async def fetch_component_docs(component: str) -> DocsResult:
    """Fetch and extract the documentation page for a component key.

    The key is not checked against the catalog; unknown keys simply end
    up on the not-found path once the documentation site answers 404.
    """
    key = to_key(component)
    url = to_url(key)
    title = resolve_key(key)

    logger.info(f"Fetching docs for '{component}' from {url}")
    try:
        async with httpx.AsyncClient(follow_redirects=True) as client:
            resp = await client.get(url)
            if not resp.is_success:
                logger.warning(f"Docs page for '{component}' returned {resp.status_code}")
                return DocsFailure(component=component, url=url, kind="not_found")
            html = resp.text
    except Exception as e:
        logger.error(f"Docs fetch failed for '{component}': {e}")
        return DocsFailure(component=component, url=url, kind="error", message=str(e))

    return DocsPage(
        component=component,
        title=title,
        url=url,
        extraction=extract_page(html, title),
    )


def format_component_info(result: DocsResult) -> str:
    """Render a lookup result as the text returned by ``get_component_info``."""
    if isinstance(result, DocsFailure):
        if result.kind == "not_found":
            return (
                f"Error: Component '{result.component}' not found. "
                "Use list_components to see available components."
            )
        return f"Error fetching component info: {result.message}"

    extraction = result.extraction
    return (
        f"# {result.title} Component\n\n"
        f"{extraction.description}\n\n"
        "## Import\n"
        f"```tsx\n{extraction.import_statement}\n```\n\n"
        "## Usage\n"
        f"{extraction.usage}\n\n"
        "## Documentation\n"
        f"Full documentation: {result.url}\n\n"
        "For API reference and props, visit the API tab on the documentation page.\n\n"
        "## Related Resources\n"
        "- Check the documentation page for live demos and examples\n"
        "- Use get_customization_guide for theming and styling options\n"
        "- Use search_components to find related components"
    )
