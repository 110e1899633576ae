"""Best-effort extraction of component details from MUI documentation HTML.

Each ``match_*`` function returns the matched text or ``None``; the
``extract_*`` functions pair a match with its fixed fallback. Passes are
independent, so a miss in one never affects the others.
"""

import html as html_lib
import re
from dataclasses import dataclass

from loguru import logger

from mui_mcp.naming import to_symbol

DESCRIPTION_FALLBACK = "Component description not available."
USAGE_FALLBACK = "See documentation for usage examples."

_META_DESCRIPTION_RE = re.compile(
    r'<meta\s+name="description"\s+content="([^"]+)"', re.IGNORECASE
)
_PARAGRAPH_RE = re.compile(r"<p[^>]*>([^<]+)</p>", re.IGNORECASE)
_CODE_RE = re.compile(r"<code[^>]*>([^<]+)</code>", re.IGNORECASE)


@dataclass(frozen=True)
class Extraction:
    description: str
    import_statement: str
    usage: str


def _clean(text: str) -> str:
    return html_lib.unescape(text).strip()


def match_meta_description(html: str) -> str | None:
    match = _META_DESCRIPTION_RE.search(html)
    return _clean(match.group(1)) if match else None


def _first_text(pattern: re.Pattern[str], html: str) -> str | None:
    """First match of ``pattern`` whose text is non-blank once cleaned."""
    for match in pattern.finditer(html):
        text = _clean(match.group(1))
        if text:
            return text
    return None


def match_first_paragraph(html: str) -> str | None:
    return _first_text(_PARAGRAPH_RE, html)


def match_import(html: str, component_name: str) -> str | None:
    """Find ``import { ... Symbol ... } from '@mui/material'`` on the page."""
    symbol = re.escape(to_symbol(component_name))
    pattern = re.compile(
        rf"import\s*{{[^}}]*{symbol}[^}}]*}}\s*from\s*[\"']@mui/material[\"']",
        re.IGNORECASE,
    )
    match = pattern.search(html)
    return _clean(match.group(0)) if match else None


def match_first_code(html: str) -> str | None:
    return _first_text(_CODE_RE, html)


def extract_description(html: str) -> str:
    description = match_meta_description(html) or match_first_paragraph(html)
    if description is None:
        logger.debug("No description found, using fallback")
        return DESCRIPTION_FALLBACK
    return description


def extract_import(html: str, component_name: str) -> str:
    statement = match_import(html, component_name)
    if statement is None:
        logger.debug(f"No import found for '{component_name}', synthesizing one")
        return f"import {{ {to_symbol(component_name)} }} from '@mui/material';"
    return statement


def extract_usage(html: str) -> str:
    code = match_first_code(html)
    if code is None:
        logger.debug("No code example found, using fallback")
        return USAGE_FALLBACK
    return f"```tsx\n{code}\n```"


def extract_page(html: str, component_name: str) -> Extraction:
    """Run all three extraction passes over one page."""
    return Extraction(
        description=extract_description(html),
        import_statement=extract_import(html, component_name),
        usage=extract_usage(html),
    )
