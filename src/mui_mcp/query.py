"""Catalog queries: enumerate, keyword search and key resolution.

All queries run against the static tables in ``mui_mcp.catalog`` and
return plain data; the ``format_*`` helpers turn that data into the
markdown text handed back to MCP clients.
"""

from dataclasses import dataclass

from mui_mcp.catalog import COMPONENT_MAP, COMPONENTS, SUGGESTED_CATEGORIES
from mui_mcp.naming import key_to_title, to_key, to_url


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a keyword search.

    ``matches`` keeps insertion order: components pulled in by a category
    label come first, then components whose own name matched.
    """

    query: str
    matches: tuple[str, ...]

    @property
    def empty(self) -> bool:
        return not self.matches


def list_all() -> tuple[tuple[str, str], ...]:
    """Every catalog component as ``(display_name, key)`` in declaration order."""
    return tuple((name, to_key(name)) for name in COMPONENTS)


def search(query: str) -> SearchResult:
    """Find components by use case or name.

    A category contributes all of its components when its label appears
    inside the query ("I need a form" hits ``form``; "for" does not).
    A component also matches when the query appears inside its name.
    """
    lower_query = query.lower()
    # dict as an ordered set
    matches: dict[str, None] = {}

    for category, components in COMPONENT_MAP.items():
        if category in lower_query:
            for name in components:
                matches.setdefault(name)

    for name in COMPONENTS:
        if lower_query in name.lower():
            matches.setdefault(name)

    return SearchResult(query=query, matches=tuple(matches))


def resolve_key(key: str) -> str:
    """Display title for a caller-supplied key. Does not consult the catalog."""
    return key_to_title(key)


# ---------------------------------------------------------------------------
# Text rendering
# ---------------------------------------------------------------------------


def format_component_list() -> str:
    components = list_all()
    lines = "\n".join(f"- {name} ({key})" for name, key in components)
    return (
        f"# Material UI Components ({len(components)} total)\n\n"
        f"{lines}\n\n"
        "Use get_component_info with the kebab-case name to get details.\n\n"
        "For comprehensive MUI documentation guidance, use get_mui_guide."
    )


def format_search(result: SearchResult) -> str:
    if result.empty:
        return (
            f"No components found matching '{result.query}'.\n\n"
            f"Try broader terms like: {', '.join(SUGGESTED_CATEGORIES)}"
        )

    lines = "\n".join(
        f"- {name} ({to_key(name)})\n  {to_url(name)}" for name in result.matches
    )
    return (
        f'# Components matching "{result.query}" ({len(result.matches)} found)\n\n'
        f"{lines}\n\n"
        "Use get_component_info with the kebab-case name for details."
    )
