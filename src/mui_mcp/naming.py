"""Conversions between component display names, lookup keys and doc URLs."""

import re

DOCS_URL_TEMPLATE = "https://mui.com/material-ui/react-{key}/"

_WHITESPACE_RE = re.compile(r"\s+")


def to_key(name: str) -> str:
    """Convert a display name to its kebab-case key ("Text Field" -> "text-field")."""
    return _WHITESPACE_RE.sub("-", name.strip().lower())


def to_url(name: str) -> str:
    """Documentation page URL for a display name or key.

    The URL is templated, not checked: an unknown name still yields a
    well-formed address that will 404 when fetched.
    """
    return DOCS_URL_TEMPLATE.format(key=to_key(name))


def key_to_title(key: str) -> str:
    """Rebuild a display title from a key ("app-bar" -> "App Bar").

    Only capitalizes the first letter of each segment, so names with
    irregular casing do not survive the round trip ("css-baseline" ->
    "Css Baseline").
    """
    return " ".join(word[:1].upper() + word[1:] for word in key.split("-"))


def to_symbol(name: str) -> str:
    """JSX symbol for a display name ("Text Field" -> "TextField")."""
    return _WHITESPACE_RE.sub("", name)
