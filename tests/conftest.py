"""Pytest configuration and fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def sample_html():
    """Trimmed-down MUI documentation page."""
    return (
        "<html><head>"
        '<meta name="description" content="Tables display sets of data.">'
        "</head><body>"
        "<p>Tables display information in a way that is easy to scan.</p>"
        "<pre><code>import { Table, TableBody } from '@mui/material';</code></pre>"
        "</body></html>"
    )


@pytest.fixture
def mock_http_client():
    """Build an ``httpx.AsyncClient`` stand-in returning a canned response.

    Example usage::

        client = mock_http_client(status_code=200, text="<html>...</html>")
        with patch("mui_mcp.sources.docs.httpx.AsyncClient", return_value=client):
            result = await fetch_component_docs("button")
    """

    def _build(status_code: int = 200, text: str = "", side_effect=None):
        mock_response = MagicMock()
        mock_response.status_code = status_code
        mock_response.is_success = 200 <= status_code < 300
        mock_response.text = text

        mock_client = AsyncMock()
        if side_effect is not None:
            mock_client.get = AsyncMock(side_effect=side_effect)
        else:
            mock_client.get = AsyncMock(return_value=mock_response)
        mock_client.__aenter__.return_value = mock_client
        mock_client.__aexit__.return_value = None
        return mock_client

    return _build
