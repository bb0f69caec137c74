"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import Mock

import pytest

from species_marker.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from SPECIES_MARKER_* variables in the environment."""
    for name in ("OUTPUT_DIR", "API_BASE", "IMAGE_BASE", "HTTP_TIMEOUT", "DEBUG"):
        monkeypatch.delenv(f"SPECIES_MARKER_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def json_response(payload: object, status_code: int = 200) -> Mock:
    """Mock ``requests.Response`` carrying a JSON body."""
    resp = Mock()
    resp.status_code = status_code
    resp.json.return_value = payload
    return resp


def svg_response(body: bytes, status_code: int = 200) -> Mock:
    """Mock ``requests.Response`` carrying raw SVG bytes."""
    resp = Mock()
    resp.status_code = status_code
    resp.content = body
    return resp


SAMPLE_SVG = (
    b'<?xml version="1.0" encoding="UTF-8"?>\n'
    b'<svg xmlns="http://www.w3.org/2000/svg" width="1536" height="1536" '
    b'viewBox="0 0 1536 1536"><path d="M0,0"/></svg>'
)
