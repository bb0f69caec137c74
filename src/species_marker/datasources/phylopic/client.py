"""
PhyloPic API client.

Thin layer over the shared session: builds URLs from settings, sets the
``Accept`` header each endpoint wants, and turns ``requests`` failures into
the project's own exceptions.
"""

from __future__ import annotations

from typing import Any

import requests

from species_marker.config import get_settings
from species_marker.errors import DecodeError, HTTPError, NetworkError
from species_marker.services.http import session

# ---------------------------------------------------------------------------
# Media types
# ---------------------------------------------------------------------------
INDEX_MEDIA_TYPE = "application/vnd.phylopic.v2+json"
SVG_MEDIA_TYPE = "image/svg+xml"


def api_url(endpoint: str) -> str:
    """Absolute URL for an endpoint of the index API (e.g. ``images``)."""
    return f"{get_settings().api_base.rstrip('/')}/{endpoint}"


def image_url(path: str) -> str:
    """Absolute URL for a path on the image host."""
    return f"{get_settings().image_base.rstrip('/')}/{path}"


def get(url: str, *, accept: str, params: dict[str, str] | None = None) -> requests.Response:
    """GET ``url`` with the given ``Accept`` header. Redirects are followed."""
    try:
        return session.get(url, params=params, headers={"Accept": accept}, allow_redirects=True)
    except requests.RequestException as exc:
        msg = f"Request to {url} failed: {exc}"
        raise NetworkError(msg) from exc


def get_json(url: str, params: dict[str, str] | None = None) -> Any:
    """GET a versioned JSON resource and return the decoded body."""
    resp = get(url, accept=INDEX_MEDIA_TYPE, params=params)
    if not 200 <= resp.status_code < 300:
        msg = f"{url} returned status {resp.status_code}"
        raise HTTPError(msg, status_code=resp.status_code, url=url)

    try:
        return resp.json()
    except ValueError as exc:
        msg = f"Response from {url} is not valid JSON: {exc}"
        raise DecodeError(msg) from exc
