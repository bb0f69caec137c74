"""
Image index queries and image identifiers.

The index is build-versioned: the first ``/images`` call reports the current
``build``, and a follow-up call pinned to that build returns the stable
result set.  ``query_images`` always makes that second call when a build is
reported, whether or not the first page had items.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from species_marker.datasources.phylopic import client
from species_marker.datasources.phylopic.models import ImageIndexResponse, ImageIndexResult
from species_marker.errors import DecodeError

logger = logging.getLogger(__name__)


def build_query_params(name: str, build: int | None = None) -> dict[str, str]:
    """Query string for an ``/images`` search on a normalized species name."""
    params = {
        "filter_name": name,
        "embed_items": "true",
        "embed_primaryImage": "true",
        "page": "0",
    }
    if build is not None:
        params["build"] = str(build)
    return params


def _fetch_index(params: dict[str, str]) -> ImageIndexResponse:
    url = client.api_url("images")
    logger.debug("GET %s params=%s", url, params)
    data = client.get_json(url, params)
    try:
        return ImageIndexResponse.model_validate(data)
    except ValidationError as exc:
        msg = f"Unexpected /images response shape: {exc}"
        raise DecodeError(msg) from exc


def query_images(name: str) -> list[ImageIndexResult]:
    """
    Search the image index for a normalized species name.

    Returns the result records in API order; an empty list means no match.

    Raises:
        NetworkError: The request could not be sent or got no response.
        HTTPError: A non-2xx status from either call.
        DecodeError: A body that isn't JSON or lacks the expected shape.
    """
    first = _fetch_index(build_query_params(name))
    build = first.pinned_build
    if build is None:
        return first.items

    logger.info("Re-querying image index pinned to build %d", build)
    second = _fetch_index(build_query_params(name, build=build))
    return second.items


def extract_uuid(href: str) -> str:
    """
    Pull the image UUID out of an ``/images/{uuid}/...`` resource path.

    Any ``?query`` suffix is ignored.  Returns ``""`` for paths of any other
    shape.

    >>> extract_uuid("/images/1234-5678/vector.svg?x=1")
    '1234-5678'
    >>> extract_uuid("/foo/bar")
    ''
    """
    path = href.split("?", 1)[0]
    parts = path.split("/")
    if len(parts) > 2 and parts[1] == "images":
        return parts[2]
    return ""


def vector_url(uuid: str) -> str:
    """Download URL of the vector (SVG) rendition of an image."""
    return client.image_url(f"images/{uuid}/vector.svg")
