"""
Species → marker pipeline.

One invocation handles one species: normalize the name, query the image
index once (plus the build-pinned follow-up), then download and compose each
result in API order.  Failures while downloading or composing a single
result are logged and recorded; the loop moves on to the next result.
Directory setup and the index query are fatal and propagate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from species_marker.config import get_settings
from species_marker.datasources import phylopic
from species_marker.errors import SpeciesMarkerError
from species_marker.marker import compose_marker
from species_marker.names import normalize
from species_marker.store import OutputStore

if TYPE_CHECKING:
    from pathlib import Path

    from species_marker.datasources.phylopic import ImageIndexResult

logger = logging.getLogger(__name__)


@dataclass
class ResultFailure:
    """A result that produced no marker, and why."""

    title: str
    href: str
    error: str


@dataclass
class MarkerRun:
    """What a ``make_marker`` call produced."""

    species: str
    normalized: str
    results: int = 0
    silhouettes: list[Path] = field(default_factory=list)
    markers: list[Path] = field(default_factory=list)
    failures: list[ResultFailure] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True when at least one marker was written, or there was nothing to do."""
        return self.results == 0 or bool(self.markers)


def process_result(item: ImageIndexResult, species: str, store: OutputStore) -> tuple[Path, Path]:
    """
    Download one result's silhouette and compose its marker.

    Returns:
        ``(silhouette_path, marker_path)``

    Raises:
        SpeciesMarkerError: Any download or compose failure, including a
            resource path with no image UUID.
    """
    uuid = phylopic.extract_uuid(item.href)
    if not uuid:
        msg = f"No image UUID in resource path {item.href!r}"
        raise SpeciesMarkerError(msg)

    url = phylopic.vector_url(uuid)
    logger.info(
        "Title: %s | Image URL: %s | UUID: %s | Vector SVG: %s", item.title, item.href, uuid, url
    )

    silhouette = phylopic.download_vector(url, species, uuid, store.base)
    marker = store.marker_path(species)
    compose_marker(silhouette, marker)
    return silhouette, marker


def make_marker(raw_species: str, output_dir: Path | None = None) -> MarkerRun:
    """
    Build map markers for every PhyloPic silhouette of a species.

    Args:
        raw_species: Species name as typed by the user.
        output_dir: Where files go (default: ``Settings.output_dir``).

    Returns:
        A ``MarkerRun`` listing written files and per-result failures.

    Raises:
        FilesystemError: The output directory can't be created.
        NetworkError, HTTPError, DecodeError: The index query failed.
    """
    store = OutputStore(output_dir if output_dir is not None else get_settings().output_dir)
    store.ensure()

    normalized = normalize(raw_species)
    logger.info("Original species name: %s", raw_species)
    logger.info("Normalized species name: %s", normalized)

    run = MarkerRun(species=raw_species, normalized=normalized)

    logger.info("Fetching data from PhyloPic API for species: %s", normalized)
    items = phylopic.query_images(normalized)
    run.results = len(items)

    for item in items:
        try:
            silhouette, marker = process_result(item, normalized, store)
        except SpeciesMarkerError as exc:
            logger.error("Skipping %r (%s): %s", item.title, item.href, exc)
            run.failures.append(ResultFailure(title=item.title, href=item.href, error=str(exc)))
            continue
        run.silhouettes.append(silhouette)
        if marker not in run.markers:
            run.markers.append(marker)

    return run
