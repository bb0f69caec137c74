"""Vector (SVG) silhouette downloads."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from species_marker.datasources.phylopic import client
from species_marker.errors import HTTPError
from species_marker.store import OutputStore

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def download_vector(url: str, species: str, uuid: str, output_dir: Path) -> Path:
    """
    Download a silhouette SVG and save it under ``output_dir``.

    The file is named ``{species_with_underscores}_{uuid}.svg``.

    Args:
        url: Vector image URL (see ``images.vector_url``).
        species: Normalized species name.
        uuid: Image UUID.
        output_dir: Directory for the file; created if missing.

    Returns:
        Path of the written file.

    Raises:
        NetworkError: No response.
        HTTPError: Any status other than 200. Nothing is written.
        FilesystemError: The directory or file couldn't be written.
    """
    store = OutputStore(output_dir)
    path = store.silhouette_path(species, uuid)

    resp = client.get(url, accept=client.SVG_MEDIA_TYPE)
    if resp.status_code != 200:
        msg = f"Failed to download SVG from {url}: status code {resp.status_code}"
        raise HTTPError(msg, status_code=resp.status_code, url=url)

    store.write(path, resp.content)
    logger.info("Downloaded SVG to %s", path)
    return path
