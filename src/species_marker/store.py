"""Output directory for silhouettes and markers.

Layout under the base directory (``files/`` by default)::

    {species_slug}_{uuid}.svg   raw silhouette as downloaded
    {species_slug}_marker.svg   composed map marker

The directory is created owner-only (``0o700``) and every file is written
owner read/write (``0o600``).  Nothing here is read back between runs.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from species_marker.errors import FilesystemError
from species_marker.names import slugify_species

if TYPE_CHECKING:
    from pathlib import Path

DIR_MODE = 0o700
FILE_MODE = 0o600


class OutputStore:
    """Writes marker artifacts under a single base directory."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir

    def ensure(self) -> Path:
        """Create the base directory if it doesn't exist yet."""
        try:
            self.base.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
        except OSError as exc:
            msg = f"Failed to create files directory {self.base}: {exc}"
            raise FilesystemError(msg) from exc
        return self.base

    def silhouette_path(self, species: str, uuid: str) -> Path:
        return self._resolve(f"{slugify_species(species)}_{uuid}.svg")

    def marker_path(self, species: str) -> Path:
        return self._resolve(f"{slugify_species(species)}_marker.svg")

    def write(self, path: Path, data: bytes) -> Path:
        """Write ``data`` to ``path`` (overwriting) and restrict it to the owner.

        Returns:
            The written path.
        """
        self.ensure()
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            # os.open only applies the mode when it creates the file
            path.chmod(FILE_MODE)
        except OSError as exc:
            msg = f"Failed to write {path}: {exc}"
            raise FilesystemError(msg) from exc
        return path

    def _resolve(self, name: str) -> Path:
        full = self.base / name
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes output directory: {name}"
            raise FilesystemError(msg) from None
        return full
