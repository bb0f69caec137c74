"""Exceptions raised while building a marker."""

from __future__ import annotations


class SpeciesMarkerError(Exception):
    """Base class for every failure the pipeline knows how to report."""


class NetworkError(SpeciesMarkerError):
    """The request never got a response (DNS, connection, timeout)."""


class HTTPError(SpeciesMarkerError):
    """The server answered with a status we don't accept."""

    def __init__(
        self, message: str, status_code: int | None = None, url: str | None = None
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class DecodeError(SpeciesMarkerError):
    """A JSON response body is not valid or doesn't have the expected shape."""


class ParseError(SpeciesMarkerError):
    """A silhouette file is not well-formed SVG markup."""


class FilesystemError(SpeciesMarkerError):
    """Creating the output directory or reading/writing a file failed."""
