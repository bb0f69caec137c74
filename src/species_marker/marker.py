"""
Map-marker composition.

A marker is a fixed 50x50 pin with the species silhouette drawn inside a
nested 20x20 ``<svg>`` at (4, 8).  PhyloPic vectors are drawn on a
1536x1536 canvas, which the nested viewBox scales down.

The silhouette's inner markup is copied byte-for-byte from the downloaded
file.  It is never re-serialized, so whatever PhyloPic drew is what ends up
in the marker.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING
from xml.parsers import expat

from species_marker.errors import FilesystemError, ParseError
from species_marker.store import OutputStore

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

PIN_PATH = (
    "M14,0 C21.732,0 28,5.641 28,12.6 C28,23.963 14,36 14,36 "
    "C14,36 0,24.064 0,12.6 C0,5.641 6.268,0 14,0 Z"
)
PIN_FILL = "#FF6E6E"

MARKER_TEMPLATE = f"""<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="50" height="50">
    <!-- Map Marker -->
    <g id="map-marker" transform="translate(0, 0)">
        <path d="{PIN_PATH}"
            id="Shape" fill="{PIN_FILL}">
        </path>
    </g>
    <g id="species" transform="translate(4, 8)">
        <svg width="20" height="20" viewBox="0 0 1536 1536" preserveAspectRatio="xMidYMid meet">
            %s
        </svg>
    </g>
</svg>""".encode()

#: Declared encodings whose bytes can be pasted into the UTF-8 template.
UTF8_COMPATIBLE = frozenset({"utf-8", "utf8", "us-ascii", "ascii"})

# Rest of a start tag, honouring quoted attribute values that contain ">".
_TAG_REST_RE = re.compile(rb"""(?:[^>"']|"[^"]*"|'[^']*')*>""")


@dataclass
class VectorDocument:
    """Root attributes and raw inner markup of a silhouette SVG."""

    xmlns: str = ""
    width: str = ""
    height: str = ""
    view_box: str = ""
    content: bytes = b""


def _local_name(name: str) -> str:
    return name.rsplit(":", 1)[-1]


def _check_declared_encoding(version: str, encoding: str | None, standalone: int) -> None:
    if encoding is not None and encoding.lower() not in UTF8_COMPATIBLE:
        msg = f"SVG declares unsupported encoding {encoding!r}; only UTF-8 is accepted"
        raise ParseError(msg)


def parse_vector(data: bytes) -> VectorDocument:
    """
    Parse SVG bytes, keeping the root's inner markup verbatim.

    The marker template is UTF-8, so input in any other encoding is rejected
    rather than pasted in as mis-encoded bytes.

    Raises:
        ParseError: Not UTF-8, not well-formed XML, or the root element
            isn't ``<svg>``.
    """
    try:
        data.decode("utf-8")
    except UnicodeDecodeError as exc:
        msg = f"SVG is not UTF-8 encoded: {exc}"
        raise ParseError(msg) from exc

    parser = expat.ParserCreate()
    parser.XmlDeclHandler = _check_declared_encoding
    doc = VectorDocument()
    depth = 0
    root_start: int | None = None
    root_end: int | None = None
    root_name = ""

    def on_start(name: str, attrs: dict[str, str]) -> None:
        nonlocal depth, root_start, root_name
        if depth == 0:
            root_name = name
            root_start = parser.CurrentByteIndex
            doc.xmlns = attrs.get("xmlns", "")
            doc.width = attrs.get("width", "")
            doc.height = attrs.get("height", "")
            doc.view_box = attrs.get("viewBox", "")
        depth += 1

    def on_end(name: str) -> None:
        nonlocal depth, root_end
        depth -= 1
        if depth == 0:
            root_end = parser.CurrentByteIndex

    parser.StartElementHandler = on_start
    parser.EndElementHandler = on_end

    try:
        parser.Parse(data, True)
    except expat.ExpatError as exc:
        msg = f"Malformed SVG: {exc}"
        raise ParseError(msg) from exc

    if root_start is None or root_end is None:
        msg = "Malformed SVG: no root element"
        raise ParseError(msg)
    if _local_name(root_name) != "svg":
        msg = f"Expected <svg> root element, found <{root_name}>"
        raise ParseError(msg)

    match = _TAG_REST_RE.match(data, root_start)
    if match is None:
        msg = "Malformed SVG: unterminated root start tag"
        raise ParseError(msg)
    content_start = match.end()
    if data[content_start - 2 : content_start] != b"/>":
        doc.content = data[content_start:root_end]
    return doc


def render_marker(content: bytes) -> bytes:
    """Marker document with ``content`` embedded unmodified."""
    return MARKER_TEMPLATE % content


def compose_marker(silhouette_path: Path, output_path: Path) -> None:
    """
    Build a marker from a downloaded silhouette and write it to ``output_path``.

    ``output_path`` is overwritten; it is left untouched if the silhouette
    can't be read or parsed.

    Raises:
        FilesystemError: Reading the silhouette or writing the marker failed.
        ParseError: The silhouette is not well-formed SVG.
    """
    logger.debug("Species SVG path: %s", silhouette_path)
    try:
        data = silhouette_path.read_bytes()
    except OSError as exc:
        msg = f"Failed to read species SVG {silhouette_path}: {exc}"
        raise FilesystemError(msg) from exc

    vector = parse_vector(data)
    OutputStore(output_path.parent).write(output_path, render_marker(vector.content))
    logger.info("Created combined SVG: %s", output_path)
