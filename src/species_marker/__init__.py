"""Species Marker - map-marker SVGs built from PhyloPic silhouettes.

Architecture::

    names.py       Species name normalization (case fold, strip diacritics)
    datasources/   External APIs (PhyloPic image index + vector images)
    marker.py      Parse a silhouette SVG and embed it in the pin template
    pipeline.py    One species in, silhouettes + marker out
    services/      Shared utilities (HTTP session with default timeout)
    cli.py         ``species-map-marker make-marker <species>``

Data flow: cli → pipeline → names → datasources/phylopic → marker → files/
"""

__version__ = "0.1.0"

from species_marker.config import Settings
from species_marker.pipeline import MarkerRun, make_marker

__all__ = ["MarkerRun", "Settings", "__version__", "make_marker"]
