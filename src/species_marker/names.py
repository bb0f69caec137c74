"""
Species name normalization.

PhyloPic's ``filter_name`` matches on a lowercase, accent-free form of the
name, so user input like ``"  Bûfo   Bufo "`` is folded to ``"bufo bufo"``
before querying.  The same normalized form names the output files.
"""

from __future__ import annotations

import logging
import unicodedata

logger = logging.getLogger(__name__)


def _strip_diacritics(text: str) -> str:
    """NFD, drop combining marks (category ``Mn``), NFC."""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def normalize(raw: str) -> str:
    """
    Canonicalize a species name for querying.

    Case-folds, strips diacritics and collapses whitespace runs into single
    spaces.  Idempotent.  If the Unicode transform fails the case-folded
    input is returned as-is rather than aborting the run.
    """
    folded = raw.casefold()
    try:
        result = _strip_diacritics(folded)
    except (ValueError, TypeError) as exc:
        logger.debug("Diacritic stripping failed for %r, using case-folded name: %s", raw, exc)
        return folded
    return " ".join(result.split())


def slugify_species(name: str) -> str:
    """Filename stem for a (normalized) species name: spaces become underscores."""
    return name.replace(" ", "_")
