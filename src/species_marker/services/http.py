"""
Shared HTTP client.

Provides a pre-configured ``requests.Session`` with a project User-Agent and
a default timeout.  Transport-level retries are switched off: the only second
attempt this tool makes is the build-pinned PhyloPic query, which the caller
issues explicitly.  Redirects are followed by requests itself.

Usage::

    from species_marker.services.http import session

    resp = session.get("https://api.phylopic.org/images", timeout=30)
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from species_marker import __version__
from species_marker.config import get_settings

#: No retries on connect/read/status; redirects stay with requests.
NO_RETRY = Retry(
    total=0,
    connect=0,
    read=0,
    status=0,
    redirect=None,
    raise_on_status=False,  # callers check the status themselves
)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"{get_settings().app_name}/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``NO_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session — import and use directly.
session: requests.Session = create_session(timeout=get_settings().http_timeout)
