"""
Shared HTTP client with automatic retry and backoff.

Provides a pre-configured ``requests.Session`` that retries on transient
network errors (timeouts, connection resets, 502/503/504) with exponential
backoff. Remote daily tables are always fetched through it.

Usage::

    from temperature_heatmap.services.http import session

    resp = session.get("https://example.org/temperature_daily.csv")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from temperature_heatmap import __version__

#: Default retry strategy for static file hosts.
DEFAULT_RETRY = Retry(
    total=3,
    backoff_factor=1,  # 0s, 1s, 2s between retries
    status_forcelist=[429, 500, 502, 503, 504],
    allowed_methods=["GET", "HEAD"],
    raise_on_status=False,  # resp.raise_for_status() reports the final status
)

DEFAULT_TIMEOUT = 20  # seconds

USER_AGENT = f"temperature-heatmap/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Timeout applied to every request that doesn't pass its own.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session - import and use directly.
session: requests.Session = create_session()
