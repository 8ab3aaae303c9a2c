"""HTTP helpers for reading the dataset from a URL.

The dataset is fetched exactly once per process, so there is no retry
adapter and no response cache here; a failed fetch is reported to the caller.
"""

import logging
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)

USER_AGENT = "kickstarter-graveyard/1.0"


def is_url(source: str) -> bool:
    """Return True if *source* looks like an http(s) URL rather than a path."""
    return str(source).lower().startswith(("http://", "https://"))


def fetch_json(url: str, timeout: float = 10.0,
               session: Optional[requests.Session] = None) -> Any:
    """GET *url* and decode the body as JSON.

    Args:
        url: Resource to fetch
        timeout: Seconds to wait for connect and read
        session: Optional requests.Session (default: one-shot request)

    Returns:
        The decoded JSON document

    Raises:
        requests.RequestException: Network failure or non-2xx status
        ValueError: Body is not valid JSON
    """
    getter = session.get if session is not None else requests.get
    response = getter(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
    response.raise_for_status()
    logger.debug("Fetched %s (%d bytes)", url, len(response.content))
    return response.json()
