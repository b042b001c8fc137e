"""HTTP session with retry logic for the profile-lookup service."""

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger("linkedcv.http")

USER_AGENT = "LinkedCV/0.1"


def create_session(max_retries: int = 3, backoff_factor: float = 1.0) -> requests.Session:
    """Create a requests session that retries throttled and failed GETs."""
    session = requests.Session()

    retry_strategy = Retry(
        total=max_retries,
        backoff_factor=backoff_factor,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"],
        # Hand the final response back instead of raising, so callers can map statuses
        raise_on_status=False,
    )

    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    session.headers.update({
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    })

    return session
