"""
Authenticated GET against the FTC Events API.

Each call opens its own connection via requests.get; nothing is pooled.
"""
import logging

import requests

from ftcapi.config import ClientConfig
from ftcapi.errors import HTTPStatusError, TransportError, status_text

logger = logging.getLogger(__name__)

HEADERS = {"Accept": "application/json"}


def get_url(url: str, config: ClientConfig) -> bytes:
    """
    GET `url` with Basic auth and return the raw body.

    Raises TransportError if the request cannot be sent and HTTPStatusError
    if the status is not 2xx.
    """
    logger.debug("GET %s", url)
    try:
        resp = requests.get(
            url,
            auth=config.auth,
            headers=HEADERS,
            verify=config.verify_ssl,
            timeout=config.timeout,
        )
    except requests.RequestException as e:
        logger.debug("GET %s failed: %s", url, e)
        raise TransportError(f"GET {url} failed: {e}") from e

    if resp.status_code < 200 or resp.status_code >= 300:
        logger.debug("GET %s returned %d", url, resp.status_code)
        raise HTTPStatusError(resp.status_code, status_text(resp.status_code) or resp.reason or "")

    return resp.content
