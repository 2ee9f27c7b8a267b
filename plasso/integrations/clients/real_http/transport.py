"""
Plasso HTTP transport.

The single place where HTTP calls to Plasso are made. Every request is a
JSON body sent with Content-Type: application/json; every non-2xx reply is
raised as PlassoAPIError. Transport failures propagate as httpx.HTTPError.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx

from plasso.integrations.policy.response_wrappers import PlassoAPIError

logger = logging.getLogger(__name__)


def send_request(
    method: str,
    path: str,
    payload: Any,
    *,
    base_url: str,
    timeout: float,
    client: Optional[httpx.Client] = None,
) -> bytes:
    """
    Send `payload` as JSON to `base_url + path` and return the raw reply body.

    Args:
        method: HTTP method (POST, DELETE, ...)
        path: Path (with query string) appended to base_url
        payload: Anything json.dumps accepts
        base_url: Scheme and host, without a trailing slash
        timeout: Per-request timeout in seconds
        client: Optional httpx.Client to send through (tests inject one
            with a MockTransport); a throwaway client is used otherwise

    Raises:
        PlassoAPIError: If the reply status is not 2xx
        httpx.HTTPError: On connection errors and timeouts
    """
    url = f"{base_url}{path}"
    body = json.dumps(payload).encode("utf-8")
    headers = {"Content-Type": "application/json"}

    logger.debug("Plasso request: %s %s", method, url)
    try:
        if client is None:
            with httpx.Client(timeout=timeout) as owned:
                response = owned.request(method, url, content=body, headers=headers)
        else:
            response = client.request(method, url, content=body, headers=headers, timeout=timeout)
    except httpx.HTTPError as exc:
        logger.warning("Plasso request failed: %s %s: %s", method, url, exc)
        raise

    if not response.is_success:
        logger.warning("Plasso request failed: %s %s -> %d", method, url, response.status_code)
        raise PlassoAPIError(method, response.status_code, url, response.content)

    return response.content
