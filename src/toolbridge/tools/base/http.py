"""Send one HTTP request and read the full body.

Shared by every tool. Exactly one attempt is made per call; the caller owns
any retry policy. The response stream is closed on every exit path.
"""

from __future__ import annotations

import logging
import time

import httpx

from toolbridge.tools.base.exceptions import ResponseReadError, TransportError

logger = logging.getLogger(__name__)


async def execute(client: httpx.AsyncClient, request: httpx.Request) -> bytes:
    """Send a prepared request and return the raw response body.

    The status code is not interpreted: an upstream error payload is
    returned like any other body.

    Args:
        client: The HTTP client to send through.
        request: A request built with ``client.build_request()``.

    Returns:
        The complete response body.

    Raises:
        TransportError: If the request could not be sent or timed out.
        ResponseReadError: If reading the body failed.
    """
    start = time.monotonic()
    try:
        response = await client.send(request, stream=True)
    except httpx.HTTPError as e:
        raise TransportError(f"failed to execute request: {e}") from e

    try:
        body = await response.aread()
    except httpx.HTTPError as e:
        raise ResponseReadError(f"failed to read response body: {e}") from e
    finally:
        await response.aclose()

    logger.debug(
        "%s %s -> %d (%d bytes, took=%dms)",
        request.method,
        request.url,
        response.status_code,
        len(body),
        int((time.monotonic() - start) * 1000),
    )
    return body
