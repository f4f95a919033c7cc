import asyncio
import logging
from typing import Any

import httpx

from domain.errors import UpstreamUnavailable


logger = logging.getLogger(__name__)


DEFAULT_TIMEOUT = 10.0


class RemoteEndpoint:
    def __init__(self, url: str, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.url = url
        self.timeout = timeout

    def __repr__(self) -> str:
        return f"<RemoteEndpoint(url={self.url}, timeout={self.timeout})>"


def remote_client_factory(timeout: float = DEFAULT_TIMEOUT) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers={"Content-Type": "application/json"},
        timeout=timeout,
    )


async def post_json(
    client: httpx.AsyncClient,
    endpoint: RemoteEndpoint,
    payload: dict[str, Any],
) -> httpx.Response:
    """One attempt, bounded by the endpoint's timeout. No retries.

    httpx times each phase separately, so a remote dripping its body a byte
    at a time never trips it. The whole exchange is capped as well.
    """
    logger.debug("POST %s", endpoint.url)
    try:
        async with asyncio.timeout(endpoint.timeout):
            resp = await client.post(
                endpoint.url, json=payload, timeout=endpoint.timeout
            )
    except (httpx.TimeoutException, TimeoutError) as e:
        raise UpstreamUnavailable(f"Timed out calling {endpoint.url}") from e
    except httpx.HTTPError as e:
        raise UpstreamUnavailable(f"Could not reach {endpoint.url}: {e!r}") from e

    if not resp.is_success:
        raise UpstreamUnavailable(
            f"{endpoint.url} answered {resp.status_code} {resp.reason_phrase}",
            status_code=resp.status_code,
        )
    return resp


def json_body(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError as e:
        raise UpstreamUnavailable(f"Unparseable body from {resp.request.url}") from e
