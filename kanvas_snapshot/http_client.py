"""httpx client construction shared by the import and dispatch steps."""

from contextlib import contextmanager

import httpx

from .config import Settings
from .errors import HTTPRequestFailed


def build_client(settings: Settings, transport: httpx.BaseTransport = None) -> httpx.Client:
    """
    Create an `httpx.Client` with the configured request timeout.

    Args:
        settings: Plugin settings
        transport: Optional transport override (e.g. httpx.MockTransport in tests)
    """
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        transport=transport,
    )


@contextmanager
def client_or_new(settings: Settings, client: httpx.Client = None):
    """Yield the given client, or a new one that is closed on exit."""
    if client is not None:
        yield client
        return
    with build_client(settings) as own_client:
        yield own_client


def post(client: httpx.Client, url: str, content: bytes, headers: dict) -> httpx.Response:
    """
    Send a single POST request.

    Raises:
        HTTPRequestFailed: If the request cannot be built (bad URL, header
            values that are not ASCII) or the transport fails
    """
    try:
        request = client.build_request("POST", url, content=content, headers=headers)
    except (httpx.InvalidURL, UnicodeEncodeError) as e:
        raise HTTPRequestFailed(url, f"invalid request: {e}") from e

    try:
        return client.send(request)
    except httpx.RequestError as e:
        raise HTTPRequestFailed(url, f"{type(e).__name__}: {e}") from e
