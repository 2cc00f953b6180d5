"""
Outbound calls to the open-data sources and relay of their answers.

One pooled requests.Session is shared by every handler; a response is
streamed back to the caller chunk by chunk and the upstream connection is
returned to the pool as soon as the stream ends, cleanly or not.
"""
import logging
from typing import Optional

import requests
from fastapi.responses import StreamingResponse

from kadastro.core import config

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024

_session: Optional[requests.Session] = None


class UpstreamError(Exception):
    """Base class for failures talking to an open-data source."""

    def __init__(self, source: str, message: str):
        super().__init__(message)
        self.source = source


class UpstreamUnavailable(UpstreamError):
    """DNS, connect, timeout or any other transport failure."""

    def __init__(self, source: str, error: Exception):
        super().__init__(source, str(error))
        self.error = error


class UpstreamStatusError(UpstreamError):
    """The source answered, but not with a 200."""

    def __init__(self, source: str, status_code: int):
        super().__init__(source, f"{source} answered HTTP {status_code}")
        self.status_code = status_code


def get_session() -> requests.Session:
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


def close_session() -> None:
    global _session
    if _session is not None:
        _session.close()
        _session = None


def fetch(url: str, source: str) -> requests.Response:
    """GET `url` without reading the body yet."""
    logger.debug("➡️  %s GET %s", source, url)
    try:
        return get_session().get(url, stream=True, timeout=config.UPSTREAM_TIMEOUT)
    except requests.RequestException as e:
        # DNS, connect, timeout: nothing came back at all
        logger.error("❌ %s unreachable: %s", source, e)
        raise UpstreamUnavailable(source, e) from e


def iter_body(upstream: requests.Response, source: str):
    """
    Yield the upstream body in chunks, then release the connection.
    The response is closed however iteration ends: exhausted, failed
    mid-body, or abandoned when the caller disconnects.
    """
    try:
        yield from upstream.iter_content(chunk_size=CHUNK_SIZE)
    except requests.RequestException as e:
        # Headers are already sent, the caller only sees a truncated body
        logger.error("❌ %s failed mid-body: %s", source, e)
        raise
    finally:
        upstream.close()


def relay(upstream: requests.Response, source: str) -> StreamingResponse:
    """
    Stream a 200 upstream body back as application/json.
    Any other status is raised as UpstreamStatusError.
    """
    # 1. Error statuses: free the connection now, the handler picks the message
    if upstream.status_code != 200:
        logger.warning("⚠️  %s answered %s for %s", source, upstream.status_code, upstream.url)
        upstream.close()
        raise UpstreamStatusError(source, upstream.status_code)

    # 2. Success: pass the bytes through, never parsed
    return StreamingResponse(
        iter_body(upstream, source),
        status_code=200,
        media_type="application/json",
    )


def proxy_json(url: str, source: str) -> StreamingResponse:
    return relay(fetch(url, source), source)
