"""
Request building, execution and response decoding.

The client never talks to the network directly: it hands a prepared GET
request to a *transport*, any object with a requests-style ``send()``.
``requests.Session`` is the default transport; tests substitute doubles
that return canned responses.

Usage:
    from avgle.transport import build_request, execute, decode_body

    request = build_request('https://api.avgle.com/v1', '/categories')
    response = execute(session, request, timeout=30)
    result = decode_body(response, GetCategoriesResp)
"""

import logging
import threading
from typing import Optional, Protocol, Type, TypeVar
from urllib.parse import urlsplit, urlunsplit

import requests

from avgle.errors import DecodeError, RequestTimeoutError, TransportError

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_HEADERS = {
    'Accept': 'application/json',
}


class Transport(Protocol):
    """Anything able to execute a prepared request and return a response."""

    def send(self, request: requests.PreparedRequest, **kwargs) -> requests.Response:
        ...


_default_session: Optional[requests.Session] = None
_default_session_lock = threading.Lock()


def default_transport() -> requests.Session:
    """Return the process-wide shared session, creating it on first use."""
    global _default_session
    with _default_session_lock:
        if _default_session is None:
            _default_session = requests.Session()
        return _default_session


def join_url(base_url: str, raw_path: str) -> str:
    """
    Append *raw_path* to the path of *base_url*.

    The base URL's own path is kept as a prefix, so
    ``join_url('https://host/api', '/categories')`` gives
    ``https://host/api/categories``. Repeated and trailing slashes are
    collapsed. A query string on *raw_path* becomes the URL's query.
    """
    base = urlsplit(base_url)
    rel = urlsplit(raw_path)

    segments = [s for s in f"{base.path}/{rel.path}".split('/') if s]
    path = '/' + '/'.join(segments)

    query = '&'.join(q for q in (base.query, rel.query) if q)
    return urlunsplit((base.scheme, base.netloc, path, query, ''))


def build_request(base_url: str, raw_path: str, transport=None) -> requests.PreparedRequest:
    """
    Build a body-less GET request for *raw_path* relative to *base_url*.

    When *transport* can prepare requests (``requests.Session`` does), it
    prepares this one too, so its headers, cookies and auth are merged in.
    """
    # Dot segments are escaped twice: urllib3 would drop them while parsing,
    # and requests unquotes %2E again once the URL is parsed.
    url = escape_dot_segments(join_url(base_url, raw_path))
    request = requests.Request('GET', url, headers=dict(DEFAULT_HEADERS))
    prepare_request = getattr(transport, 'prepare_request', None)
    if prepare_request is not None:
        prepared = prepare_request(request)
    else:
        prepared = request.prepare()
    prepared.url = escape_dot_segments(prepared.url)
    return prepared


def escape_dot_segments(url: str) -> str:
    """Percent-encode path segments that are exactly ``.`` or ``..``."""
    parts = urlsplit(url)
    segments = [
        s.replace('.', '%2E') if s in ('.', '..') else s
        for s in parts.path.split('/')
    ]
    return urlunsplit(parts._replace(path='/'.join(segments)))


def execute(transport: Transport, request: requests.PreparedRequest, timeout=None) -> requests.Response:
    """
    Send *request* through *transport*.

    Args:
        transport: Transport handle (e.g. ``requests.Session``)
        request: Prepared request from :func:`build_request`
        timeout: Seconds (or ``(connect, read)``) before the request is aborted

    Returns:
        requests.Response: the undecoded response, body not yet read

    Raises:
        RequestTimeoutError: the timeout expired
        TransportError: any other network-level failure
    """
    logger.debug(f"GET {request.url}")
    try:
        return transport.send(request, timeout=timeout, stream=True)
    except requests.Timeout as e:
        logger.error(f"Request timed out: {request.url}: {e}")
        raise RequestTimeoutError(f"request to {request.url} timed out: {e}", url=request.url) from e
    except requests.RequestException as e:
        logger.error(f"Request failed: {request.url}: {e}")
        raise TransportError(f"request to {request.url} failed: {e}", url=request.url) from e


def decode_body(response: requests.Response, record_type: Type[T]) -> T:
    """
    Decode a JSON response body into *record_type*.

    The HTTP status is not inspected; the envelope's ``success`` flag carries
    the API outcome. The response is closed whether or not decoding succeeds.

    Raises:
        DecodeError: the body is not JSON or does not have the expected shape
        TransportError: the connection failed while the body was being read
    """
    url = getattr(response, 'url', None)
    try:
        logger.debug(f"Response: HTTP {response.status_code} from {url}")
        payload = response.json()
        return record_type.from_dict(payload)
    except (ValueError, TypeError) as e:
        logger.warning(f"Failed to decode response from {url}: {e}")
        raise DecodeError(f"failed to decode response from {url}: {e}", url=url) from e
    except requests.RequestException as e:
        # Body read failed mid-stream
        logger.error(f"Failed to read response body from {url}: {e}")
        raise TransportError(f"failed to read response from {url}: {e}", url=url) from e
    finally:
        response.close()
