"""
Client for the Avgle video-catalog API.

Usage:
    from avgle import new_client

    client = new_client()
    resp = client.search_videos('SSNI-388')
    if resp.success:
        for video in resp.response.videos:
            print(video.vid, video.title)

Only :meth:`AvgleClient.get_video_by_vid` turns ``success: false`` into an
exception. The list endpoints return the envelope as decoded and leave the
``success`` flag for the caller to check.
"""

import logging
from typing import Optional, Type, TypeVar, Union
from urllib.parse import quote, urlsplit

from avgle.errors import ConfigError, InvalidArgumentError, VideoNotFoundError
from avgle.models import (
    GetCategoriesResp,
    GetCollectionsResp,
    GetVideoByVIDResp,
    GetVideosResp,
    SearchJAVsResp,
    SearchVideosResp,
)
from avgle.options import ClientConfig, ClientOption, load_config_defaults, resolve_config
from avgle.transport import build_request, decode_body, default_transport, execute

logger = logging.getLogger(__name__)

DEFAULT_PAGE = '0'
DEFAULT_LIMIT = '50'

# Sentinel so that an explicit ``timeout=None`` (wait forever) can be told
# apart from "use the client's timeout".
_CLIENT_TIMEOUT = object()

Param = Union[str, int]
T = TypeVar('T')


def _param(value: Optional[Param], default: str) -> str:
    """Stringify a page/limit parameter, substituting *default* for ''."""
    if value is None or value == '':
        return default
    return str(value)


def _segment(value: Param) -> str:
    """Percent-encode *value* as a single path segment."""
    return quote(str(value), safe='')


class AvgleClient:
    """
    Thin binding over the Avgle REST API.

    The client holds only its base URL, transport and default timeout, none
    of which change after construction, so one instance can be shared between
    threads. Each call builds a fresh request and performs exactly one GET;
    nothing is retried or cached.
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        """
        Initialize the client.

        Args:
            config: ClientConfig instance; defaults apply for unset fields

        Raises:
            ConfigError: the base URL is not an absolute http(s) URL
        """
        self.config = config or ClientConfig()
        self.base_url = self._parse_base_url(self.config.base_url)
        self.transport = self.config.http_client or default_transport()
        self.timeout = self.config.timeout

    @staticmethod
    def _parse_base_url(raw_url: str) -> str:
        try:
            parsed = urlsplit(raw_url)
            parsed.port  # raises ValueError for an out-of-range port
        except ValueError as e:
            raise ConfigError(f"failed to parse URL: {raw_url!r}: {e}") from e
        if parsed.scheme not in ('http', 'https') or not parsed.hostname:
            raise ConfigError(f"failed to parse URL: {raw_url!r}: expected an absolute http(s) URL")
        return raw_url

    def _get(self, raw_path: str, record_type: Type[T], timeout) -> T:
        if timeout is _CLIENT_TIMEOUT:
            timeout = self.timeout
        request = build_request(self.base_url, raw_path, self.transport)
        response = execute(self.transport, request, timeout=timeout)
        return decode_body(response, record_type)

    def get_categories(self, timeout=_CLIENT_TIMEOUT) -> GetCategoriesResp:
        """Retrieve all video categories."""
        return self._get('/categories', GetCategoriesResp, timeout)

    def get_collections(self, page: Param = '', limit: Param = '',
                        timeout=_CLIENT_TIMEOUT) -> GetCollectionsResp:
        """
        Retrieve one page of video collections.

        Args:
            page: Zero-based page number ('' means "0")
            limit: Collections per page ('' means "50")
        """
        page = _param(page, DEFAULT_PAGE)
        limit = _param(limit, DEFAULT_LIMIT)
        raw_path = f"/collections/{_segment(page)}?limit={quote(limit, safe='')}"
        return self._get(raw_path, GetCollectionsResp, timeout)

    def get_videos(self, page: Param = '', timeout=_CLIENT_TIMEOUT) -> GetVideosResp:
        """Retrieve one page of all videos in the catalog."""
        page = _param(page, DEFAULT_PAGE)
        return self._get(f"/videos/{_segment(page)}", GetVideosResp, timeout)

    def search_videos(self, query: str, page: Param = '',
                      timeout=_CLIENT_TIMEOUT) -> SearchVideosResp:
        """
        Search videos matching *query*.

        Raises:
            InvalidArgumentError: query is empty (no request is sent)
        """
        if query == '' or query is None:
            raise InvalidArgumentError("invalid argument: query is empty")
        page = _param(page, DEFAULT_PAGE)
        return self._get(f"/search/{_segment(query)}/{_segment(page)}", SearchVideosResp, timeout)

    def search_javs(self, query: str, page: Param = '',
                    timeout=_CLIENT_TIMEOUT) -> SearchJAVsResp:
        """
        Search JAV videos (categories with CHID <= 12) matching *query*.

        Raises:
            InvalidArgumentError: query is empty (no request is sent)
        """
        if query == '' or query is None:
            raise InvalidArgumentError("invalid argument: query is empty")
        page = _param(page, DEFAULT_PAGE)
        return self._get(f"/jav/{_segment(query)}/{_segment(page)}", SearchJAVsResp, timeout)

    def get_video_by_vid(self, vid: Param, timeout=_CLIENT_TIMEOUT) -> GetVideoByVIDResp:
        """
        Retrieve a single video by its VID.

        Raises:
            VideoNotFoundError: the API answered with ``success: false``
        """
        vid = str(vid)
        resp = self._get(f"/video/{_segment(vid)}", GetVideoByVIDResp, timeout)
        if not resp.success:
            logger.info(f"Video not found: VID {vid}")
            raise VideoNotFoundError(vid)
        return resp


def new_client(*options: ClientOption) -> AvgleClient:
    """
    Create a client from option mutators.

    Example:
        client = new_client(with_base_url('https://host/api'), with_http_client(session))
    """
    return AvgleClient(resolve_config(*options))


def create_client_from_config(**config_kwargs) -> AvgleClient:
    """
    Create a client from ``config.py`` settings, overridden by keyword args.

    Args:
        **config_kwargs: ClientConfig fields (base_url, http_client, timeout)

    Returns:
        Configured AvgleClient instance
    """
    settings = load_config_defaults()
    settings.update(config_kwargs)
    return AvgleClient(ClientConfig(**settings))
