"""
Avgle Catalog Client.

A thin binding over the Avgle video-catalog REST API: categories,
collections, video listings, search, and single-video lookup, decoded into
immutable dataclass records.

Quick start::

    from avgle import new_client, with_timeout

    client = new_client(with_timeout(10))
    categories = client.get_categories()

Command line::

    python scripts/catalog_query.py search SSNI-388
"""

from avgle.client import (
    AvgleClient,
    new_client,
    create_client_from_config,
)
from avgle.errors import (
    AvgleError,
    ConfigError,
    InvalidArgumentError,
    TransportError,
    RequestTimeoutError,
    DecodeError,
    VideoNotFoundError,
)
from avgle.models import (
    Category,
    Collection,
    Video,
    CategoriesPayload,
    CollectionsPayload,
    VideosPayload,
    VideoPayload,
    GetCategoriesResp,
    GetCollectionsResp,
    GetVideosResp,
    SearchVideosResp,
    SearchJAVsResp,
    GetVideoByVIDResp,
)
from avgle.options import (
    DEFAULT_BASE_URL,
    ClientConfig,
    with_base_url,
    with_http_client,
    with_timeout,
)
from avgle.transport import Transport

__version__ = '0.1.0'

__all__ = [
    # Client
    'AvgleClient',
    'new_client',
    'create_client_from_config',
    # Options
    'DEFAULT_BASE_URL',
    'ClientConfig',
    'with_base_url',
    'with_http_client',
    'with_timeout',
    'Transport',
    # Models
    'Category',
    'Collection',
    'Video',
    'CategoriesPayload',
    'CollectionsPayload',
    'VideosPayload',
    'VideoPayload',
    'GetCategoriesResp',
    'GetCollectionsResp',
    'GetVideosResp',
    'SearchVideosResp',
    'SearchJAVsResp',
    'GetVideoByVIDResp',
    # Errors
    'AvgleError',
    'ConfigError',
    'InvalidArgumentError',
    'TransportError',
    'RequestTimeoutError',
    'DecodeError',
    'VideoNotFoundError',
]
