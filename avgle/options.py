"""
Client configuration.

A client is configured through a :class:`ClientConfig`. It can be built
directly with named fields, or by applying a sequence of option mutators::

    from avgle import new_client, with_base_url, with_timeout

    client = new_client(with_base_url('https://api.example.com/v1'), with_timeout(10))

Unset fields fall back to the built-in defaults when the client is created.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, Union

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://api.avgle.com/v1'
DEFAULT_TIMEOUT = 30

Timeout = Union[float, Tuple[float, float], None]


@dataclass
class ClientConfig:
    """Configuration for :class:`avgle.client.AvgleClient`.

    Attributes:
        base_url: API root; relative endpoint paths are appended to its path.
        http_client: Transport handle (anything with a requests-style
                     ``send(prepared_request, **kwargs)``). ``None`` means the
                     shared default session.
        timeout: Seconds to wait for the server, or a ``(connect, read)``
                 tuple. Used for calls that do not pass their own timeout.
    """
    base_url: str = ''
    http_client: Any = None
    timeout: Timeout = DEFAULT_TIMEOUT

    def __post_init__(self):
        if not self.base_url:
            self.base_url = DEFAULT_BASE_URL


ClientOption = Callable[[ClientConfig], None]


def with_base_url(base_url: str) -> ClientOption:
    """Override the API base URL. An empty string keeps the default."""
    def apply(config: ClientConfig) -> None:
        if base_url:
            config.base_url = base_url
    return apply


def with_http_client(http_client) -> ClientOption:
    """Override the transport handle. ``None`` keeps the default."""
    def apply(config: ClientConfig) -> None:
        if http_client is not None:
            config.http_client = http_client
    return apply


def with_timeout(timeout: Timeout) -> ClientOption:
    """Override the default per-request timeout."""
    def apply(config: ClientConfig) -> None:
        config.timeout = timeout
    return apply


def resolve_config(*options: ClientOption) -> ClientConfig:
    """Apply *options* in order to a fresh default configuration."""
    config = ClientConfig()
    for option in options:
        option(config)
    return config


def load_config_defaults() -> Dict[str, Any]:
    """
    Read client settings from the user's ``config.py`` if one exists.

    Recognised names are ``AVGLE_BASE_URL`` and ``AVGLE_REQUEST_TIMEOUT``;
    anything missing keeps the built-in default.

    Returns:
        dict: keyword arguments for :class:`ClientConfig`
    """
    defaults: Dict[str, Any] = {'base_url': DEFAULT_BASE_URL, 'timeout': DEFAULT_TIMEOUT}
    try:
        import config as user_config
    except ImportError:
        logger.debug("config.py not found, using built-in client defaults")
        return defaults

    base_url: Optional[str] = getattr(user_config, 'AVGLE_BASE_URL', None)
    if base_url:
        defaults['base_url'] = base_url
    if hasattr(user_config, 'AVGLE_REQUEST_TIMEOUT'):
        defaults['timeout'] = user_config.AVGLE_REQUEST_TIMEOUT
    return defaults
