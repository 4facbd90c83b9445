"""
Exception types raised by the Avgle client.

Every error raised by this package derives from :class:`AvgleError`, so
callers can catch the whole family with one ``except`` clause.
"""

from typing import Optional


class AvgleError(Exception):
    """Base class for all client errors."""


class ConfigError(AvgleError, ValueError):
    """Raised when the client cannot be constructed (e.g. an invalid base URL)."""


class InvalidArgumentError(AvgleError, ValueError):
    """Raised before any I/O when a required argument is missing."""


class TransportError(AvgleError):
    """Raised when the HTTP request itself fails.

    The original ``requests`` exception is available as ``__cause__``.
    """

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class RequestTimeoutError(TransportError):
    """Raised when the request is aborted because its timeout expired."""


class DecodeError(AvgleError, ValueError):
    """Raised when the response body is not a JSON object."""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class VideoNotFoundError(AvgleError):
    """Raised by a single-video lookup when the API reports ``success: false``."""

    def __init__(self, vid: str) -> None:
        super().__init__(f"video of VID {vid} not found")
        self.vid = vid
