"""
Data models for the Avgle catalog API.

Records are frozen dataclasses: once decoded from a response they are not
modified. Each record converts from and to the upstream JSON object with
``from_dict()`` / ``to_dict()``; the JSON field names are the upstream ones,
verbatim and case-sensitive (note the uppercase ``CHID`` on categories).

Keys missing from a payload (or set to ``null``) decode to the field's zero
value, so ``GetVideosResp()`` is the empty / zero-value response.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple


def _as_mapping(value: Any, what: str) -> Mapping[str, Any]:
    """Return *value* as a mapping; ``None`` counts as an empty object."""
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TypeError(f"expected a JSON object for {what}, got {type(value).__name__}")
    return value


def _get(data: Mapping[str, Any], key: str, default: Any) -> Any:
    """
    Read *key*, requiring the JSON type implied by *default*.

    ``''`` expects a string, ``False`` a boolean, ``0`` an integer and ``0.0``
    any number (stored as float). Booleans never count as numbers.

    Raises:
        TypeError: the value has a different JSON type
    """
    value = data.get(key)
    if value is None:
        return default

    if isinstance(default, bool):
        valid = isinstance(value, bool)
    elif isinstance(default, float):
        valid = isinstance(value, (int, float)) and not isinstance(value, bool)
    elif isinstance(default, int):
        valid = isinstance(value, int) and not isinstance(value, bool)
    else:
        valid = isinstance(value, type(default))

    if not valid:
        raise TypeError(
            f"expected {type(default).__name__} for {key!r}, got {type(value).__name__}: {value!r}"
        )
    return float(value) if isinstance(default, float) else value


def _items(data: Mapping[str, Any], key: str, what: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"expected a JSON array for {what}, got {type(value).__name__}")
    return value


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Category:
    """A video category (channel). ``chid`` maps to the JSON key ``CHID``."""
    chid: str = ''
    name: str = ''
    slug: str = ''
    total_videos: int = 0
    category_url: str = ''
    cover_url: str = ''

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Category:
        data = _as_mapping(data, 'category')
        return cls(
            chid=_get(data, 'CHID', ''),
            name=_get(data, 'name', ''),
            slug=_get(data, 'slug', ''),
            total_videos=_get(data, 'total_videos', 0),
            category_url=_get(data, 'category_url', ''),
            cover_url=_get(data, 'cover_url', ''),
        )

    def to_dict(self) -> dict:
        return {
            'CHID': self.chid,
            'name': self.name,
            'slug': self.slug,
            'total_videos': self.total_videos,
            'category_url': self.category_url,
            'cover_url': self.cover_url,
        }


@dataclass(frozen=True)
class Collection:
    """A curated collection of videos grouped under a keyword."""
    id: str = ''
    title: str = ''
    keyword: str = ''
    cover_url: str = ''
    total_views: int = 0
    video_count: int = 0
    collection_url: str = ''

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Collection:
        data = _as_mapping(data, 'collection')
        return cls(
            id=_get(data, 'id', ''),
            title=_get(data, 'title', ''),
            keyword=_get(data, 'keyword', ''),
            cover_url=_get(data, 'cover_url', ''),
            total_views=_get(data, 'total_views', 0),
            video_count=_get(data, 'video_count', 0),
            collection_url=_get(data, 'collection_url', ''),
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'keyword': self.keyword,
            'cover_url': self.cover_url,
            'total_views': self.total_views,
            'video_count': self.video_count,
            'collection_url': self.collection_url,
        }


@dataclass(frozen=True)
class Video:
    """A single video as listed by the catalog.

    Attributes:
        vid: The upstream video identifier (VID).
        uid: Identifier of the uploading user.
        duration: Length in seconds.
        addtime: Unix timestamp of when the video was added.
        viewnumber: View count.
        embedded_url: URL of the embeddable player page.
    """
    vid: str = ''
    uid: str = ''
    title: str = ''
    keyword: str = ''
    channel: str = ''
    duration: float = 0.0
    framerate: float = 0.0
    hd: bool = False
    addtime: int = 0
    viewnumber: int = 0
    likes: int = 0
    dislikes: int = 0
    video_url: str = ''
    embedded_url: str = ''
    preview_url: str = ''

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Video:
        data = _as_mapping(data, 'video')
        return cls(
            vid=_get(data, 'vid', ''),
            uid=_get(data, 'uid', ''),
            title=_get(data, 'title', ''),
            keyword=_get(data, 'keyword', ''),
            channel=_get(data, 'channel', ''),
            duration=_get(data, 'duration', 0.0),
            framerate=_get(data, 'framerate', 0.0),
            hd=_get(data, 'hd', False),
            addtime=_get(data, 'addtime', 0),
            viewnumber=_get(data, 'viewnumber', 0),
            likes=_get(data, 'likes', 0),
            dislikes=_get(data, 'dislikes', 0),
            video_url=_get(data, 'video_url', ''),
            embedded_url=_get(data, 'embedded_url', ''),
            preview_url=_get(data, 'preview_url', ''),
        )

    def to_dict(self) -> dict:
        return {
            'vid': self.vid,
            'uid': self.uid,
            'title': self.title,
            'keyword': self.keyword,
            'channel': self.channel,
            'duration': self.duration,
            'framerate': self.framerate,
            'hd': self.hd,
            'addtime': self.addtime,
            'viewnumber': self.viewnumber,
            'likes': self.likes,
            'dislikes': self.dislikes,
            'video_url': self.video_url,
            'embedded_url': self.embedded_url,
            'preview_url': self.preview_url,
        }


# ---------------------------------------------------------------------------
# Response payloads (the object under the envelope's "response" key)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CategoriesPayload:
    categories: Tuple[Category, ...] = ()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> CategoriesPayload:
        data = _as_mapping(data, 'response')
        return cls(
            categories=tuple(Category.from_dict(c) for c in _items(data, 'categories', 'categories')),
        )

    def to_dict(self) -> dict:
        return {'categories': [c.to_dict() for c in self.categories]}


@dataclass(frozen=True)
class CollectionsPayload:
    """One page of collections plus pagination metadata."""
    has_more: bool = False
    total_collections: int = 0
    current_offset: int = 0
    limit: int = 0
    collections: Tuple[Collection, ...] = ()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> CollectionsPayload:
        data = _as_mapping(data, 'response')
        return cls(
            has_more=_get(data, 'has_more', False),
            total_collections=_get(data, 'total_collections', 0),
            current_offset=_get(data, 'current_offset', 0),
            limit=_get(data, 'limit', 0),
            collections=tuple(Collection.from_dict(c) for c in _items(data, 'collections', 'collections')),
        )

    def to_dict(self) -> dict:
        return {
            'has_more': self.has_more,
            'total_collections': self.total_collections,
            'current_offset': self.current_offset,
            'limit': self.limit,
            'collections': [c.to_dict() for c in self.collections],
        }


@dataclass(frozen=True)
class VideosPayload:
    """One page of videos plus pagination metadata."""
    has_more: bool = False
    total_videos: int = 0
    current_offset: int = 0
    limit: int = 0
    videos: Tuple[Video, ...] = ()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> VideosPayload:
        data = _as_mapping(data, 'response')
        return cls(
            has_more=_get(data, 'has_more', False),
            total_videos=_get(data, 'total_videos', 0),
            current_offset=_get(data, 'current_offset', 0),
            limit=_get(data, 'limit', 0),
            videos=tuple(Video.from_dict(v) for v in _items(data, 'videos', 'videos')),
        )

    def to_dict(self) -> dict:
        return {
            'has_more': self.has_more,
            'total_videos': self.total_videos,
            'current_offset': self.current_offset,
            'limit': self.limit,
            'videos': [v.to_dict() for v in self.videos],
        }


@dataclass(frozen=True)
class VideoPayload:
    video: Video = Video()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> VideoPayload:
        data = _as_mapping(data, 'response')
        return cls(video=Video.from_dict(data.get('video')))

    def to_dict(self) -> dict:
        return {'video': self.video.to_dict()}


# ---------------------------------------------------------------------------
# Envelopes: {"success": bool, "response": {...}}
#
# ``success`` mirrors the upstream outcome. Only the single-video lookup turns
# ``success: false`` into an error; for the list endpoints the caller has to
# check it.
# ---------------------------------------------------------------------------

class _Envelope:
    """Shared (de)serialisation for the response envelopes."""

    _payload_type: Any = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]):
        data = _as_mapping(data, 'envelope')
        return cls(
            success=_get(data, 'success', False),
            response=cls._payload_type.from_dict(data.get('response')),
        )

    def to_dict(self) -> dict:
        return {'success': self.success, 'response': self.response.to_dict()}

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)


@dataclass(frozen=True)
class GetCategoriesResp(_Envelope):
    success: bool = False
    response: CategoriesPayload = CategoriesPayload()

    _payload_type = CategoriesPayload


@dataclass(frozen=True)
class GetCollectionsResp(_Envelope):
    success: bool = False
    response: CollectionsPayload = CollectionsPayload()

    _payload_type = CollectionsPayload


@dataclass(frozen=True)
class GetVideosResp(_Envelope):
    success: bool = False
    response: VideosPayload = VideosPayload()

    _payload_type = VideosPayload


@dataclass(frozen=True)
class GetVideoByVIDResp(_Envelope):
    success: bool = False
    response: VideoPayload = VideoPayload()

    _payload_type = VideoPayload


# Search results share the video-list shape.
SearchVideosResp = GetVideosResp
SearchJAVsResp = GetVideosResp
