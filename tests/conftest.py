"""
Pytest configuration and fixtures for the Avgle client tests.
"""
import io
import json
import os
import sys
from urllib.parse import urlsplit

# Add project root to path for imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

import logging
import shutil
import tempfile

import pytest
import requests
from unittest.mock import MagicMock


def make_response(body, status_code=200, url='https://api.avgle.com/v1/'):
    """
    Build a canned ``requests.Response`` whose body is *body*.

    ``close`` is wrapped in a MagicMock so tests can assert it was called.
    """
    if not isinstance(body, (str, bytes)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode('utf-8')
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = 'utf-8'
    response.raw = io.BytesIO(body)
    response.close = MagicMock(wraps=response.close)
    return response


class FakeTransport:
    """
    Transport double that serves canned bodies keyed by URL path.

    Every request is recorded in ``calls`` as ``(request, send_kwargs)``.
    """

    DEFAULT_BODY = {'success': True, 'response': {}}

    def __init__(self, routes=None, status_code=200, error=None):
        self.routes = routes or {}
        self.status_code = status_code
        self.error = error
        self.calls = []
        self.responses = []

    def send(self, request, **kwargs):
        self.calls.append((request, kwargs))
        if self.error is not None:
            raise self.error
        path = urlsplit(request.url).path
        body = self.routes.get(path, self.DEFAULT_BODY)
        response = make_response(body, status_code=self.status_code, url=request.url)
        self.responses.append(response)
        return response

    @property
    def call_count(self):
        return len(self.calls)

    @property
    def last_url(self):
        return self.calls[-1][0].url


@pytest.fixture
def fake_transport():
    """A FakeTransport with no routes; every path gets ``{"success": true}``."""
    return FakeTransport()


@pytest.fixture
def make_transport():
    """Factory fixture: ``make_transport(routes, status_code=200, error=None)``."""
    return FakeTransport


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield temp_path
    # Cleanup after test
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Restore the root logger after tests that call setup_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def sample_category_dict():
    return {
        'CHID': '1',
        'name': 'X',
        'slug': 'x',
        'total_videos': 5,
        'category_url': 'u',
        'cover_url': 'c',
    }


@pytest.fixture
def sample_video_dict():
    return {
        'vid': '374462',
        'uid': '6283',
        'title': 'Sample Video',
        'keyword': 'SSNI-388 sample',
        'channel': '6',
        'duration': 7243.45,
        'framerate': 29.97,
        'hd': True,
        'addtime': 1549412567,
        'viewnumber': 183012,
        'likes': 412,
        'dislikes': 37,
        'video_url': 'https://avgle.com/video/374462/sample',
        'embedded_url': 'https://avgle.com/embed/a1b2c3d4e5',
        'preview_url': 'https://static.avgle.com/media/videos/tmb/374462/default.jpg',
    }


@pytest.fixture
def sample_collection_dict():
    return {
        'id': '12',
        'title': 'Best of 2019',
        'keyword': 'best-2019',
        'cover_url': 'https://static.avgle.com/collections/12.jpg',
        'total_views': 99871,
        'video_count': 48,
        'collection_url': 'https://avgle.com/search/videos?search_query=best-2019',
    }


@pytest.fixture
def sample_videos_envelope(sample_video_dict):
    return {
        'success': True,
        'response': {
            'has_more': True,
            'total_videos': 250,
            'current_offset': 0,
            'limit': 50,
            'videos': [sample_video_dict],
        },
    }
