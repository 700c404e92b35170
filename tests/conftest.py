# tests/conftest.py
import json
from collections.abc import Callable
from typing import Any

import pytest
from dotenv import load_dotenv

from locloom.config import LocApiSettings, get_settings

# Load environment variables from .env file if it exists
# Useful for pointing the live tests at another host locally
load_dotenv()

BASE_URL = "https://example.org"


class FakeTransport:
    """In-memory Transport returning a canned status/body, or calling
    `handler(url)` to compute one, and recording every call."""

    def __init__(
        self,
        status: int = 200,
        body: bytes = b"{}",
        *,
        error: Exception | None = None,
        handler: Callable[[str], tuple[int, bytes]] | None = None,
    ):
        self.status = status
        self.body = body
        self.error = error
        self.handler = handler
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    def perform(self, method: str, url: str) -> tuple[int, bytes]:
        self.calls.append((method, url))
        if self.error is not None:
            raise self.error
        if self.handler is not None:
            return self.handler(url)
        return self.status, self.body

    def close(self) -> None:
        self.closed = True


def to_body(payload: Any) -> bytes:
    return json.dumps(payload).encode("utf-8")


SEARCH_PAYLOAD: dict[str, Any] = {
    "facets": [
        {
            "type": "subject",
            "filters": [
                {
                    "count": 120,
                    "term": "sports",
                    "title": "Sports",
                    "on": "https://www.loc.gov/search/?fa=subject:sports",
                    "not": "https://www.loc.gov/search/?fa=subject!:sports",
                }
            ],
        }
    ],
    "pagination": {
        "current": 1,
        "first": None,
        "from": 1,
        "to": 25,
        "of": 1234,
        "total": 50,
        "perpage": 25,
        "perpage_options": [25, 50, 100],
        "results": "1 - 25",
        "next": "https://www.loc.gov/search/?q=baseball&sp=2",
        "previous": None,
        "page_list": [{"number": 1, "url": None}, {"number": 2, "url": "https://www.loc.gov/search/?q=baseball&sp=2"}],
    },
    "results": [
        {
            "id": "http://www.loc.gov/item/2014717546/",
            "title": "Baseball game",
            "date": "1910",
            "type": ["photograph"],
            "digitized": True,
            "original_format": ["photo, print, drawing"],
            "item": {"call_number": ["LC-B2- 1234"], "title": "Baseball game", "score": 1.25},
            "campaigns": [],
        }
    ],
    "timestamp": 1700000000,
    "breadcrumbs": [{"Library of Congress": "https://www.loc.gov"}],
}

ITEM_PAYLOAD: dict[str, Any] = {
    "item": {
        "title": "Sanborn Fire Insurance Map from Cleveland",
        "date": "1886",
        "call_number": ["G4084.C6G46 1886 .S3"],
        "subject_headings": ["Cleveland", "Fire insurance maps"],
        "digitized": True,
    },
    "cite_this": {
        "apa": "Sanborn Map Company. (1886) ...",
        "chicago": "Sanborn Map Company. Sanborn Fire Insurance Map ...",
        "mla": "Sanborn Map Company. ...",
    },
    "resources": [
        {
            "caption": "Sheet 1",
            "url": "https://www.loc.gov/resource/g4084cm.g063031886/?sp=1",
            "files": [
                [
                    {"mimetype": "image/jpeg", "url": "https://tile.loc.gov/1.jpg", "width": 150, "height": 200},
                    {"mimetype": "image/jp2", "url": "https://tile.loc.gov/1.jp2", "size": 8040123},
                ]
            ],
        }
    ],
    "more_like_this": [{"id": "http://www.loc.gov/item/other/", "title": "Other"}],
    "timestamp": "1700000000",
}

RESOURCE_PAYLOAD: dict[str, Any] = {
    "resource": {
        "caption": "Sheet 1",
        "image": "https://tile.loc.gov/1.jpg",
        "pdf": "https://tile.loc.gov/1.pdf",
        "download_restricted": False,
        "files": [[{"mimetype": "image/jpeg", "url": "https://tile.loc.gov/1.jpg", "use": "service"}]],
    },
    "page": [{"id": "page-1"}],
    "segments": [],
}

COLLECTIONS_PAYLOAD: dict[str, Any] = {
    "pagination": {"current": 1, "of": 2, "next": None},
    "results": [
        {
            "id": "http://www.loc.gov/collections/civil-war-maps/",
            "title": "Civil War Maps",
            "url": "https://www.loc.gov/collections/civil-war-maps/",
        },
        {"title": "Baseball Cards", "type": "collection"},
    ],
}


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep tests independent of the developer's LOC_API_* environment and
    of the settings cache."""
    for var in (
        "LOC_API_BASE_URL",
        "LOC_API_REQUEST_TIMEOUT",
        "LOC_API_MAX_RETRIES",
        "LOC_API_BACKOFF_FACTOR",
        "LOC_API_USER_AGENT",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> LocApiSettings:
    """Settings with no retry backoff so retry tests run instantly."""
    return LocApiSettings(base_url=BASE_URL, max_retries=2, backoff_factor=0)


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport(body=to_body(SEARCH_PAYLOAD))
