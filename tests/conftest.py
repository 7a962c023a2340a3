"""Pytest fixtures and configuration for client tests."""

from __future__ import annotations

import os

# Set environment variables BEFORE any imports that might load settings
# This is necessary because settings are cached on first use
os.environ.setdefault("APP_MODE", "development")
os.environ.setdefault("LOG_LEVEL", "silent")
os.environ.setdefault("TWITTER154_APIKEY", "test-api-key")

import json
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from twitter154 import ClientConfig, ClientOptions
from twitter154.logging import configure_logging
from twitter154.settings import get_settings

configure_logging()

Handler = Callable[[httpx.Request], httpx.Response]


@dataclass
class FakeApi:
    """Serves canned JSON responses in order and records every request."""

    responses: list[httpx.Response]
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            msg = f"unexpected request: {request.url}"
            raise AssertionError(msg)
        return self.responses.pop(0)

    @property
    def urls(self) -> list[str]:
        return [str(r.url) for r in self.requests]


def json_response(payload: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode())


def page(items: list[Any], token: str = "", key: str = "results") -> httpx.Response:
    return json_response({key: items, "continuation_token": token})


@pytest.fixture
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Re-read settings from the (monkeypatched) environment."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def make_config() -> Iterator[Callable[[Handler], ClientConfig]]:
    """Build a ClientConfig whose HTTP client is served by `handler`."""
    clients: list[httpx.Client] = []

    def _make(handler: Handler, **options: Any) -> ClientConfig:
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(http_client)
        return ClientOptions(http_client=http_client, **options).build("test-api-key")

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def sample_user() -> dict[str, Any]:
    """Raw user payload as returned by the API."""
    return {
        "creation_date": "Tue Jun 02 20:12:29 +0000 2009",
        "user_id": "44196397",
        "username": "elonmusk",
        "name": "Elon Musk",
        "follower_count": 1000,
        "following_count": 500,
        "favourites_count": 2000,
        "is_private": None,
        "is_verified": False,
        "is_blue_verified": True,
        "location": "",
        "profile_pic_url": "https://pbs.twimg.com/profile_images/1.jpg",
        "profile_banner_url": None,
        "description": "A test bio",
        "external_url": None,
        "number_of_tweets": 5000,
        "bot": False,
        "timestamp": 1243973549,
        "has_nft_avatar": False,
        "category": {"name": "Science & Technology", "id": 713},
        "default_profile": False,
        "default_profile_image": False,
        "listed_count": 12,
    }


@pytest.fixture
def sample_tweet(sample_user: dict[str, Any]) -> dict[str, Any]:
    """Raw tweet payload as returned by the API."""
    return {
        "tweet_id": "1668684903036608512",
        "creation_date": "Tue Jun 13 18:45:33 +0000 2023",
        "text": "hello world",
        "media_url": None,
        "video_url": None,
        "user": sample_user,
        "language": "en",
        "favorite_count": 10,
        "retweet_count": 2,
        "reply_count": 1,
        "quote_count": 0,
        "retweet": False,
        "views": 1234,
        "timestamp": 1686681933,
        "video_view_count": None,
        "in_reply_to_status_id": None,
        "quoted_status_id": None,
        "binding_values": None,
        "expanded_url": None,
        "retweet_tweet_id": None,
        "extended_entities": None,
        "conversation_id": "1668684903036608512",
        "retweet_status": None,
    }


def make_tweet(sample_tweet: dict[str, Any], tweet_id: str) -> dict[str, Any]:
    return {**sample_tweet, "tweet_id": tweet_id}


def make_user(sample_user: dict[str, Any], user_id: str) -> dict[str, Any]:
    return {**sample_user, "user_id": user_id, "username": f"user{user_id}"}


@pytest.fixture
def sparse_user() -> dict[str, Any]:
    """User payload with the nulls the live API sends for unset fields."""
    return {
        "creation_date": "Mon Jan 13 18:44:09 +0000 2014",
        "user_id": "2290075459",
        "username": "previewuser",
        "name": "Userbet preview",
        "follower_count": 44,
        "following_count": 53,
        "favourites_count": 0,
        "is_private": None,
        "is_verified": False,
        "is_blue_verified": False,
        "location": "Germany",
        "profile_pic_url": "https://pbs.twimg.com/profile_images/1553007348213600256/K3DnFMLD_normal.jpg",
        "profile_banner_url": None,
        "description": "",
        "external_url": None,
        "number_of_tweets": 65958,
        "bot": False,
        "timestamp": 1389638649,
        "has_nft_avatar": False,
        "category": None,
        "default_profile": None,
        "default_profile_image": None,
    }
