"""Client for the twitter154 RapidAPI service.

Turns the API's profile, tweet, follower, favoriter and reply endpoints into
typed results, walking paginated result sets transparently.
"""

from twitter154.client import TwitterClient
from twitter154.config import ClientConfig, ClientOptions
from twitter154.decode import Page, PageResponse, SingleResponse
from twitter154.errors import ErrorCode, Twitter154Error
from twitter154.ratelimit import Limiter, RateLimiter, UnlimitedLimiter
from twitter154.request import Param
from twitter154.types import (
    BindingValue,
    ExtendedEntities,
    Media,
    Tweet,
    User,
    UserCategory,
    VideoUrl,
)

__all__ = [
    "BindingValue",
    "ClientConfig",
    "ClientOptions",
    "ErrorCode",
    "ExtendedEntities",
    "Limiter",
    "Media",
    "Page",
    "PageResponse",
    "Param",
    "RateLimiter",
    "SingleResponse",
    "Tweet",
    "Twitter154Error",
    "TwitterClient",
    "UnlimitedLimiter",
    "User",
    "UserCategory",
    "VideoUrl",
]
