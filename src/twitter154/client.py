"""twitter154 API client using RapidAPI."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import Field, RootModel

from twitter154.base import ApiModel
from twitter154.config import ClientConfig, ClientOptions
from twitter154.decode import PageResponse, SingleResponse
from twitter154.engine import get_result, get_result_paginated
from twitter154.errors import Twitter154Error
from twitter154.logging import configure_logging, get_logger
from twitter154.request import Param
from twitter154.settings import load_settings
from twitter154.types import Tweet, User

log = get_logger("twitter154.client")

T = TypeVar("T")

PAGE_LIMIT = 100


class UsernameResponse(ApiModel, SingleResponse[str]):
    user_id: str = ""
    username: str = ""

    def result(self) -> str:
        return self.username


class UserResponse(RootModel[User], SingleResponse[User]):
    """The whole payload is the user record."""

    def result(self) -> User:
        return self.root


class TweetResponse(RootModel[Tweet], SingleResponse[Tweet]):
    """The whole payload is the tweet record."""

    def result(self) -> Tweet:
        return self.root


class _Paginated(ApiModel):
    continuation_token: str | None = None

    def token(self) -> str:
        return self.continuation_token or ""


class TweetsPage(_Paginated, PageResponse[Tweet]):
    tweets: list[Tweet] = Field(default_factory=list, alias="results")

    def results(self) -> list[Tweet]:
        return self.tweets


class UsersPage(_Paginated, PageResponse[User]):
    users: list[User] = Field(default_factory=list, alias="results")

    def results(self) -> list[User]:
        return self.users


class RepliesPage(_Paginated, PageResponse[Tweet]):
    replies: list[Tweet] = Field(default_factory=list)

    def results(self) -> list[Tweet]:
        return self.replies


class FavoritersPage(_Paginated, PageResponse[User]):
    favoriters: list[User] = Field(default_factory=list)

    def results(self) -> list[User]:
        return self.favoriters


class TwitterClient:
    """twitter154 API client via RapidAPI."""

    def __init__(self, api_key: str | None = None, options: ClientOptions | None = None) -> None:
        """Initialize twitter154 client.

        Args:
            api_key: RapidAPI key. If not provided, reads from settings.
            options: Host, rate limiter and HTTP client overrides. If not
                provided, built from settings.

        Raises:
            Twitter154Error: If the API key is not available, an option is
                invalid or the environment is malformed.
        """
        if api_key is None or options is None:
            settings = load_settings()
            configure_logging(settings)

            if api_key is None:
                if settings.twitter154_apikey is None:
                    raise Twitter154Error.api_key_missing()
                api_key = settings.twitter154_apikey.get_secret_value()

            if options is None:
                options = ClientOptions.from_settings(settings)

        self._config: ClientConfig = options.build(api_key)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _single(
        self,
        endpoint: str,
        path: list[str],
        params: list[Param],
        shape: type[SingleResponse[T]],
    ) -> T:
        log.info("fetching", endpoint=endpoint, params={p.key: p.value for p in params})
        try:
            return get_result(self._config, path, params, shape)
        except Twitter154Error as e:
            raise e.with_context(endpoint) from e

    def _paginated(
        self,
        endpoint: str,
        path: list[str],
        params: list[Param],
        shape: type[PageResponse[T]],
    ) -> list[T]:
        log.info("fetching_all", endpoint=endpoint, params={p.key: p.value for p in params})
        try:
            return get_result_paginated(self._config, path, params, shape)
        except Twitter154Error as e:
            raise e.with_context(endpoint) from e

    def get_username(self, user_id: str) -> str:
        """Return a user's username given a user ID."""
        return self._single(
            "get_username",
            ["user", "username"],
            [Param("user_id", user_id)],
            UsernameResponse,
        )

    def get_user(self, user_id: str) -> User:
        """Return the public information about a Twitter profile."""
        return self._single(
            "get_user",
            ["user", "details"],
            [Param("user_id", user_id)],
            UserResponse,
        )

    def get_user_by_username(self, username: str) -> User:
        """Return the public information about a Twitter profile.

        Args:
            username: Twitter handle (without @).
        """
        return self._single(
            "get_user_by_username",
            ["user", "details"],
            [Param("username", username)],
            UserResponse,
        )

    def get_user_tweets(
        self,
        user_id: str,
        *,
        include_replies: bool = False,
        include_pinned: bool = False,
    ) -> list[Tweet]:
        """Return every tweet of a user, walking all pages.

        Args:
            user_id: Numeric user ID.
            include_replies: Also return the user's replies.
            include_pinned: Also return the pinned tweet.

        Returns:
            Tweets in the order the API returns them.

        Raises:
            Twitter154Error: On any failure while walking the pages.
        """
        params = [
            Param("user_id", user_id),
            Param("limit", PAGE_LIMIT),
            Param("include_replies", include_replies),
            Param("include_pinned", include_pinned),
        ]
        return self._paginated("get_user_tweets", ["user", "tweets"], params, TweetsPage)

    def get_user_following(self, user_id: str) -> list[User]:
        """Return every profile a user follows."""
        params = [Param("user_id", user_id), Param("limit", PAGE_LIMIT)]
        return self._paginated("get_user_following", ["user", "following"], params, UsersPage)

    def get_user_followers(self, user_id: str) -> list[User]:
        """Return every follower of a user."""
        params = [Param("user_id", user_id), Param("limit", PAGE_LIMIT)]
        return self._paginated("get_user_followers", ["user", "followers"], params, UsersPage)

    def get_user_likes(self, user_id: str) -> list[Tweet]:
        """Return a user's liked tweets. Not supported yet."""
        raise Twitter154Error.not_implemented("get_user_likes")

    def get_user_media(self, user_id: str) -> list[Tweet]:
        """Return a user's media tweets. Not supported yet."""
        raise Twitter154Error.not_implemented("get_user_media")

    def get_tweet_details(self, tweet_id: str) -> Tweet:
        """Return general information about a tweet."""
        return self._single(
            "get_tweet_details",
            ["tweet", "details"],
            [Param("tweet_id", tweet_id)],
            TweetResponse,
        )

    def get_tweet_replies(self, tweet_id: str) -> list[Tweet]:
        """Return every reply to a tweet."""
        params = [Param("tweet_id", tweet_id)]
        return self._paginated("get_tweet_replies", ["tweet", "replies"], params, RepliesPage)

    def get_tweet_favoriters(self, tweet_id: str) -> list[User]:
        """Return every user who liked a tweet."""
        params = [Param("tweet_id", tweet_id)]
        return self._paginated("get_tweet_favoriters", ["tweet", "favoriters"], params, FavoritersPage)

    def get_tweet_user_retweets(self, tweet_id: str) -> list[User]:
        """Return every user who retweeted a tweet. Not supported yet."""
        raise Twitter154Error.not_implemented("get_tweet_user_retweets")

    def search(self, query: str) -> list[Tweet]:
        """Return tweets matching a query. Not supported yet."""
        raise Twitter154Error.not_implemented("search")

    def geo_search(
        self,
        query: str,
        *,
        latitude: float | None = None,
        longitude: float | None = None,
        radius: int | None = None,
        language: str | None = None,
    ) -> list[Tweet]:
        """Return tweets matching a query around a location. Not supported yet.

        Args:
            query: Search query.
            latitude: Center latitude.
            longitude: Center longitude.
            radius: Radius around the center.
            language: Restrict results to this language code.
        """
        raise Twitter154Error.not_implemented("geo_search")

    def hashtag(self, hashtag: str) -> list[Tweet]:
        """Return tweets carrying a hashtag. Not supported yet."""
        raise Twitter154Error.not_implemented("hashtag")

    def get_list_details(self, list_id: str) -> Any:
        """Return details of a Twitter list. Not supported yet."""
        raise Twitter154Error.not_implemented("get_list_details")

    def get_list_tweets(self, list_id: str) -> list[Tweet]:
        """Return tweets of a Twitter list. Not supported yet."""
        raise Twitter154Error.not_implemented("get_list_tweets")

    def get_trends(self, woe_id: int) -> list[Any]:
        """Return trends for a Yahoo! Where On Earth ID. Not supported yet."""
        raise Twitter154Error.not_implemented("get_trends")

    def get_locations(self) -> list[Any]:
        """Return locations that have trends. Not supported yet."""
        raise Twitter154Error.not_implemented("get_locations")

    def close(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._config.owns_http_client:
            self._config.http_client.close()

    def __enter__(self) -> TwitterClient:
        """Enter context manager."""
        return self

    def __exit__(self, *args: object) -> None:
        """Exit context manager."""
        self.close()
