"""twitter154 API record types.

Every field has a default, used when the key is missing or null: an empty
value for plain fields, None where the absence itself is informative.
Unknown fields are ignored.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from twitter154.base import ApiModel


class UserCategory(ApiModel):
    """Professional category of a profile."""

    name: str = ""
    id: int = 0


class User(ApiModel):
    """Public information about a Twitter profile."""

    user_id: str = ""
    username: str = ""
    name: str | None = None
    creation_date: str | None = None
    follower_count: int = 0
    following_count: int = 0
    favourites_count: int = 0
    is_private: bool | None = None
    is_verified: bool = False
    is_blue_verified: bool = False
    location: str | None = None
    profile_pic_url: str | None = None
    profile_banner_url: str | None = None
    description: str | None = None
    external_url: str | None = None
    number_of_tweets: int = 0
    bot: bool = False
    timestamp: int | None = None
    has_nft_avatar: bool = False
    category: UserCategory | None = None
    default_profile: bool = False
    default_profile_image: bool = False


class VideoUrl(ApiModel):
    """One encoding of a tweet's video."""

    bitrate: int | None = None
    content_type: str = ""
    url: str = ""


class MediaSize(ApiModel):
    h: int = 0
    w: int = 0
    resize: str = ""


class MediaSizes(ApiModel):
    large: MediaSize | None = None
    medium: MediaSize | None = None
    small: MediaSize | None = None
    thumb: MediaSize | None = None


class OriginalInfo(ApiModel):
    height: int = 0
    width: int = 0


class VideoVariant(ApiModel):
    bitrate: int | None = None
    content_type: str = ""
    url: str = ""


class VideoInfo(ApiModel):
    aspect_ratio: list[int] = Field(default_factory=list)
    duration_millis: int | None = None
    variants: list[VideoVariant] = Field(default_factory=list)


class Media(ApiModel):
    """A media entity attached to a tweet."""

    id_str: str = ""
    type: str = ""
    url: str | None = None
    display_url: str | None = None
    expanded_url: str | None = None
    media_key: str | None = None
    media_url_https: str | None = None
    indices: list[int] = Field(default_factory=list)
    monetizable: bool | None = None
    view_count: int | None = None
    availability: str | None = None
    sizes: MediaSizes | None = None
    original_info: OriginalInfo | None = None
    video_info: VideoInfo | None = None

    @model_validator(mode="before")
    @classmethod
    def _flatten_wrappers(cls, data: Any) -> Any:
        """Lift the single-field objects the API wraps a few values in."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        if isinstance(info := data.pop("additional_media_info", None), dict):
            data.setdefault("monetizable", info.get("monetizable"))
        if isinstance(stats := data.pop("mediaStats", None), dict):
            data.setdefault("view_count", stats.get("viewCount"))
        if isinstance(availability := data.pop("ext_media_availability", None), dict):
            data.setdefault("availability", availability.get("status"))
        return data


class ExtendedEntities(ApiModel):
    media: list[Media] = Field(default_factory=list)


class BindingValue(ApiModel):
    """Card binding value; `value` is left as raw JSON."""

    key: str = ""
    value: Any = None


class Tweet(ApiModel):
    """General information about a tweet."""

    tweet_id: str = ""
    creation_date: str | None = None
    text: str = ""
    media_url: list[str] | None = None
    video_url: list[VideoUrl] | None = None
    user: User | None = None
    language: str | None = None
    favorite_count: int = 0
    retweet_count: int = 0
    reply_count: int = 0
    quote_count: int = 0
    retweet: bool = False
    views: int | None = None
    timestamp: int | None = None
    video_view_count: int | None = None
    in_reply_to_status_id: Any = None
    quoted_status_id: Any = None
    binding_values: list[BindingValue] | None = None
    expanded_url: str | None = None
    retweet_tweet_id: Any = None
    extended_entities: ExtendedEntities | None = None
    conversation_id: str | None = None
    retweet_status: Any = None
