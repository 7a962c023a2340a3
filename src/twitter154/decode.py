"""Response shapes and decoding.

An endpoint binds one of two shapes explicitly at its call site:

- `SingleResponse[T]`: the payload is one logical value, read via `result()`.
- `PageResponse[T]`: the payload is one page of a list plus a continuation
  token, read via `results()` and `token()`.

Shapes are mixins; concrete response types are `ApiModel` subclasses that
also inherit one of them, e.g. ``class UsernameResponse(ApiModel,
SingleResponse[str])``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar, cast

from pydantic import BaseModel, ValidationError

from twitter154.errors import Twitter154Error

T = TypeVar("T")


class SingleResponse(ABC, Generic[T]):
    """Response shape that decodes into one value."""

    @abstractmethod
    def result(self) -> T: ...


class PageResponse(ABC, Generic[T]):
    """Response shape that decodes into one page of values."""

    @abstractmethod
    def results(self) -> list[T]: ...

    @abstractmethod
    def token(self) -> str: ...


@dataclass(frozen=True)
class Page(Generic[T]):
    """Items of one round trip plus the token for the next one."""

    items: list[T]
    token: str


def _validate(data: bytes, shape: type) -> object:
    if not issubclass(shape, BaseModel):
        msg = f"{shape.__name__} is not a pydantic model"
        raise TypeError(msg)

    try:
        return shape.model_validate_json(data)
    except ValidationError as e:
        raise Twitter154Error.decode_failed(f"{shape.__name__}: {e}") from e


def decode_single(data: bytes, shape: type[SingleResponse[T]]) -> T:
    """Decode a payload into the single value carried by `shape`.

    Raises:
        Twitter154Error: DECODE_FAILED on malformed JSON or schema mismatch.
    """
    response = cast(SingleResponse[T], _validate(data, shape))
    return response.result()


def decode_page(data: bytes, shape: type[PageResponse[T]]) -> Page[T]:
    """Decode a payload into a page of items and its continuation token.

    Raises:
        Twitter154Error: DECODE_FAILED on malformed JSON or schema mismatch.
    """
    response = cast(PageResponse[T], _validate(data, shape))
    return Page(items=list(response.results()), token=response.token() or "")
