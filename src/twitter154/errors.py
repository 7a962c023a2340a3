"""twitter154 client error types."""

from __future__ import annotations

from enum import StrEnum
from typing import Self


class ErrorCode(StrEnum):
    """Standardized client error codes."""

    CONFIGURATION = "CONFIGURATION"
    API_KEY_MISSING = "API_KEY_MISSING"
    SEND_FAILED = "SEND_FAILED"
    BAD_STATUS = "BAD_STATUS"
    READ_FAILED = "READ_FAILED"
    DECODE_FAILED = "DECODE_FAILED"
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"


class Twitter154Error(Exception):
    """Client error with a standardized error code.

    Every layer that catches one of these re-raises it through
    `with_context`, so the message reads like a call path
    ("get_user_followers: get: bad status 404") while the code stays put.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        *,
        http_status: int | None = None,
    ) -> None:
        """Initialize client error.

        Args:
            code: Standardized error code.
            message: Human-readable error message.
            http_status: HTTP status code, for BAD_STATUS errors.
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.http_status = http_status

    def is_code(self, code: ErrorCode) -> bool:
        """Check if this error matches a specific code."""
        return self.code == code

    def with_context(self, context: str) -> Self:
        """Return a copy of this error with `context` prefixed to the message.

        The caller is expected to raise the copy ``from`` this error.
        """
        return type(self)(
            self.code,
            f"{context}: {self.message}",
            http_status=self.http_status,
        )

    @classmethod
    def configuration(cls, problems: list[str]) -> Self:
        """Create configuration error aggregating every invalid option."""
        return cls(ErrorCode.CONFIGURATION, "bad option: " + "; ".join(problems))

    @classmethod
    def api_key_missing(cls) -> Self:
        """Create API key missing error."""
        return cls(
            ErrorCode.API_KEY_MISSING,
            "TWITTER154_APIKEY environment variable not set",
        )

    @classmethod
    def send_failed(cls, details: str) -> Self:
        """Create transport failure error."""
        return cls(ErrorCode.SEND_FAILED, f"send request: {details}")

    @classmethod
    def bad_status(cls, status_code: int) -> Self:
        """Create non-2xx status error."""
        return cls(
            ErrorCode.BAD_STATUS,
            f"status code {status_code}",
            http_status=status_code,
        )

    @classmethod
    def read_failed(cls, details: str) -> Self:
        """Create body read failure error."""
        return cls(ErrorCode.READ_FAILED, f"read response body: {details}")

    @classmethod
    def decode_failed(cls, details: str) -> Self:
        """Create response decode error."""
        return cls(ErrorCode.DECODE_FAILED, f"unmarshal response: {details}")

    @classmethod
    def not_implemented(cls, endpoint: str) -> Self:
        """Create not implemented error."""
        return cls(ErrorCode.NOT_IMPLEMENTED, f"{endpoint}: not implemented")
