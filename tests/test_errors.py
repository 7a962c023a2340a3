"""Tests for the client error taxonomy."""

from __future__ import annotations

import pytest

from twitter154 import ErrorCode, Twitter154Error


class TestTwitter154Error:
    """Tests for Twitter154Error."""

    def test_with_context_keeps_code_and_status(self) -> None:
        """Context is prefixed, kind is unchanged."""
        err = Twitter154Error.bad_status(429)

        wrapped = err.with_context("get").with_context("get_user_followers")

        assert wrapped.code == ErrorCode.BAD_STATUS
        assert wrapped.http_status == 429
        assert wrapped.message == "get_user_followers: get: status code 429"
        assert str(wrapped) == wrapped.message

    def test_not_implemented_is_its_own_code(self) -> None:
        err = Twitter154Error.not_implemented("get_user_likes")

        assert err.is_code(ErrorCode.NOT_IMPLEMENTED)
        assert not err.is_code(ErrorCode.SEND_FAILED)

    @pytest.mark.parametrize(
        ("err", "code"),
        [
            (Twitter154Error.configuration(["invalid host 'x y'"]), ErrorCode.CONFIGURATION),
            (Twitter154Error.api_key_missing(), ErrorCode.API_KEY_MISSING),
            (Twitter154Error.send_failed("dns"), ErrorCode.SEND_FAILED),
            (Twitter154Error.read_failed("reset"), ErrorCode.READ_FAILED),
            (Twitter154Error.decode_failed("bad json"), ErrorCode.DECODE_FAILED),
        ],
    )
    def test_factories(self, err: Twitter154Error, code: ErrorCode) -> None:
        assert err.code == code
        assert err.http_status is None
