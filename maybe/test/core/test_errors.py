"""Tests for maybe.core.errors module."""

from maybe.core.errors import ErrorCode


class TestErrorCodeValues:
    def test_values_are_stable(self) -> None:
        assert ErrorCode.OK == 0
        assert ErrorCode.USER_ERROR == 1
        assert ErrorCode.IO_ERROR == 2
        assert ErrorCode.ABSENT == 3


class TestErrorCodeUsage:
    def test_str(self) -> None:
        assert str(ErrorCode.USER_ERROR) == "user error"
        assert str(ErrorCode.ABSENT) == "absent"

    def test_is_success(self) -> None:
        assert ErrorCode.OK.is_success
        assert not ErrorCode.ABSENT.is_success

    def test_usable_as_int(self) -> None:
        code: int = ErrorCode.IO_ERROR
        assert int(code) == 2
