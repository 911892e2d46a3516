# SPDX-License-Identifier: Apache-2.0
"""Tests for JSON decoding and the error hierarchy."""

import pytest

from deeply.errors import (
    AuthenticationError,
    CallError,
    DecodeError,
    DeeplyError,
    FileReadError,
    InvalidArgumentError,
    MalformedResultError,
    QuotaExceededError,
    RateLimitedError,
    TextLengthError,
    map_call_error,
)
from deeply.protocol import JsonProtocol


class TestJsonProtocol:
    """Test JsonProtocol."""

    def test_decodes_object(self) -> None:
        """Valid JSON should be decoded into dicts and lists."""
        data = JsonProtocol().process_response_data(
            '{"translations": [{"text": "Hallo"}]}'
        )
        assert data == {"translations": [{"text": "Hallo"}]}

    def test_decodes_bytes(self) -> None:
        """Bytes bodies should be accepted."""
        data = JsonProtocol().process_response_data(b'[{"language": "DE"}]')
        assert data == [{"language": "DE"}]

    @pytest.mark.parametrize("raw", ["", "<html>Bad Gateway</html>", "{", b"\xff\xfe"])
    def test_invalid_json(self, raw: str | bytes) -> None:
        """Malformed bodies should raise DecodeError."""
        with pytest.raises(DecodeError):
            JsonProtocol().process_response_data(raw)

    def test_decode_error_is_not_malformed_result(self) -> None:
        """Decode and validation failures should be distinct kinds."""
        assert not issubclass(DecodeError, MalformedResultError)
        assert not issubclass(MalformedResultError, DecodeError)


class TestExceptions:
    """Test exception hierarchy."""

    @pytest.mark.parametrize(
        "error_class",
        [
            InvalidArgumentError,
            TextLengthError,
            CallError,
            MalformedResultError,
            DecodeError,
            FileReadError,
        ],
    )
    def test_inherits_from_deeply_error(self, error_class: type) -> None:
        """All errors should inherit from DeeplyError."""
        assert issubclass(error_class, DeeplyError)

    @pytest.mark.parametrize(
        "error_class", [AuthenticationError, RateLimitedError, QuotaExceededError]
    )
    def test_mapped_errors_are_call_errors(self, error_class: type) -> None:
        """Status-specific errors should be CallErrors."""
        assert issubclass(error_class, CallError)

    def test_builtin_bases(self) -> None:
        """Errors should also match the matching builtin exceptions."""
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(FileReadError, OSError)

    def test_text_length_error_message(self) -> None:
        """TextLengthError should report both lengths."""
        error = TextLengthError(30001, 30000)
        assert error.length == 30001
        assert error.max_length == 30000
        assert "30000" in str(error)

    def test_call_error_default_status(self) -> None:
        """CallError without a response should have status 0."""
        assert CallError("connection refused").status_code == 0


class TestMapCallError:
    """Test status code mapping."""

    @pytest.mark.parametrize(
        ("status", "error_class"),
        [
            (403, AuthenticationError),
            (429, RateLimitedError),
            (456, QuotaExceededError),
        ],
    )
    def test_known_status(self, status: int, error_class: type) -> None:
        """Known statuses should map to their error type, keeping the status."""
        original = CallError("HTTP error", status)
        mapped = map_call_error(original)
        assert type(mapped) is error_class
        assert mapped.status_code == status
        assert mapped.__cause__ is original

    @pytest.mark.parametrize("status", [0, 400, 500, 503])
    def test_unknown_status_unchanged(self, status: int) -> None:
        """Other statuses should return the original error."""
        original = CallError("HTTP error", status)
        assert map_call_error(original) is original
