"""Tests for ramlspec.exceptions."""

from __future__ import annotations

import pytest

from ramlspec.exceptions import (
    FieldNotFoundError,
    FileIsEmptyError,
    IncorrectProtocolError,
    IncorrectUriError,
    IncorrectYamlSyntaxError,
    InvalidUriSyntaxError,
    InvalidYamlValueError,
    ProtocolParseError,
    RamlParseError,
    RamlSpecError,
    SourceReadError,
    UnsupportedProtocolError,
    UriParseError,
)


class TestHierarchy:
    """Test the exception class hierarchy."""

    @pytest.mark.parametrize(
        "cls",
        [
            SourceReadError,
            IncorrectYamlSyntaxError,
            FileIsEmptyError,
            FieldNotFoundError,
            IncorrectUriError,
            IncorrectProtocolError,
        ],
    )
    def test_document_errors(self, cls: type) -> None:
        assert issubclass(cls, RamlParseError)
        assert issubclass(cls, RamlSpecError)

    def test_validator_errors_are_not_document_errors(self) -> None:
        assert not issubclass(UriParseError, RamlParseError)
        assert not issubclass(ProtocolParseError, RamlParseError)
        assert issubclass(InvalidUriSyntaxError, UriParseError)
        assert issubclass(UnsupportedProtocolError, ProtocolParseError)
        assert issubclass(InvalidYamlValueError, ProtocolParseError)

    def test_nothing_is_a_value_error(self) -> None:
        assert not issubclass(RamlSpecError, ValueError)


class TestMessages:
    """Test user-facing messages."""

    def test_field_not_found(self) -> None:
        assert str(FieldNotFoundError("title")) == "Field not found: title."

    def test_yaml_syntax(self) -> None:
        assert str(IncorrectYamlSyntaxError("boom")) == "Incorrect yaml syntax: boom."

    def test_file_is_empty(self) -> None:
        assert str(FileIsEmptyError()) == "File is empty."

    def test_incorrect_uri(self) -> None:
        cause = InvalidUriSyntaxError("relative URL without a base")
        assert str(IncorrectUriError(cause)) == (
            "Incorrect URI: Invalid syntax: relative URL without a base"
        )

    def test_incorrect_protocol(self) -> None:
        error = IncorrectProtocolError(UnsupportedProtocolError("FTP"))
        assert str(error) == "Failed to parse protocol: Unsupported protocol: FTP"
        assert error.protocol == "FTP"

    def test_incorrect_protocol_shape(self) -> None:
        error = IncorrectProtocolError(InvalidYamlValueError())
        assert str(error) == "Failed to parse protocol: Expected YAML string."
        assert error.protocol is None

    def test_message_attribute(self) -> None:
        assert SourceReadError("gone").message == "gone"
