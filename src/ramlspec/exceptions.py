"""Exception hierarchy for ramlspec.

All exceptions inherit from :class:`RamlSpecError`. Document-level failures
raised while loading or extracting a RAML document derive from
:class:`RamlParseError`; the scalar validators raise their own narrower
families (:class:`UriParseError`, :class:`ProtocolParseError`) which the
extractor wraps, keeping the original error on ``__cause__``.

Subclass hierarchy::

    RamlSpecError
    +-- RamlParseError
    |   +-- SourceReadError
    |   +-- IncorrectYamlSyntaxError
    |   +-- FileIsEmptyError
    |   +-- FieldNotFoundError
    |   +-- IncorrectUriError
    |   +-- IncorrectProtocolError
    +-- UriParseError
    |   +-- InvalidUriSyntaxError
    +-- ProtocolParseError
        +-- UnsupportedProtocolError
        +-- InvalidYamlValueError

None of these derive from :class:`ValueError`, so raising one inside a
pydantic validator propagates it unchanged instead of folding it into a
``ValidationError``.
"""

from __future__ import annotations


class RamlSpecError(Exception):
    """Base exception for all ramlspec errors.

    Args:
        message: Human-readable error description.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# --- Document-level errors ---


class RamlParseError(RamlSpecError):
    """Raised when a RAML document cannot be read, decoded, or extracted."""


class SourceReadError(RamlParseError):
    """Raised when the document source (file, URL, stdin, reader) cannot be read."""


class IncorrectYamlSyntaxError(RamlParseError):
    """Raised when the document text is not well-formed YAML."""

    def __init__(self, detail: str):
        super().__init__(f"Incorrect yaml syntax: {detail}.")
        self.detail = detail


class FileIsEmptyError(RamlParseError):
    """Raised when the document text decodes to zero YAML documents."""

    def __init__(self) -> None:
        super().__init__("File is empty.")


class FieldNotFoundError(RamlParseError):
    """Raised when a required field is absent or not a string."""

    def __init__(self, field: str):
        super().__init__(f"Field not found: {field}.")
        self.field = field


class IncorrectUriError(RamlParseError):
    """Raised when ``baseUri`` fails URI syntax validation."""

    def __init__(self, cause: UriParseError):
        super().__init__(f"Incorrect URI: {cause}")


class IncorrectProtocolError(RamlParseError):
    """Raised when an entry of ``protocols`` is not a supported protocol."""

    def __init__(self, cause: ProtocolParseError):
        super().__init__(f"Failed to parse protocol: {cause}")
        self.protocol = getattr(cause, "protocol", None)


# --- URI errors ---


class UriParseError(RamlSpecError):
    """Base class for URI validation failures."""


class InvalidUriSyntaxError(UriParseError):
    """Raised when text is not a syntactically valid URI."""

    def __init__(self, detail: str):
        super().__init__(f"Invalid syntax: {detail}")
        self.detail = detail


# --- Protocol errors ---


class ProtocolParseError(RamlSpecError):
    """Base class for protocol conversion failures."""


class UnsupportedProtocolError(ProtocolParseError):
    """Raised for a string protocol name outside the supported set."""

    def __init__(self, protocol: str):
        super().__init__(f"Unsupported protocol: {protocol}")
        self.protocol = protocol


class InvalidYamlValueError(ProtocolParseError):
    """Raised when a protocol entry is not a YAML string at all."""

    def __init__(self) -> None:
        super().__init__("Expected YAML string.")
