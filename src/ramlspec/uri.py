"""Validated URI values.

A :class:`Uri` keeps the exact text it was built from and is only ever
constructed from text that matches the RFC 3986 ``URI`` grammar (a scheme
is required). Validation is done with :mod:`rfc3986`; text that would need
percent-encoding to fit the grammar (spaces, ``<>``, backslashes, a stray
``%``) is rejected rather than silently encoded, so the stored spelling is
always the input spelling.

Example::

    uri = Uri.parse("https://api.example.com/v1")
    str(uri)            # 'https://api.example.com/v1'
    uri.parsed.host     # 'api.example.com'
"""

from __future__ import annotations

import rfc3986
from pydantic import BaseModel, ConfigDict, field_validator
from rfc3986 import exceptions as rfc3986_exceptions
from rfc3986 import validators

from ramlspec.exceptions import InvalidUriSyntaxError

_COMPONENTS = ("scheme", "userinfo", "host", "port", "path", "query", "fragment")


def _recompose(reference: rfc3986.URIReference) -> str:
    """Join components back into text, keeping empty authority, query and fragment."""
    text = ""
    if reference.scheme is not None:
        text += reference.scheme + ":"
    if reference.authority is not None:
        text += "//" + reference.authority
    text += reference.path or ""
    if reference.query is not None:
        text += "?" + reference.query
    if reference.fragment is not None:
        text += "#" + reference.fragment
    return text


def _parse_reference(raw: str) -> rfc3986.URIReference:
    """Split *raw* into URI components, raising :class:`InvalidUriSyntaxError`.

    :func:`rfc3986.uri_reference` percent-encodes the path, query and
    fragment; any difference from *raw* means *raw* held characters the
    grammar does not allow there.
    """
    reference = rfc3986.uri_reference(raw)
    if _recompose(reference) != raw:
        raise InvalidUriSyntaxError("characters outside the URI grammar must be percent-encoded")

    validator = (
        validators.Validator()
        .require_presence_of("scheme")
        .check_validity_of(*_COMPONENTS)
    )
    try:
        validator.validate(reference)
    except rfc3986_exceptions.ValidationError as exc:
        raise InvalidUriSyntaxError(str(exc)) from exc
    return reference


class Uri(BaseModel):
    """A network location whose text is known to be valid URI syntax.

    Instances are immutable. Building one directly (``Uri(raw=...)``) runs
    the same check as :meth:`parse`, so an invalid instance cannot exist.
    """

    model_config = ConfigDict(frozen=True)

    raw: str

    @field_validator("raw")
    @classmethod
    def _check_syntax(cls, value: str) -> str:
        _parse_reference(value)
        return value

    @classmethod
    def parse(cls, raw: str) -> Uri:
        """Validate *raw* and wrap it.

        Raises:
            InvalidUriSyntaxError: If *raw* is not a valid absolute URI.
        """
        return cls(raw=raw)

    @property
    def parsed(self) -> rfc3986.URIReference:
        """Structured view (scheme, authority, host, port, path, query, fragment) of :attr:`raw`.

        Re-derived on every access. A failure here means the construction
        check was bypassed and is reported as a :class:`RuntimeError`.
        """
        try:
            return _parse_reference(self.raw)
        except InvalidUriSyntaxError as exc:
            raise RuntimeError(f"Validated URI failed to re-parse: {self.raw!r}") from exc

    def __str__(self) -> str:
        return self.raw
