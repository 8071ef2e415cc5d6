"""Pydantic models shared across ramlspec.

**Document model** -- produced by the extractor:
    :class:`RamlSpec`, which embeds the scalar value types
    :class:`~ramlspec.uri.Uri` and :class:`~ramlspec.protocol.Protocol`.

**Loading options** -- passed to :func:`~ramlspec.parser.loader.load_spec`:
    :class:`LoadOptions`.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ramlspec.protocol import Protocol
from ramlspec.uri import Uri


class LoadOptions(BaseModel):
    """Settings for reading a RAML document from a file or URL."""

    timeout: float = Field(default=30.0, description="HTTP timeout in seconds")
    follow_redirects: bool = Field(
        default=True, description="Follow HTTP redirects when fetching a URL"
    )
    encoding: str = Field(default="utf-8", description="Text encoding of local files")


class RamlSpec(BaseModel):
    """Typed view of the top-level fields of a RAML document.

    Only ``title`` is mandatory. ``protocols`` is a set: repeating a
    protocol in the source yields a single member.

    Example::

        spec = RamlSpec.from_str("title: Mobile Order API")
        spec.title        # 'Mobile Order API'
        spec.base_uri     # None
    """

    model_config = ConfigDict(frozen=True)

    title: str
    description: Optional[str] = None
    version: Optional[str] = None
    base_uri: Optional[Uri] = None
    protocols: Optional[frozenset[Protocol]] = None

    @classmethod
    def from_str(cls, content: Union[str, bytes]) -> RamlSpec:
        """Parse a RAML document held in memory."""
        from ramlspec.parser.extractor import parse_spec

        return parse_spec(content)

    @classmethod
    def from_reader(cls, reader: IO[Any]) -> RamlSpec:
        """Read a text or binary file-like object once and parse it."""
        from ramlspec.parser.loader import read_stream
        from ramlspec.parser.extractor import parse_spec

        return parse_spec(read_stream(reader))

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> RamlSpec:
        """Read and parse a RAML document from a local file."""
        from ramlspec.parser.loader import load_spec

        return load_spec(str(path))
