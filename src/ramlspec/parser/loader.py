"""Load RAML documents from a URL, local file, stdin, or open stream.

This module handles all I/O. Reading happens exactly once per call; the
text is then handed to :func:`~ramlspec.parser.extractor.parse_spec`.

The public functions are:

* :func:`load_spec` -- read a source and extract a
  :class:`~ramlspec.models.RamlSpec`.
* :func:`read_source` -- read a source and return its text.
* :func:`read_stream` -- read an already open text or binary stream.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO, Any, Optional, Union

import httpx

from ramlspec.exceptions import SourceReadError
from ramlspec.models import LoadOptions, RamlSpec
from ramlspec.parser.extractor import parse_spec

logger = logging.getLogger(__name__)


def load_spec(source: str, options: Optional[LoadOptions] = None) -> RamlSpec:
    """Load a RAML document from URL, file path, or stdin ('-').

    Args:
        source: A URL (http/https), file path, or '-' for stdin.
        options: Timeout, redirect, and encoding settings. Defaults to
            :class:`~ramlspec.models.LoadOptions` with its default values.

    Returns:
        The extracted document.

    Raises:
        SourceReadError: If the source cannot be read.
        RamlParseError: If the text cannot be decoded or extracted.
    """
    return parse_spec(read_source(source, options))


def read_source(source: str, options: Optional[LoadOptions] = None) -> str:
    """Read the raw text of a RAML document.

    Args:
        source: A URL (http/https), file path, or '-' for stdin.
        options: Loading options; defaults are used when omitted.

    Returns:
        The document text.

    Raises:
        SourceReadError: If the source cannot be read.
    """
    options = options or LoadOptions()
    logger.debug("Reading RAML document from %s", source)
    if source == "-":
        return _read_from_stdin()
    elif source.startswith(("http://", "https://")):
        return _read_from_url(source, options)
    else:
        return _read_from_file(source, options)


def read_stream(reader: IO[Any]) -> Union[str, bytes]:
    """Read everything from an open text or binary stream.

    Bytes are returned undecoded; the YAML reader detects their encoding.

    Raises:
        SourceReadError: If reading fails.
    """
    try:
        return reader.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"Failed to read RAML document: {exc}") from exc


def _read_from_stdin() -> str:
    try:
        return sys.stdin.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"Failed to read from stdin: {exc}") from exc


def _read_from_url(url: str, options: LoadOptions) -> str:
    """Fetch the document over HTTP(S).

    Raises:
        SourceReadError: On a non-2xx status or a transport failure.
    """
    try:
        response = httpx.get(
            url, timeout=options.timeout, follow_redirects=options.follow_redirects
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SourceReadError(
            f"HTTP {exc.response.status_code} fetching RAML document from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise SourceReadError(f"Failed to fetch RAML document from {url}: {exc}") from exc

    return response.text


def _read_from_file(path: str, options: LoadOptions) -> str:
    file_path = Path(path)
    if not file_path.is_file():
        raise SourceReadError(f"RAML file not found: {path}")

    try:
        return file_path.read_text(encoding=options.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"Failed to read RAML file {path}: {exc}") from exc
