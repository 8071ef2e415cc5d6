"""Extract a :class:`~ramlspec.models.RamlSpec` from a decoded RAML tree.

The public entry points are :func:`extract_spec`, which works on an
already decoded tree, and :func:`parse_spec`, which decodes text first.
Each top-level field is handled by its own private helper:

* ``_extract_title`` -- mandatory string, the only field whose absence fails.
* ``description`` / ``version`` -- optional strings read leniently: a value
  of the wrong type is treated as absent.
* ``_extract_base_uri`` -- optional string validated as a URI.
* ``_extract_protocols`` -- optional sequence of protocol names, collected
  into a set. One bad entry fails the whole field.

Other RAML top-level keys are recognised (:data:`RESERVED_KEYS`) but not
extracted; they are only reported at DEBUG level.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from ramlspec.exceptions import (
    FieldNotFoundError,
    IncorrectProtocolError,
    IncorrectUriError,
    ProtocolParseError,
    UriParseError,
)
from ramlspec.models import RamlSpec
from ramlspec.parser.tree import decode_document, lookup_list, lookup_str
from ramlspec.protocol import Protocol
from ramlspec.uri import Uri

logger = logging.getLogger(__name__)

TITLE = "title"
DESCRIPTION = "description"
VERSION = "version"
BASE_URI = "baseUri"
BASE_URI_PARAMETERS = "baseUriParameters"
PROTOCOLS = "protocols"
MEDIA_TYPE = "mediaType"
DOCUMENTATION = "documentation"
SCHEMAS = "schemas"
TYPES = "types"
TRAITS = "traits"
RESOURCE_TYPES = "resourceTypes"
ANNOTATION_TYPES = "annotationTypes"
SECURITY_SCHEMES = "securitySchemes"
SECURED_BY = "secured_by"
USES = "uses"

EXTRACTED_KEYS = frozenset({TITLE, DESCRIPTION, VERSION, BASE_URI, PROTOCOLS})
"""Top-level keys read into :class:`~ramlspec.models.RamlSpec`."""

RESERVED_KEYS = frozenset(
    {
        BASE_URI_PARAMETERS,
        MEDIA_TYPE,
        DOCUMENTATION,
        SCHEMAS,
        TYPES,
        TRAITS,
        RESOURCE_TYPES,
        ANNOTATION_TYPES,
        SECURITY_SCHEMES,
        SECURED_BY,
        USES,
    }
)
"""Top-level RAML keys that are recognised but not extracted."""

KNOWN_KEYS = EXTRACTED_KEYS | RESERVED_KEYS


def parse_spec(content: Union[str, bytes]) -> RamlSpec:
    """Decode RAML text and extract its top-level fields.

    Args:
        content: The raw document as text or bytes.

    Returns:
        The extracted :class:`~ramlspec.models.RamlSpec`.

    Raises:
        IncorrectYamlSyntaxError: If the text is not well-formed YAML.
        FileIsEmptyError: If the text contains no YAML document.
        RamlParseError: Any failure raised by :func:`extract_spec`.
    """
    return extract_spec(decode_document(content))


def extract_spec(root: Any) -> RamlSpec:
    """Build a :class:`~ramlspec.models.RamlSpec` from a decoded document.

    Args:
        root: The first document of a decoded YAML stream. Anything other
            than a mapping has no fields and fails on ``title``.

    Returns:
        A fully populated :class:`~ramlspec.models.RamlSpec`.

    Raises:
        FieldNotFoundError: If ``title`` is absent or not a string.
        IncorrectUriError: If ``baseUri`` is not a valid URI.
        IncorrectProtocolError: If any ``protocols`` entry is unsupported or
            not a string.
    """
    title = _extract_title(root)
    _log_unextracted_keys(root)

    return RamlSpec(
        title=title,
        description=lookup_str(root, DESCRIPTION),
        version=lookup_str(root, VERSION),
        base_uri=_extract_base_uri(root),
        protocols=_extract_protocols(root),
    )


def _extract_title(root: Any) -> str:
    title = lookup_str(root, TITLE)
    if title is None:
        raise FieldNotFoundError(TITLE)
    return title


def _extract_base_uri(root: Any) -> Optional[Uri]:
    """Validate ``baseUri`` when present.

    A non-string ``baseUri`` is treated as absent, the same as any other
    optional string field.
    """
    raw = lookup_str(root, BASE_URI)
    if raw is None:
        return None
    try:
        return Uri.parse(raw)
    except UriParseError as exc:
        raise IncorrectUriError(exc) from exc


def _extract_protocols(root: Any) -> Optional[frozenset[Protocol]]:
    """Convert every ``protocols`` entry; the first bad entry aborts the field."""
    nodes = lookup_list(root, PROTOCOLS)
    if nodes is None:
        return None
    try:
        return frozenset(Protocol.from_node(node) for node in nodes)
    except ProtocolParseError as exc:
        raise IncorrectProtocolError(exc) from exc


def _log_unextracted_keys(root: Any) -> None:
    if not isinstance(root, dict) or not logger.isEnabledFor(logging.DEBUG):
        return
    for key in root:
        if key in EXTRACTED_KEYS:
            continue
        if key in RESERVED_KEYS:
            logger.debug("Top-level key '%s' is recognised but not extracted", key)
        elif isinstance(key, str) and key.startswith("/"):
            logger.debug("Skipping resource '%s'", key)
        else:
            logger.debug("Ignoring unknown top-level key '%s'", key)
