"""Decode YAML text into an untyped tree and look fields up in it.

The tree is whatever PyYAML's safe loader produces: dicts, lists, and
scalars. Lookups never raise; a key that is absent (or a node that is not a
mapping at all) yields the :data:`MISSING` sentinel, so callers can tell
"not there" apart from "there with the wrong type" when they need to.
"""

from __future__ import annotations

import re
from typing import Any, Optional, Union

import yaml

from ramlspec.exceptions import FileIsEmptyError, IncorrectYamlSyntaxError


class _Missing:
    """Type of the :data:`MISSING` sentinel."""

    _instance: Optional[_Missing] = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()
"""Returned by :func:`lookup` when a field is absent."""

_BOOL_TAG = "tag:yaml.org,2002:bool"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class RamlLoader(yaml.SafeLoader):
    """Safe loader resolving plain scalars the YAML 1.2 way RAML expects.

    Dates stay strings, and only ``true``/``false`` (in their three
    spellings) are booleans; ``yes``, ``no``, ``on`` and ``off`` are strings.
    """


RamlLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag not in (_BOOL_TAG, _TIMESTAMP_TAG)
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
RamlLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def decode_document(content: Union[str, bytes]) -> Any:
    """Decode *content* and return its first YAML document.

    Plain scalars are resolved with :class:`RamlLoader`. Every document in
    the stream is decoded, so a syntax error in a later document is still
    reported.

    Args:
        content: YAML text, or bytes in any encoding PyYAML detects.

    Returns:
        The first decoded document (may be ``None`` for an explicit empty
        document such as ``---``).

    Raises:
        IncorrectYamlSyntaxError: If the content is not well-formed YAML.
        FileIsEmptyError: If the content holds no documents at all.
    """
    try:
        documents = list(yaml.load_all(content, Loader=RamlLoader))
    except yaml.YAMLError as exc:
        raise IncorrectYamlSyntaxError(str(exc)) from exc

    if not documents:
        raise FileIsEmptyError()
    return documents[0]


def lookup(node: Any, key: str) -> Any:
    """Return ``node[key]``, or :data:`MISSING` if *node* has no such key."""
    if not isinstance(node, dict):
        return MISSING
    return node.get(key, MISSING)


def lookup_str(node: Any, key: str) -> Optional[str]:
    """Return the string under *key*; absent or non-string values give ``None``."""
    value = lookup(node, key)
    return value if isinstance(value, str) else None


def lookup_list(node: Any, key: str) -> Optional[list[Any]]:
    """Return the sequence under *key*; absent or non-sequence values give ``None``."""
    value = lookup(node, key)
    return value if isinstance(value, list) else None
