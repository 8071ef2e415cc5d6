"""Supported transfer protocols for a RAML API."""

from __future__ import annotations

import enum
from typing import Any

from ramlspec.exceptions import InvalidYamlValueError, UnsupportedProtocolError


class Protocol(str, enum.Enum):
    """Protocols accepted in the top-level ``protocols`` sequence.

    Matching is case-sensitive: ``"http"`` is not ``HTTP``.
    """

    HTTP = "HTTP"
    HTTPS = "HTTPS"

    @classmethod
    def from_node(cls, node: Any) -> Protocol:
        """Convert one decoded YAML node into a :class:`Protocol`.

        Args:
            node: A value from the decoded tree, expected to be a string.

        Returns:
            The matching protocol.

        Raises:
            UnsupportedProtocolError: If *node* is a string naming any other
                protocol. The offending text is kept on ``.protocol``.
            InvalidYamlValueError: If *node* is not a string (number,
                boolean, null, mapping, sequence).
        """
        if not isinstance(node, str):
            raise InvalidYamlValueError()
        for member in cls:
            if member.value == node:
                return member
        raise UnsupportedProtocolError(node)
