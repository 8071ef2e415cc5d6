"""ramlspec -- Parse the top-level fields of RAML API descriptions.

Reads a RAML document (YAML text from a file, URL, stdin, or stream) and
extracts its title, description, version, base URI, and protocols into a
typed, validated :class:`~ramlspec.models.RamlSpec`.

Typical usage::

    from ramlspec import load_spec

    spec = load_spec("api.raml")
    spec.title                 # 'Mobile Order API'
    spec.base_uri.parsed.host  # 'api.example.com'

Modules:
    models: Pydantic document model and loading options.
    uri: Validated URI value type.
    protocol: Supported protocol enumeration.
    parser: Loading, YAML decoding, and field extraction.
    exceptions: Exception hierarchy.
"""

from ramlspec.models import LoadOptions, RamlSpec
from ramlspec.parser import extract_spec, load_spec, parse_spec
from ramlspec.protocol import Protocol
from ramlspec.uri import Uri

__version__ = "0.1.0"

__all__ = [
    "LoadOptions",
    "Protocol",
    "RamlSpec",
    "Uri",
    "extract_spec",
    "load_spec",
    "parse_spec",
]
