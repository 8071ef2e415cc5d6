"""RAML document parser -- read, decode, and extract top-level fields.

Typical usage::

    from ramlspec.parser import load_spec

    spec = load_spec("api.raml")
    print(spec.title, spec.base_uri)

Sub-modules:

* :mod:`~ramlspec.parser.loader` -- I/O layer (URL, file, stdin, streams).
* :mod:`~ramlspec.parser.tree` -- YAML decoding and sentinel-based field
  lookup on the untyped tree.
* :mod:`~ramlspec.parser.extractor` -- Walks the decoded tree and produces a
  :class:`~ramlspec.models.RamlSpec`.
"""

from ramlspec.parser.extractor import extract_spec, parse_spec
from ramlspec.parser.loader import load_spec, read_source

__all__ = ["extract_spec", "parse_spec", "load_spec", "read_source"]
