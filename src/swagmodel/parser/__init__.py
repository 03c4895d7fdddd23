"""Swagger/OpenAPI model parser -- load, navigate, and model API documents.

This sub-package turns a decoded Swagger 2.0 or OpenAPI 3.0.0/3.0.1 document
into a frozen :class:`~swagmodel.models.ApiModel`.

Typical usage::

    from swagmodel.parser import load_spec, parse_document

    raw = load_spec("https://petstore.swagger.io/v2/swagger.json")
    model = parse_document(raw, "swagger.json")

Sub-modules:

* :mod:`~swagmodel.parser.loader` -- I/O layer (URL, file, stdin) plus
  JSON/YAML detection.
* :mod:`~swagmodel.parser.version` -- Dotted version parsing and ordering.
* :mod:`~swagmodel.parser.navigator` -- Coercing accessors over the decoded
  tree.
* :mod:`~swagmodel.parser.resolver` -- Schema node to type model.
* :mod:`~swagmodel.parser.definitions` -- Named object definitions.
* :mod:`~swagmodel.parser.operations` -- Paths, operations, parameters,
  responses.
* :mod:`~swagmodel.parser.extractor` -- The top-level orchestrator.
"""

from swagmodel.parser.extractor import parse_document
from swagmodel.parser.loader import load_spec, source_filename

__all__ = ["load_spec", "parse_document", "source_filename"]
