"""Resolve a single schema node into a :data:`~swagmodel.models.TypeModel`.

See https://swagger.io/specification/#data-types for the ``type``/``format``
pairs handled here.

Recognised types with a recognised ``format`` map to a dedicated variant; a
recognised type with an unknown ``format`` raises
:class:`~swagmodel.exceptions.InvalidFormat` because guessing would corrupt
generated code.  A missing or unrecognised ``type`` (``allOf``, ``oneOf``,
free-form schemas) is not an error: it degrades to
:class:`~swagmodel.models.PrimitiveType` carrying the raw node.

``$ref`` pointers are not followed; they become
:class:`~swagmodel.models.RefType` naming the referenced definition.
"""

from __future__ import annotations

import logging
from typing import Optional

from swagmodel.exceptions import InvalidFormat, UnsupportedConstruct
from swagmodel.models import (
    ArrayType,
    BoolType,
    DoubleType,
    FloatType,
    IntegerType,
    ObjectType,
    PrimitiveType,
    RefType,
    StringKind,
    StringType,
    TypeModel,
)
from swagmodel.parser.navigator import Node, NodeKind

logger = logging.getLogger(__name__)

# A format written as YAML ``null`` reads back as "null".
_NO_FORMAT = (None, "", "null")

_STRING_FORMATS = {
    "string": StringKind.PLAIN,
    "byte": StringKind.BASE64,
    "binary": StringKind.BINARY,
    "date": StringKind.DATE,
    "date-time": StringKind.DATE_TIME,
    "password": StringKind.PASSWORD,
}


def resolve_type(node: Optional[Node]) -> TypeModel:
    """Map one schema node to a type model, recursing into arrays and objects.

    Args:
        node: The schema node, or ``None`` when the schema is absent.

    Returns:
        The resolved type model.

    Raises:
        InvalidFormat: For an ``integer``, ``number`` or ``string`` type with
            an unrecognised ``format``.
        UnsupportedConstruct: For an explicit ``type: null``.
    """
    if node is None:
        return PrimitiveType()

    ref = node.optional_str_field("$ref")
    if ref is not None:
        return RefType(target=ref.rsplit("/", 1)[-1], ref=ref)

    type_node = node.field("type")
    if type_node is not None and type_node.kind == NodeKind.NULL:
        # ``type: null`` in YAML decodes to None, same as ``type: "null"``.
        raise UnsupportedConstruct("Explicit null type is not supported", location=node.pointer)
    type_name = type_node.as_str() if type_node is not None and type_node.kind != NodeKind.ARRAY else None
    fmt = node.optional_str_field("format")

    if type_name == "integer":
        return _resolve_integer(fmt, node)
    if type_name == "number":
        return _resolve_number(fmt, node)
    if type_name == "string":
        return _resolve_string(fmt, node)
    if type_name == "boolean":
        return BoolType()
    if type_name == "array":
        return ArrayType(items=resolve_type(node.field("items")))
    if type_name == "object":
        return ObjectType(
            fields={key: resolve_type(child) for key, child in node.entries_of("properties")}
        )
    if type_name == "null":
        raise UnsupportedConstruct("Explicit null type is not supported", location=node.pointer)

    logger.debug("Unmodeled schema at %s (type=%s), keeping raw node", node.pointer, type_name)
    return PrimitiveType(type=type_name, format=fmt, raw=node.value)


def _resolve_integer(fmt: Optional[str], node: Node) -> IntegerType:
    if fmt in _NO_FORMAT or fmt == "int32":
        return IntegerType(width=32)
    if fmt == "int64":
        return IntegerType(width=64)
    raise InvalidFormat(f"Invalid integer format '{fmt}'", location=node.pointer)


def _resolve_number(fmt: Optional[str], node: Node) -> FloatType | DoubleType:
    if fmt == "float":
        return FloatType()
    if fmt in _NO_FORMAT or fmt == "double":
        return DoubleType()
    raise InvalidFormat(f"Invalid number format '{fmt}'", location=node.pointer)


def _resolve_string(fmt: Optional[str], node: Node) -> StringType:
    if fmt in _NO_FORMAT:
        return StringType(subkind=StringKind.PLAIN)
    subkind = _STRING_FORMATS.get(fmt)
    if subkind is None:
        raise InvalidFormat(f"Invalid string format '{fmt}'", location=node.pointer)
    return StringType(subkind=subkind)
