"""Render type models as short, language-neutral type names.

:func:`render_type` is the display counterpart of the closed
:data:`~swagmodel.models.TypeModel` union and is used by ``swagmodel inspect
definitions`` to show property types.  The names follow the conventions code
generators built on this model expect (``Int``, ``Long``, ``List<T>``,
``T?``).
"""

from __future__ import annotations

from swagmodel.models import (
    ArrayType,
    BoolType,
    DoubleType,
    FloatType,
    IntegerType,
    ObjectType,
    OptionalType,
    PrimitiveType,
    RefType,
    StringKind,
    StringType,
    TypeModel,
)

_STRING_NAMES = {
    StringKind.PLAIN: "String",
    StringKind.PASSWORD: "String",
    StringKind.BINARY: "String",
    StringKind.BASE64: "Base64Type",
    StringKind.DATE: "Date",
    StringKind.DATE_TIME: "DateTime",
}


def render_type(type_model: TypeModel) -> str:
    """Return the display name of *type_model*.

    Example::

        render_type(ArrayType(items=IntegerType(width=64)))   # "List<Long>"
        render_type(OptionalType(inner=RefType(target="Pet")))  # "Pet?"
    """
    if isinstance(type_model, StringType):
        return _STRING_NAMES[type_model.subkind]
    if isinstance(type_model, IntegerType):
        return "Int" if type_model.width == 32 else "Long"
    if isinstance(type_model, BoolType):
        return "Bool"
    if isinstance(type_model, FloatType):
        return "Float"
    if isinstance(type_model, DoubleType):
        return "Double"
    if isinstance(type_model, RefType):
        return type_model.target
    if isinstance(type_model, ArrayType):
        return f"List<{render_type(type_model.items)}>"
    if isinstance(type_model, OptionalType):
        return f"{render_type(type_model.inner)}?"
    if isinstance(type_model, ObjectType):
        fields = ", ".join(f"{name}: {render_type(t)}" for name, t in type_model.fields.items())
        return f"Any/*Unsupported {{{fields}}}*/"
    if isinstance(type_model, PrimitiveType):
        label = type_model.type or "untyped"
        if type_model.format:
            label = f"{label}:{type_model.format}"
        return f"Any/*{label}*/"
    raise TypeError(f"Not a type model: {type_model!r}")
