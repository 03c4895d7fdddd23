"""Uniform, coercing accessors over an already-decoded JSON/YAML tree.

Every builder in :mod:`swagmodel.parser` reads the document through
:class:`Node` rather than poking at dicts and lists directly.  This keeps the
"field missing" versus "field present but the wrong shape" decisions in one
place:

* :meth:`Node.field` never fails; it returns ``None`` when the node is not an
  object or lacks the key.
* Scalar coercions (:meth:`Node.as_str`, :meth:`Node.as_bool`) raise
  :class:`~swagmodel.exceptions.TypeMismatch` when no sensible scalar form
  exists.
* Collection views (:meth:`Node.as_list`, :meth:`Node.as_field_map`,
  :meth:`Node.entries`, :meth:`Node.as_str_list`) are total and return empty
  collections for absent or differently-shaped nodes.

Each node remembers its JSON pointer so errors can say where they happened.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from swagmodel.exceptions import TypeMismatch


class NodeKind(str, enum.Enum):
    """The six shapes a decoded JSON/YAML value can take."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


def _escape_pointer_token(token: str) -> str:
    # RFC 6901
    return token.replace("~", "~0").replace("/", "~1")


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Node:
    """Read-only handle to one node of a decoded document.

    Args:
        value: The decoded value (dict, list, str, int, float, bool, or
            ``None``).
        pointer: JSON pointer of this node relative to the document root.

    Example::

        root = Node({"info": {"title": "Petstore"}})
        root.field("info").field("title").as_str()   # "Petstore"
        root.field("paths")                          # None
        root.field("info").pointer                   # "#/info"
    """

    __slots__ = ("_value", "_pointer")

    def __init__(self, value: Any, pointer: str = "#") -> None:
        self._value = value
        self._pointer = pointer

    @property
    def value(self) -> Any:
        """The wrapped decoded value."""
        return self._value

    @property
    def pointer(self) -> str:
        """JSON pointer of this node (``"#"`` for the document root)."""
        return self._pointer

    @property
    def kind(self) -> NodeKind:
        value = self._value
        if value is None:
            return NodeKind.NULL
        if isinstance(value, bool):
            return NodeKind.BOOLEAN
        if isinstance(value, (int, float)):
            return NodeKind.NUMBER
        if isinstance(value, str):
            return NodeKind.STRING
        if isinstance(value, dict):
            return NodeKind.OBJECT
        if isinstance(value, (list, tuple)):
            return NodeKind.ARRAY
        # Other YAML scalars (dates, timestamps) behave as strings.
        return NodeKind.STRING

    def _child(self, key: Any, value: Any) -> Node:
        token = _escape_pointer_token(str(key))
        return Node(value, f"{self._pointer}/{token}")

    # ------------------------------------------------------------------ #
    # Navigation
    # ------------------------------------------------------------------ #

    def field(self, key: str) -> Optional[Node]:
        """Return the child under *key*, or ``None`` if there is none.

        An explicit ``null`` value is returned as a :data:`NodeKind.NULL`
        node, not as ``None``.
        """
        if not isinstance(self._value, dict) or key not in self._value:
            return None
        return self._child(key, self._value[key])

    def has(self, key: str) -> bool:
        return isinstance(self._value, dict) and key in self._value

    # ------------------------------------------------------------------ #
    # Scalar coercions
    # ------------------------------------------------------------------ #

    def as_str(self) -> str:
        """Coerce a scalar to text.

        Strings are returned unchanged; numbers use their Python text form
        (``2.0`` -> ``"2.0"``) and booleans become ``"true"``/``"false"``.

        Raises:
            TypeMismatch: If the node is an object, array, or null.
        """
        kind = self.kind
        if kind in (NodeKind.OBJECT, NodeKind.ARRAY, NodeKind.NULL):
            raise TypeMismatch(
                f"Expected a string but found {kind.value}", location=self._pointer
            )
        return _scalar_text(self._value)

    def as_bool(self) -> bool:
        """Coerce a boolean (or the strings ``"true"``/``"false"``).

        Raises:
            TypeMismatch: For any other value.
        """
        value = self._value
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ("true", "false"):
            return value.lower() == "true"
        raise TypeMismatch(
            f"Expected a boolean but found {self.kind.value}", location=self._pointer
        )

    # ------------------------------------------------------------------ #
    # Collection views (total)
    # ------------------------------------------------------------------ #

    def as_list(self) -> list[Node]:
        """Child nodes of an array, or ``[]`` for anything else."""
        if not isinstance(self._value, (list, tuple)):
            return []
        return [self._child(i, item) for i, item in enumerate(self._value)]

    def as_str_list(self) -> list[str]:
        """Array of scalars coerced to text, or ``[]`` for non-arrays."""
        return [item.as_str() for item in self.as_list()]

    def entries(self) -> list[tuple[str, Node]]:
        """Ordered ``(key, child)`` pairs of an object, or ``[]``.

        Keys are always strings; YAML decodes unquoted ``200:`` keys as
        integers.
        """
        if not isinstance(self._value, dict):
            return []
        return [(str(key), self._child(key, value)) for key, value in self._value.items()]

    def as_field_map(self) -> dict[str, Node]:
        """Ordered mapping of key to child node, or ``{}`` for non-objects."""
        return dict(self.entries())

    # ------------------------------------------------------------------ #
    # Field helpers used by the builders
    # ------------------------------------------------------------------ #

    def str_field(self, key: str, default: str = "") -> str:
        """Text of ``field(key)``; *default* when absent or null."""
        child = self.field(key)
        if child is None or child.kind == NodeKind.NULL:
            return default
        return child.as_str()

    def optional_str_field(self, key: str) -> Optional[str]:
        """Text of ``field(key)``, or ``None`` when absent or null."""
        child = self.field(key)
        if child is None or child.kind == NodeKind.NULL:
            return None
        return child.as_str()

    def bool_field(self, key: str, default: bool = False) -> bool:
        """Boolean of ``field(key)``; *default* when absent or null."""
        child = self.field(key)
        if child is None or child.kind == NodeKind.NULL:
            return default
        return child.as_bool()

    def str_list_field(self, key: str) -> list[str]:
        child = self.field(key)
        return child.as_str_list() if child is not None else []

    def list_field(self, key: str) -> list[Node]:
        child = self.field(key)
        return child.as_list() if child is not None else []

    def entries_of(self, key: str) -> list[tuple[str, Node]]:
        child = self.field(key)
        return child.entries() if child is not None else []

    def __repr__(self) -> str:
        return f"Node({self._pointer!r}, kind={self.kind.value})"
