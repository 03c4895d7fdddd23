"""Build named type definitions from ``definitions`` / ``components.schemas``.

Only object-shaped definitions are modeled.  A named definition of any other
``type`` raises :class:`~swagmodel.exceptions.UnsupportedRootType`; aliases
and enums at the top level are a deliberate restriction, not an oversight.
"""

from __future__ import annotations

import logging

from swagmodel.exceptions import UnsupportedRootType
from swagmodel.models import Property, TypeDefinition
from swagmodel.parser.navigator import Node
from swagmodel.parser.resolver import resolve_type

logger = logging.getLogger(__name__)


def build_definition(name: str, node: Node) -> TypeDefinition:
    """Build one :class:`~swagmodel.models.TypeDefinition`.

    Args:
        name: The definition's key in the definitions mapping.
        node: The definition's schema node.

    Returns:
        The definition with one :class:`~swagmodel.models.Property` per
        entry of ``properties``, in source order.

    Raises:
        UnsupportedRootType: If the schema's ``type`` is not ``"object"``.
    """
    root_type = node.str_field("type")
    if root_type != "object":
        raise UnsupportedRootType(
            f"Only 'object' definitions are supported but found '{root_type}'",
            location=node.pointer,
            context=f"definition '{name}'",
        )

    required = set(node.str_list_field("required"))
    props = {
        key: Property(name=key, type=resolve_type(child), required=key in required)
        for key, child in node.entries_of("properties")
    }
    logger.debug("Built definition %s with %d properties", name, len(props))
    return TypeDefinition(name=name, props=props)
