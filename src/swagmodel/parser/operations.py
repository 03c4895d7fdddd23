"""Build paths, operations, parameters, and responses.

:func:`build_path` walks one path item and calls :func:`build_operation` for
each HTTP method it declares.  Operations are assembled from
:func:`build_parameter`, :func:`build_response`, and the security
requirements listed on the operation.

Path-level ``parameters`` apply to every operation of the path item;
operation-level parameters override them when they share the same ``name``
and ``in`` values.  An OpenAPI 3 ``requestBody`` is modeled as a trailing
``body`` parameter so generators see one parameter list for both formats.
"""

from __future__ import annotations

import logging
from typing import Optional

from swagmodel.exceptions import MalformedSecurityEntry
from swagmodel.models import (
    OperationModel,
    Parameter,
    PathModel,
    Response,
    SecurityRequirement,
    TypeModel,
)
from swagmodel.parser.navigator import Node, NodeKind
from swagmodel.parser.resolver import resolve_type

logger = logging.getLogger(__name__)

# Path-item keys that are not operations.
_PATH_ITEM_KEYS = frozenset({"parameters", "summary", "description", "servers", "$ref"})


def build_parameter(node: Node) -> Parameter:
    """Build a :class:`~swagmodel.models.Parameter` from a parameter object.

    The type comes from ``schema`` when present; otherwise the schema keywords
    are read from the parameter itself (Swagger 2.0 non-body parameters).
    """
    default = node.field("default")
    return Parameter(
        name=node.str_field("name"),
        location=node.str_field("in"),
        required=node.bool_field("required", default=False),
        description=node.str_field("description"),
        default=default.value if default is not None else None,
        schema=resolve_type(_schema_of(node) or node),
    )


def build_request_body(node: Node) -> Parameter:
    """Model an OpenAPI 3 ``requestBody`` as a ``body`` parameter."""
    return Parameter(
        name="body",
        location="body",
        required=node.bool_field("required", default=False),
        description=node.str_field("description"),
        schema=_content_schema(node) or resolve_type(None),
    )


def build_response(code: str, node: Node) -> Response:
    """Build a :class:`~swagmodel.models.Response` for one status code token.

    The body type is resolved from ``schema`` (Swagger 2.0) or from the first
    ``content`` media type that declares one (OpenAPI 3).  A response without
    either has no modeled body; that is not an error.
    """
    schema_node = _schema_of(node)
    schema = resolve_type(schema_node) if schema_node is not None else _content_schema(node)
    return Response(code=code, description=node.str_field("description"), schema=schema)


def _schema_of(node: Node) -> Optional[Node]:
    """The ``schema`` child of *node*; an explicit ``null`` counts as absent."""
    schema_node = node.field("schema")
    if schema_node is None or schema_node.kind == NodeKind.NULL:
        return None
    return schema_node


def _content_schema(node: Node) -> Optional[TypeModel]:
    for _media_type, media in node.entries_of("content"):
        schema_node = _schema_of(media)
        if schema_node is not None:
            return resolve_type(schema_node)
    return None


def build_security(node: Node) -> SecurityRequirement:
    """Build one security requirement from a single-key object.

    Raises:
        MalformedSecurityEntry: If the entry is not an object with exactly
            one key.
    """
    entries = node.entries()
    if node.kind != NodeKind.OBJECT or len(entries) != 1:
        raise MalformedSecurityEntry(
            f"Security requirement must have exactly one scheme, found {len(entries)}",
            location=node.pointer,
        )
    name, scopes = entries[0]
    return SecurityRequirement(name=name, scopes=scopes.as_str_list())


def build_operation(
    path: str,
    method: str,
    node: Node,
    path_parameters: Optional[list[Node]] = None,
) -> OperationModel:
    """Build one :class:`~swagmodel.models.OperationModel`.

    ``operation_id`` is taken from the ``tags`` list (joined with ``,``),
    not from ``operationId``; generators built on this model rely on that.

    Args:
        path: The path the operation belongs to, e.g. ``"/pets/{petId}"``.
        method: The method token as written in the document.
        node: The operation object.
        path_parameters: Parameter nodes declared on the path item.

    Raises:
        MalformedSecurityEntry: For a security entry without exactly one key.
    """
    tags = node.str_list_field("tags")
    parameter_nodes = _merge_parameters(path_parameters or [], node.list_field("parameters"))
    parameters = [build_parameter(p) for p in parameter_nodes]

    request_body = node.field("requestBody")
    if request_body is not None:
        parameters.append(build_request_body(request_body))

    return OperationModel(
        path=path,
        method=method,
        summary=node.str_field("summary"),
        description=node.str_field("description"),
        tags=tags,
        security=[build_security(entry) for entry in node.list_field("security")],
        operation_id=",".join(tags),
        parameters=parameters,
        responses={
            code: build_response(code, response)
            for code, response in node.entries_of("responses")
        },
    )


def _merge_parameters(path_params: list[Node], op_params: list[Node]) -> list[Node]:
    """Merge path-level and operation-level parameter nodes.

    Operation-level parameters override path-level parameters with the same
    name and location.
    """

    def _key(param: Node) -> tuple[str, str]:
        return (param.str_field("name"), param.str_field("in"))

    overridden = {_key(p) for p in op_params}
    merged = [p for p in path_params if _key(p) not in overridden]
    merged.extend(op_params)
    return merged


def build_path(path: str, node: Node) -> PathModel:
    """Build a :class:`~swagmodel.models.PathModel` for one path item.

    Methods are keyed exactly as written; no case normalisation is applied.
    Path-item keys that are not operations (``parameters``, ``summary``,
    ``description``, ``servers``, ``$ref``, ``x-*``) are skipped.
    """
    path_parameters = node.list_field("parameters")
    methods: dict[str, OperationModel] = {}
    for method, operation in node.entries():
        if method in _PATH_ITEM_KEYS or method.startswith("x-"):
            logger.debug("Skipping path-item key %s on %s", method, path)
            continue
        methods[method] = build_operation(path, method, operation, path_parameters)
    logger.debug("Built path %s with methods %s", path, ", ".join(methods) or "-")
    return PathModel(path=path, methods=methods)
