"""Assemble a complete :class:`~swagmodel.models.ApiModel` from a decoded document.

The single public entry point is :func:`parse_document`.  It reads the
declared version, rejects anything outside [2.0, 3.0.1], then delegates each
section of the document to a private helper:

* ``_extract_info`` -- the ``info`` object (title, version, contact, license).
* ``_extract_servers`` -- synthesised from ``host``/``basePath``/``schemes``
  for Swagger 2.0, read from ``servers`` for OpenAPI 3.
* ``_extract_security_definitions`` -- ``securityDefinitions`` and
  ``components.securitySchemes``.
* ``_extract_paths`` -- via :func:`~swagmodel.parser.operations.build_path`.
* ``_extract_definitions`` -- ``definitions`` and ``components.schemas`` via
  :func:`~swagmodel.parser.definitions.build_definition`.

Any error aborts the whole call; there is no partial model.
"""

from __future__ import annotations

import logging
from typing import Any

from swagmodel.exceptions import MalformedVersion, UnsupportedVersion
from swagmodel.models import (
    ApiInfo,
    ApiModel,
    Contact,
    License,
    PathModel,
    SecurityDefinition,
    Server,
    ServerVariable,
    TypeDefinition,
)
from swagmodel.parser.definitions import build_definition
from swagmodel.parser.navigator import Node, NodeKind
from swagmodel.parser.operations import build_path, build_security
from swagmodel.parser.version import MAX_VERSION, MIN_VERSION, V3, Version

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "unknown.json"


def parse_document(document: Any, filename: str = DEFAULT_FILENAME) -> ApiModel:
    """Build an :class:`~swagmodel.models.ApiModel` from a decoded document.

    Args:
        document: The decoded JSON/YAML value, as returned by
            :func:`~swagmodel.parser.loader.load_spec` or ``json.load``.
        filename: Name recorded as :attr:`ApiModel.filename`.

    Returns:
        The fully populated, frozen model.

    Raises:
        UnsupportedVersion: If neither ``swagger`` nor ``openapi`` is
            declared, or the version is outside [2.0, 3.0.1].
        MalformedVersion: If the declared version is not dotted numeric.
        ModelError: Any other modeling failure (see
            :mod:`swagmodel.exceptions`).

    Example::

        raw = load_spec("petstore.yaml")
        model = parse_document(raw, "petstore.yaml")
        for path in model.paths.values():
            for op in path.methods_list:
                print(op.method.upper(), op.path)
    """
    root = Node(document)
    version = _read_version(root)
    logger.debug("Parsing %s as version %s", filename, version)

    info = _extract_info(root)
    components = root.field("components") or Node({}, "#/components")

    return ApiModel(
        filename=filename,
        version=str(version),
        info=info,
        servers=_extract_servers(root, version, info),
        produces=root.str_list_field("produces"),
        consumes=root.str_list_field("consumes"),
        security=[build_security(entry) for entry in root.list_field("security")],
        security_definitions=_extract_security_definitions(
            root.entries_of("securityDefinitions") + components.entries_of("securitySchemes")
        ),
        paths=_extract_paths(root),
        definitions=_extract_definitions(
            root.entries_of("definitions") + components.entries_of("schemas")
        ),
    )


def _read_version(root: Node) -> Version:
    """Read, parse, and range-check the declared document version."""
    version_node = root.field("swagger") or root.field("openapi")
    if version_node is None or version_node.kind == NodeKind.NULL:
        raise UnsupportedVersion(
            "Not a Swagger/OpenAPI document: missing 'swagger' or 'openapi' field",
            location=root.pointer,
        )
    try:
        version = Version.parse(version_node.as_str())
    except MalformedVersion as exc:
        raise MalformedVersion(exc.message, location=version_node.pointer) from exc
    if not version.in_range(MIN_VERSION, MAX_VERSION):
        raise UnsupportedVersion(
            f"Unsupported document version '{version}': "
            f"only {MIN_VERSION} through {MAX_VERSION} are supported",
            location=version_node.pointer,
        )
    return version


def _extract_info(root: Node) -> ApiInfo:
    info = root.field("info") or Node({}, "#/info")
    contact = info.field("contact") or Node({}, f"{info.pointer}/contact")
    license_info = info.field("license") or Node({}, f"{info.pointer}/license")
    return ApiInfo(
        title=info.str_field("title"),
        description=info.str_field("description"),
        terms_of_service=info.str_field("termsOfService"),
        version=info.str_field("version"),
        contact=Contact(
            name=contact.str_field("name"),
            url=contact.str_field("url"),
            email=contact.str_field("email"),
        ),
        license=License(
            name=license_info.str_field("name"),
            url=license_info.str_field("url"),
        ),
    )


def _extract_servers(root: Node, version: Version, info: ApiInfo) -> list[Server]:
    """Build the server list for the document's major version.

    Swagger 2.0 has no server list, so exactly one server is synthesised with
    a ``scheme`` variable defaulting to the first declared scheme (or
    ``https``).
    """
    if version < V3:
        host = root.str_field("host", default="127.0.0.1")
        base_path = root.str_field("basePath", default="/")
        schemes = root.str_list_field("schemes")
        scheme = ServerVariable(
            name="scheme",
            default=schemes[0] if schemes else "https",
            description="",
            enum=schemes,
        )
        return [
            Server(
                template=f"{{scheme}}://{host}{base_path}",
                description=info.description,
                variables={"scheme": scheme},
            )
        ]

    servers: list[Server] = []
    for server in root.list_field("servers"):
        variables = {
            name: ServerVariable(
                name=name,
                default=variable.str_field("default"),
                description=variable.str_field("description"),
                enum=variable.str_list_field("enum") if variable.has("enum") else None,
            )
            for name, variable in server.entries_of("variables")
        }
        servers.append(
            Server(
                template=server.str_field("url"),
                description=server.str_field("description", default="API"),
                variables=variables,
            )
        )
    return servers


def _extract_security_definitions(
    entries: list[tuple[str, Node]],
) -> dict[str, SecurityDefinition]:
    return {
        key: SecurityDefinition(
            key=key,
            description=scheme.str_field("description"),
            type=scheme.str_field("type"),
            name=scheme.str_field("name"),
            location=scheme.str_field("in"),
        )
        for key, scheme in entries
    }


def _extract_paths(root: Node) -> dict[str, PathModel]:
    return {path: build_path(path, item) for path, item in root.entries_of("paths")}


def _extract_definitions(entries: list[tuple[str, Node]]) -> dict[str, TypeDefinition]:
    return {name: build_definition(name, schema) for name, schema in entries}
