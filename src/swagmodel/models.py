"""Canonical Pydantic models shared across all swagmodel modules.

This is the single source of truth for data shapes in the project. The models
fall into three groups:

**Type models** -- the closed set of variants a schema node resolves to:
    :class:`PrimitiveType`, :class:`StringType`, :class:`IntegerType`,
    :class:`BoolType`, :class:`FloatType`, :class:`DoubleType`,
    :class:`RefType`, :class:`ArrayType`, :class:`ObjectType`, and
    :class:`OptionalType`, joined into the discriminated union
    :data:`TypeModel` (discriminator: ``kind``).

**API models** -- produced by :func:`~swagmodel.parser.parse_document` and
consumed by code generators:
    :class:`Property`, :class:`TypeDefinition`, :class:`SecurityDefinition`,
    :class:`Parameter`, :class:`SecurityRequirement`, :class:`Response`,
    :class:`OperationModel`, :class:`PathModel`, :class:`ServerVariable`,
    :class:`Server`, :class:`Contact`, :class:`License`, :class:`ApiInfo`,
    and the root :class:`ApiModel`.

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`OutputConfig`, :class:`ParserConfig`, and :class:`GlobalConfig`.

Type and API models are frozen: the whole :class:`ApiModel` graph is built in
a single call and never mutated afterwards.
"""

from __future__ import annotations

import enum
import re
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    computed_field,
    field_validator,
    model_validator,
)

_INT_CODE_RE = re.compile(r"[+-]?\d+")
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_BOOL = TypeAdapter(bool)


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# --- Type models ---


class StringKind(str, enum.Enum):
    """Sub-kinds of ``type: string`` distinguished by ``format``."""

    PLAIN = "plain"
    BASE64 = "base64"
    BINARY = "binary"
    DATE = "date"
    DATE_TIME = "date-time"
    PASSWORD = "password"


class PrimitiveType(_FrozenModel):
    """Fallback for schema shapes the resolver does not model.

    Produced for a missing or unrecognised ``type`` (``allOf``/``oneOf``
    compositions, free-form schemas). ``raw`` keeps the original schema node
    so a code generator can still inspect it.
    """

    kind: Literal["primitive"] = "primitive"
    type: Optional[str] = None
    format: Optional[str] = None
    raw: Any = None


class StringType(_FrozenModel):
    kind: Literal["string"] = "string"
    subkind: StringKind = StringKind.PLAIN


class IntegerType(_FrozenModel):
    kind: Literal["integer"] = "integer"
    width: Literal[32, 64] = 32


class BoolType(_FrozenModel):
    kind: Literal["boolean"] = "boolean"


class FloatType(_FrozenModel):
    kind: Literal["float"] = "float"


class DoubleType(_FrozenModel):
    kind: Literal["double"] = "double"


class RefType(_FrozenModel):
    """A reference to a named definition, e.g. ``#/definitions/Pet``.

    ``target`` is the last segment of the reference (``"Pet"``); ``ref``
    keeps the reference string as written.
    """

    kind: Literal["ref"] = "ref"
    target: str
    ref: str = ""


class ArrayType(_FrozenModel):
    kind: Literal["array"] = "array"
    items: TypeModel


class ObjectType(_FrozenModel):
    """An inline object schema; ``fields`` preserves source order."""

    kind: Literal["object"] = "object"
    fields: dict[str, TypeModel] = Field(default_factory=dict)


class OptionalType(_FrozenModel):
    """A value that may be absent. Never wraps another :class:`OptionalType`."""

    kind: Literal["optional"] = "optional"
    inner: TypeModel

    @field_validator("inner")
    @classmethod
    def _no_nested_optional(cls, value: Any) -> Any:
        if isinstance(value, OptionalType):
            raise ValueError("OptionalType cannot wrap another OptionalType")
        return value


TypeModel = Annotated[
    Union[
        PrimitiveType,
        StringType,
        IntegerType,
        BoolType,
        FloatType,
        DoubleType,
        RefType,
        ArrayType,
        ObjectType,
        OptionalType,
    ],
    Field(discriminator="kind"),
]
"""Discriminated union of every type-model variant."""

ArrayType.model_rebuild()
ObjectType.model_rebuild()
OptionalType.model_rebuild()


# --- API models ---


class Property(_FrozenModel):
    """One property of a named definition.

    ``effective_type`` is derived once, at construction: the resolved
    ``type`` itself when the property is required, otherwise
    ``OptionalType(inner=type)``.
    """

    name: str
    type: TypeModel
    required: bool = False
    effective_type: TypeModel

    @model_validator(mode="before")
    @classmethod
    def _derive_effective_type(cls, data: Any) -> Any:
        if isinstance(data, dict) and "type" in data:
            try:
                required = _BOOL.validate_python(data.get("required", False))
            except ValidationError:
                # Left to field validation, which reports the bad value.
                return data
            data = dict(data, required=required)
            inner = data["type"]
            if required:
                data["effective_type"] = inner
            else:
                data["effective_type"] = {"kind": "optional", "inner": inner}
        return data


class TypeDefinition(_FrozenModel):
    """A named, object-shaped definition (``definitions``/``components.schemas``)."""

    name: str
    props: dict[str, Property] = Field(default_factory=dict)

    @property
    def props_list(self) -> list[Property]:
        return list(self.props.values())


class SecurityDefinition(_FrozenModel):
    """A security scheme declared by the document.

    ``name`` and ``location`` are the credential field name and where it is
    sent (``header``, ``query``) for ``apiKey`` schemes; empty otherwise.
    """

    key: str
    description: str = ""
    type: str = ""
    name: str = ""
    location: str = ""


class Contact(_FrozenModel):
    name: str = ""
    url: str = ""
    email: str = ""


class License(_FrozenModel):
    name: str = ""
    url: str = ""


class ApiInfo(_FrozenModel):
    """API metadata from the document's *Info Object*."""

    title: str = ""
    description: str = ""
    terms_of_service: str = ""
    version: str = ""
    contact: Contact = Field(default_factory=Contact)
    license: License = Field(default_factory=License)


class Parameter(_FrozenModel):
    """One operation parameter.

    ``location`` is the ``in`` value exactly as declared (``query``, ``path``,
    ``header``, ``body``, ``formData``, ``cookie``).
    """

    name: str
    location: str
    required: bool = False
    description: str = ""
    default: Any = None
    schema_: TypeModel = Field(alias="schema")


class SecurityRequirement(_FrozenModel):
    name: str
    scopes: list[str] = Field(default_factory=list)


class Response(_FrozenModel):
    """A response declared for one status code token.

    ``int_code`` maps ``"default"`` to 200 and any other token to its integer
    value, or -1 when the token is not a 32-bit integer. Such tokens are kept
    rather than rejected.
    """

    code: str
    description: str = ""
    schema_: Optional[TypeModel] = Field(default=None, alias="schema")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def int_code(self) -> int:
        if self.code == "default":
            return 200
        if _INT_CODE_RE.fullmatch(self.code):
            value = int(self.code)
            if _INT32_MIN <= value <= _INT32_MAX:
                return value
        return -1


class OperationModel(_FrozenModel):
    """A single operation (one path + HTTP method pair)."""

    path: str
    method: str
    summary: str = ""
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    security: list[SecurityRequirement] = Field(default_factory=list)
    operation_id: str = ""
    parameters: list[Parameter] = Field(default_factory=list)
    responses: dict[str, Response] = Field(default_factory=dict)


class PathModel(_FrozenModel):
    path: str
    methods: dict[str, OperationModel] = Field(default_factory=dict)

    @property
    def methods_list(self) -> list[OperationModel]:
        return list(self.methods.values())


class ServerVariable(_FrozenModel):
    name: str
    default: str = ""
    description: str = ""
    enum: Optional[list[str]] = None


class Server(_FrozenModel):
    """A server the API is reachable at.

    ``template`` is the URL as declared (OpenAPI 3) or synthesised from
    ``host``/``basePath``/``schemes`` (Swagger 2), and may contain
    ``{variable}`` placeholders. ``url`` substitutes every variable's default.
    """

    template: str
    description: str = ""
    variables: dict[str, ServerVariable] = Field(default_factory=dict)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def url(self) -> str:
        url = self.template
        for name, variable in self.variables.items():
            url = url.replace("{" + name + "}", variable.default)
        return url


class ApiModel(_FrozenModel):
    """Complete model of a Swagger 2.0 / OpenAPI 3.0.x document.

    Produced in one call by :func:`~swagmodel.parser.parse_document`; there
    is never a partially built instance.

    See Also:
        :class:`PathModel`: One entry per declared path.
        :class:`TypeDefinition`: One entry per named definition.
    """

    filename: str
    version: str
    info: ApiInfo
    servers: list[Server] = Field(default_factory=list)
    produces: list[str] = Field(default_factory=list)
    consumes: list[str] = Field(default_factory=list)
    security: list[SecurityRequirement] = Field(default_factory=list)
    security_definitions: dict[str, SecurityDefinition] = Field(default_factory=dict)
    paths: dict[str, PathModel] = Field(default_factory=dict)
    definitions: dict[str, TypeDefinition] = Field(default_factory=dict)

    @property
    def operations(self) -> list[OperationModel]:
        """Every operation of every path, in document order."""
        return [op for path in self.paths.values() for op in path.methods.values()]


# --- Configuration models ---


class OutputConfig(BaseModel):
    """Default output format preferences stored in :class:`GlobalConfig`."""

    format: str = Field(
        default="auto", description="Output format: auto, json, plain, rich"
    )


class ParserConfig(BaseModel):
    """Parser defaults stored in :class:`GlobalConfig`."""

    default_filename: str = Field(
        default="unknown.json",
        description="Filename recorded on the model when the source has none",
    )


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/swagmodel/config.json``.

    Loaded by :func:`~swagmodel.config.load_global_config`. Fields here have
    the lowest precedence and can be overridden by project config,
    environment variables, or CLI flags. See
    :func:`~swagmodel.config.resolve_config` for the full precedence chain.
    """

    output: OutputConfig = Field(default_factory=OutputConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
