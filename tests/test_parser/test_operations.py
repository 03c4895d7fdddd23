"""Tests for swagmodel.parser.operations -- paths, operations, parameters, responses."""

from __future__ import annotations

import pytest

from swagmodel.exceptions import MalformedSecurityEntry
from swagmodel.models import (
    ArrayType,
    IntegerType,
    PrimitiveType,
    RefType,
    StringType,
)
from swagmodel.parser.navigator import Node
from swagmodel.parser.operations import (
    build_operation,
    build_parameter,
    build_path,
    build_request_body,
    build_response,
    build_security,
)


# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------


class TestBuildParameter:
    """Test parameter modeling for both document formats."""

    def test_swagger2_inline_type(self) -> None:
        param = build_parameter(
            Node({"name": "limit", "in": "query", "type": "integer", "format": "int32", "default": 20})
        )
        assert param.name == "limit"
        assert param.location == "query"
        assert param.required is False
        assert param.default == 20
        assert param.schema_ == IntegerType(width=32)

    def test_body_parameter_uses_schema(self) -> None:
        param = build_parameter(
            Node(
                {
                    "name": "body",
                    "in": "body",
                    "required": True,
                    "description": "Pet object",
                    "schema": {"$ref": "#/definitions/Pet"},
                }
            )
        )
        assert param.required is True
        assert param.description == "Pet object"
        assert param.schema_ == RefType(target="Pet", ref="#/definitions/Pet")

    def test_openapi3_schema(self) -> None:
        param = build_parameter(
            Node({"name": "petId", "in": "path", "required": True, "schema": {"type": "string"}})
        )
        assert param.schema_ == StringType()

    def test_null_schema_falls_back_to_inline_type(self) -> None:
        param = build_parameter(
            Node({"name": "id", "in": "query", "type": "integer", "schema": None})
        )
        assert param.schema_ == IntegerType(width=32)

    def test_untyped_parameter_is_primitive(self) -> None:
        param = build_parameter(Node({"name": "q", "in": "query"}))
        assert isinstance(param.schema_, PrimitiveType)

    def test_array_parameter(self) -> None:
        param = build_parameter(
            Node({"name": "status", "in": "query", "type": "array", "items": {"type": "string"}})
        )
        assert param.schema_ == ArrayType(items=StringType())

    def test_location_kept_verbatim(self) -> None:
        assert build_parameter(Node({"name": "f", "in": "formData", "type": "file"})).location == "formData"

    def test_dump_uses_schema_key(self) -> None:
        param = build_parameter(Node({"name": "q", "in": "query", "type": "string"}))
        dumped = param.model_dump(mode="json", by_alias=True)
        assert dumped["schema"] == {"kind": "string", "subkind": "plain"}


class TestBuildRequestBody:
    """Test requestBody modeling as a body parameter."""

    def test_first_content_schema(self) -> None:
        param = build_request_body(
            Node(
                {
                    "required": True,
                    "description": "Pet to add",
                    "content": {"application/json": {"schema": {"$ref": "#/components/schemas/NewPet"}}},
                }
            )
        )
        assert param.name == "body"
        assert param.location == "body"
        assert param.required is True
        assert param.schema_.target == "NewPet"

    def test_without_content(self) -> None:
        param = build_request_body(Node({}))
        assert param.schema_ == PrimitiveType()


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class TestBuildResponse:
    """Test response modeling."""

    def test_swagger2_schema(self) -> None:
        response = build_response(
            "200", Node({"description": "ok", "schema": {"type": "array", "items": {"type": "string"}}})
        )
        assert response.code == "200"
        assert response.int_code == 200
        assert response.description == "ok"
        assert response.schema_ == ArrayType(items=StringType())

    def test_openapi3_content_schema(self) -> None:
        response = build_response(
            "404",
            Node(
                {
                    "description": "missing",
                    "content": {
                        "text/plain": {},
                        "application/json": {"schema": {"$ref": "#/components/schemas/Error"}},
                    },
                }
            ),
        )
        assert response.schema_.target == "Error"

    def test_without_body(self) -> None:
        response = build_response("204", Node({"description": "no content"}))
        assert response.schema_ is None

    def test_null_schema_means_no_body(self) -> None:
        assert build_response("200", Node({"description": "ok", "schema": None})).schema_ is None

    def test_null_content_schema_is_skipped(self) -> None:
        response = build_response(
            "200",
            Node(
                {
                    "content": {
                        "text/plain": {"schema": None},
                        "application/json": {"schema": {"type": "string"}},
                    }
                }
            ),
        )
        assert response.schema_ == StringType()

    def test_default_code(self) -> None:
        assert build_response("default", Node({})).int_code == 200

    def test_non_integer_code_is_kept(self) -> None:
        response = build_response("2XX", Node({"description": "success"}))
        assert response.code == "2XX"
        assert response.int_code == -1


# ---------------------------------------------------------------------------
# Security requirements
# ---------------------------------------------------------------------------


class TestBuildSecurity:
    """Test single-key security requirement entries."""

    def test_with_scopes(self) -> None:
        requirement = build_security(Node({"petstore_auth": ["write:pets", "read:pets"]}))
        assert requirement.name == "petstore_auth"
        assert requirement.scopes == ["write:pets", "read:pets"]

    def test_without_scopes(self) -> None:
        requirement = build_security(Node({"api_key": []}))
        assert requirement.name == "api_key"
        assert requirement.scopes == []

    @pytest.mark.parametrize("entry", [{}, {"a": [], "b": []}, ["api_key"], "api_key"])
    def test_malformed_entries_raise(self, entry: object) -> None:
        with pytest.raises(MalformedSecurityEntry):
            build_security(Node(entry, "#/security/0"))

    def test_malformed_entry_reports_location(self) -> None:
        with pytest.raises(MalformedSecurityEntry) as exc_info:
            build_security(Node({}, "#/security/0"))
        assert exc_info.value.location == "#/security/0"


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


class TestBuildOperation:
    """Test operation assembly."""

    def test_fields(self) -> None:
        op = build_operation(
            "/pets",
            "get",
            Node(
                {
                    "tags": ["pets"],
                    "summary": "List pets",
                    "description": "All of them",
                    "operationId": "listPets",
                    "security": [{"api_key": []}],
                    "parameters": [{"name": "limit", "in": "query", "type": "integer"}],
                    "responses": {"200": {"description": "ok"}, "default": {"description": "err"}},
                }
            ),
        )
        assert op.path == "/pets"
        assert op.method == "get"
        assert op.summary == "List pets"
        assert op.description == "All of them"
        assert op.tags == ["pets"]
        assert [s.name for s in op.security] == ["api_key"]
        assert [p.name for p in op.parameters] == ["limit"]
        assert list(op.responses) == ["200", "default"]

    def test_operation_id_comes_from_tags(self) -> None:
        op = build_operation(
            "/pets", "get", Node({"tags": ["pets", "admin"], "operationId": "listPets"})
        )
        assert op.operation_id == "pets,admin"

    def test_operation_id_without_tags_is_empty(self) -> None:
        assert build_operation("/pets", "get", Node({})).operation_id == ""

    def test_empty_operation(self) -> None:
        op = build_operation("/ping", "get", Node({}))
        assert op.summary == ""
        assert op.tags == []
        assert op.security == []
        assert op.parameters == []
        assert op.responses == {}

    def test_path_parameters_are_merged(self) -> None:
        path_params = Node(
            [
                {"name": "id", "in": "path", "required": True, "type": "integer", "format": "int64"},
                {"name": "trace", "in": "header", "type": "string"},
            ]
        ).as_list()
        op = build_operation(
            "/pets/{id}",
            "delete",
            Node({"parameters": [{"name": "id", "in": "path", "required": True, "type": "integer"}]}),
            path_params,
        )
        assert [(p.name, p.location) for p in op.parameters] == [("trace", "header"), ("id", "path")]
        assert op.parameters[1].schema_ == IntegerType(width=32)

    def test_request_body_appended_last(self) -> None:
        op = build_operation(
            "/pets",
            "post",
            Node(
                {
                    "parameters": [{"name": "dryRun", "in": "query", "schema": {"type": "boolean"}}],
                    "requestBody": {"content": {"application/json": {"schema": {"type": "string"}}}},
                }
            ),
        )
        assert [p.name for p in op.parameters] == ["dryRun", "body"]

    def test_malformed_security_aborts(self) -> None:
        with pytest.raises(MalformedSecurityEntry):
            build_operation("/pets", "get", Node({"security": [{"a": [], "b": []}]}))


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


class TestBuildPath:
    """Test path-item walking."""

    def test_methods_in_source_order(self) -> None:
        path = build_path("/pets", Node({"post": {}, "get": {}}))
        assert path.path == "/pets"
        assert list(path.methods) == ["post", "get"]
        assert [op.method for op in path.methods_list] == ["post", "get"]

    def test_method_case_is_preserved(self) -> None:
        path = build_path("/pets", Node({"GET": {}}))
        assert list(path.methods) == ["GET"]

    def test_non_operation_keys_are_skipped(self) -> None:
        path = build_path(
            "/pets",
            Node(
                {
                    "summary": "Pets",
                    "description": "Pet collection",
                    "servers": [],
                    "parameters": [],
                    "x-internal": True,
                    "get": {},
                }
            ),
        )
        assert list(path.methods) == ["get"]

    def test_operations_know_their_path(self) -> None:
        path = build_path("/pets/{id}", Node({"get": {}, "put": {}}))
        assert all(op.path == "/pets/{id}" for op in path.methods_list)
