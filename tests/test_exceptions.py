"""Tests for swagmodel.exceptions -- hierarchy, exit codes, and locations."""

from __future__ import annotations

import pytest

from swagmodel.exceptions import (
    ConfigError,
    InvalidFormat,
    InvalidUsageError,
    MalformedSecurityEntry,
    MalformedVersion,
    ModelError,
    SpecLoadError,
    SwagmodelError,
    TypeMismatch,
    UnsupportedConstruct,
    UnsupportedRootType,
    UnsupportedVersion,
)
from swagmodel.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_MODEL_ERROR,
    EXIT_SPEC_LOAD_ERROR,
)


class TestExitCodes:
    """Each error class maps to its exit code."""

    @pytest.mark.parametrize(
        ("exc_class", "code"),
        [
            (SwagmodelError, EXIT_GENERIC_FAILURE),
            (ConfigError, EXIT_GENERIC_FAILURE),
            (InvalidUsageError, EXIT_INVALID_USAGE),
            (SpecLoadError, EXIT_SPEC_LOAD_ERROR),
            (ModelError, EXIT_MODEL_ERROR),
        ],
    )
    def test_class_exit_code(self, exc_class: type[SwagmodelError], code: int) -> None:
        assert exc_class("boom").exit_code == code

    def test_exit_code_override(self) -> None:
        assert SwagmodelError("boom", exit_code=3).exit_code == 3

    @pytest.mark.parametrize(
        "exc_class",
        [
            UnsupportedVersion,
            MalformedVersion,
            TypeMismatch,
            InvalidFormat,
            UnsupportedRootType,
            MalformedSecurityEntry,
            UnsupportedConstruct,
        ],
    )
    def test_model_errors(self, exc_class: type[ModelError]) -> None:
        exc = exc_class("boom")
        assert isinstance(exc, ModelError)
        assert isinstance(exc, SwagmodelError)
        assert exc.exit_code == EXIT_MODEL_ERROR


class TestModelErrorMessage:
    """ModelError formats location and context into its message."""

    def test_plain(self) -> None:
        exc = ModelError("bad thing")
        assert str(exc) == "bad thing"
        assert exc.location is None
        assert exc.context is None

    def test_with_location(self) -> None:
        assert str(ModelError("bad", location="#/paths")) == "bad at #/paths"

    def test_with_context_and_location(self) -> None:
        exc = UnsupportedRootType("not an object", location="#/definitions/X", context="definition 'X'")
        assert str(exc) == "not an object (in definition 'X') at #/definitions/X"
        assert exc.message == "not an object"
