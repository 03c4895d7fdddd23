"""Fixtures shared by the whole suite.

Raw and parsed petstore documents, a sandboxed config environment and a
Typer ``CliRunner``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

from swagmodel.models import ApiModel
from swagmodel.output import reset_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Drop the process-wide OutputManager once a test is done.

    A manager built inside ``CliRunner.invoke`` holds consoles bound to the
    runner's temporary streams, which are closed when the call returns.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


@pytest.fixture
def petstore_20_raw() -> dict[str, Any]:
    """``fixtures/petstore_2.0.json`` as a dict."""
    with open(FIXTURES_DIR / "petstore_2.0.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def petstore_30_raw() -> dict[str, Any]:
    """``fixtures/petstore_3.0.yaml`` as a dict."""
    with open(FIXTURES_DIR / "petstore_3.0.yaml", encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def ping_raw() -> dict[str, Any]:
    """Smallest useful Swagger 2.0 document: one operation, no host."""
    return {
        "swagger": "2.0",
        "info": {"title": "T", "version": "1"},
        "paths": {"/ping": {"get": {"responses": {"200": {"description": "ok"}}}}},
    }


@pytest.fixture
def petstore_20(petstore_20_raw: dict[str, Any]) -> ApiModel:
    from swagmodel.parser import parse_document

    return parse_document(petstore_20_raw, "petstore_2.0.json")


@pytest.fixture
def petstore_30(petstore_30_raw: dict[str, Any]) -> ApiModel:
    from swagmodel.parser import parse_document

    return parse_document(petstore_30_raw, "petstore_3.0.yaml")


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every config and data lookup into *tmp_path*.

    Config lives in ``tmp_path/config``, crash logs in ``tmp_path/data``,
    ``SWAGMODEL_FORMAT`` is unset and the working directory (where
    ``swagmodel.json`` is looked up) is *tmp_path* itself, which is returned.
    """
    monkeypatch.setattr("swagmodel.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("SWAGMODEL_FORMAT", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def cli_runner():
    from typer.testing import CliRunner

    return CliRunner()
