"""Reading documents into plain dictionaries.

A source is ``-`` (stdin), an ``http://``/``https://`` URL or a local path.
Content is decoded as JSON or YAML; the file suffix or the response
``content-type`` decides which is tried first.  Nothing outside this module
touches the network or the filesystem on behalf of the parser.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import httpx
import yaml

from swagmodel.exceptions import SpecLoadError

logger = logging.getLogger(__name__)

_URL_PREFIXES = ("http://", "https://")
_SUFFIX_HINTS = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}
_FETCH_TIMEOUT = 30.0


def load_spec(source: str) -> dict[str, Any]:
    """Read and decode the document named by *source*.

    Args:
        source: ``-`` for stdin, an HTTP(S) URL, or a file path.

    Raises:
        SpecLoadError: If the source is unreadable, empty, not JSON/YAML, or
            does not decode to an object.
    """
    if source == "-":
        return _read_stdin()
    if source.startswith(_URL_PREFIXES):
        return _fetch(source)
    return _read_file(Path(source))


def source_filename(source: str) -> str:
    """Name recorded as :attr:`~swagmodel.models.ApiModel.filename`.

    The last URL path segment (or the host when the path is empty), the base
    name of a file, and ``""`` for stdin.
    """
    if source == "-":
        return ""
    if source.startswith(_URL_PREFIXES):
        parts = urlparse(source)
        return parts.path.rstrip("/").rsplit("/", 1)[-1] or parts.netloc
    return Path(source).name


def _read_stdin() -> dict[str, Any]:
    try:
        content = sys.stdin.read()
    except (OSError, ValueError) as exc:
        raise SpecLoadError(f"Failed to read from stdin: {exc}") from exc
    if not content.strip():
        raise SpecLoadError("No input received from stdin")
    return _parse_content(content)


def _fetch(url: str) -> dict[str, Any]:
    logger.debug("Fetching %s", url)
    try:
        response = httpx.get(url, timeout=_FETCH_TIMEOUT, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SpecLoadError(
            f"HTTP {exc.response.status_code} fetching document from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise SpecLoadError(f"Failed to fetch document from {url}: {exc}") from exc

    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        hint = "json"
    elif "yaml" in content_type or "yml" in content_type:
        hint = "yaml"
    else:
        hint = ""
    return _parse_content(response.text, hint=hint)


def _read_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise SpecLoadError(f"Document not found: {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SpecLoadError(f"Failed to read document {path}: {exc}") from exc
    if not content.strip():
        raise SpecLoadError(f"Document is empty: {path}")
    return _parse_content(content, hint=_SUFFIX_HINTS.get(path.suffix.lower(), ""))


def _require_object(value: Any) -> dict[str, Any]:
    if isinstance(value, dict):
        return value
    found = "empty document" if value is None else type(value).__name__
    raise SpecLoadError(f"Document must be a JSON/YAML object (got {found})")


def _parse_content(content: str, hint: str = "") -> dict[str, Any]:
    """Decode *content*, trying JSON before YAML unless *hint* is ``"yaml"``.

    With ``hint="json"`` a JSON syntax error is final.

    Raises:
        SpecLoadError: If neither decoder accepts the content, or the result
            is not an object.
    """
    json_error = None
    if hint != "yaml":
        try:
            return _require_object(json.loads(content))
        except json.JSONDecodeError as exc:
            if hint == "json":
                raise SpecLoadError(f"Invalid JSON: {exc}") from exc
            json_error = exc

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        details = [f"  YAML error: {exc}"]
        if json_error is not None:
            details.insert(0, f"  JSON error: {json_error}")
        raise SpecLoadError(
            "\n".join(["Failed to decode document as JSON or YAML", *details])
        ) from exc
    return _require_object(data)
