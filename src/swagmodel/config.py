"""Where swagmodel keeps its settings, and how they are layered.

Settings are small: the default output format and the filename recorded for
documents read from stdin.  They come from, lowest precedence first:

1. built-in defaults (:class:`~swagmodel.models.GlobalConfig`),
2. the user file ``config.json`` in :func:`get_config_dir`,
3. ``./swagmodel.json`` in the working directory (``output`` and ``parser``
   sections only),
4. the ``SWAGMODEL_FORMAT`` environment variable,
5. ``--json`` / ``--plain`` on the command line.

Directories follow the XDG Base Directory layout on Linux and the BSDs and
fall back to ``~/.swagmodel`` elsewhere.
"""

from __future__ import annotations

import json
import os
import platform
from pathlib import Path
from typing import Any, Optional

from swagmodel.exceptions import ConfigError
from swagmodel.models import GlobalConfig

_APP_NAME = "swagmodel"
_CONFIG_FILENAME = "config.json"
_PROJECT_CONFIG_FILENAME = "swagmodel.json"
_FORMAT_ENV_VAR = "SWAGMODEL_FORMAT"

OUTPUT_FORMATS = ("auto", "json", "plain", "rich")


def _is_xdg_platform() -> bool:
    system = platform.system()
    return system == "Linux" or system.endswith("BSD")


def _fallback_base_dir() -> Path:
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """``$env_var`` when set and non-empty, else ``~/<default_segments>``."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    return Path.home().joinpath(*default_segments)


def get_config_dir() -> Path:
    """Directory holding ``config.json``; created on first use.

    ``$XDG_CONFIG_HOME/swagmodel`` (default ``~/.config/swagmodel``) on XDG
    platforms, ``~/.swagmodel`` elsewhere.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Directory for crash logs; created on first use.

    ``$XDG_DATA_HOME/swagmodel`` (default ``~/.local/share/swagmodel``) on XDG
    platforms, ``~/.swagmodel/logs`` elsewhere.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


def _read_json(path: Path, label: str) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Invalid {label} config at {path}: {exc}") from exc


def load_global_config() -> GlobalConfig:
    """Read the user's ``config.json``, or return defaults when there is none.

    Raises:
        ConfigError: If the file is not valid JSON or does not match
            :class:`~swagmodel.models.GlobalConfig`.
    """
    path = get_config_dir() / _CONFIG_FILENAME
    if not path.is_file():
        return GlobalConfig()
    data = _read_json(path, "global")
    try:
        return GlobalConfig.model_validate(data)
    except ValueError as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


def load_project_config() -> Optional[dict[str, Any]]:
    """Read ``./swagmodel.json`` as a raw dict, or ``None`` when absent.

    Raises:
        ConfigError: If the file is not valid JSON or not a JSON object.
    """
    path = Path.cwd() / _PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    data = _read_json(path, "project")
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid project config at {path}: expected a JSON object")
    return data


def resolve_config(cli_format: Optional[str] = None) -> GlobalConfig:
    """Layer every settings source into one :class:`GlobalConfig`.

    Args:
        cli_format: Output format forced on the command line, if any.

    Raises:
        ConfigError: If a config file is invalid or the resulting output
            format is not one of :data:`OUTPUT_FORMATS`.
    """
    config = load_global_config()

    project = load_project_config()
    if project is not None:
        merged = config.model_dump()
        for section in ("output", "parser"):
            if isinstance(project.get(section), dict):
                merged[section].update(project[section])
        try:
            config = GlobalConfig.model_validate(merged)
        except ValueError as exc:
            raise ConfigError(f"Invalid project config: {exc}") from exc

    env_format = os.environ.get(_FORMAT_ENV_VAR)
    if env_format:
        config.output.format = env_format
    if cli_format is not None:
        config.output.format = cli_format

    if config.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Unknown output format '{config.output.format}'. "
            f"Choose one of: {', '.join(OUTPUT_FORMATS)}"
        )
    return config
