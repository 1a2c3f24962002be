"""Load [tool.stylecheck] from pyproject.toml.

    [tool.stylecheck]
    indent-width = 4
    documented-kinds = ["function"]
    disable = ["missing-doc"]
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path

from stylecheck.domain.exceptions import ConfigError
from stylecheck.domain.model.configuration import StyleConfig
from stylecheck.domain.model.enums import DeclarationKind, RuleId

logger = logging.getLogger(__name__)

PYPROJECT = "pyproject.toml"
SECTION = "stylecheck"

_KNOWN_KEYS = frozenset({"indent-width", "documented-kinds", "disable"})


def find_pyproject(start: Path | None = None) -> Path | None:
    """Find the nearest pyproject.toml from start upwards.

    Args:
        start: Directory to start from (default: cwd)

    Returns:
        Path to pyproject.toml, or None if there is none up to the root
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT
        if candidate.is_file():
            return candidate
    return None


def _string_list(section: Mapping[str, object], key: str) -> list[str]:
    value = section.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(key, f"must be a list of strings, got {value!r}")
    return value


def _kinds(values: list[str]) -> frozenset[DeclarationKind]:
    try:
        return frozenset(DeclarationKind(v.lower()) for v in values)
    except ValueError as exc:
        raise ConfigError("documented-kinds", str(exc)) from exc


def _rules(values: list[str]) -> frozenset[RuleId]:
    try:
        return frozenset(RuleId(v.lower()) for v in values)
    except ValueError as exc:
        raise ConfigError("disable", str(exc)) from exc


def config_from_mapping(section: Mapping[str, object]) -> StyleConfig:
    """Build StyleConfig from a [tool.stylecheck] table.

    Missing keys keep their defaults.

    Args:
        section: Parsed TOML table

    Returns:
        Validated StyleConfig

    Raises:
        ConfigError: Unknown key or invalid value
    """
    unknown = sorted(set(section) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(unknown[0], "unknown key")

    kwargs: dict[str, object] = {}

    if "indent-width" in section:
        kwargs["indent_width"] = section["indent-width"]
    if "documented-kinds" in section:
        kwargs["documented_kinds"] = _kinds(_string_list(section, "documented-kinds"))
    if "disable" in section:
        kwargs["disabled_rules"] = _rules(_string_list(section, "disable"))

    try:
        return StyleConfig(**kwargs)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ConfigError(SECTION, str(exc)) from exc


def load_config(path: Path | None = None, *, start: Path | None = None) -> StyleConfig:
    """Load configuration from a TOML file.

    Args:
        path: Explicit TOML file. If None, the nearest pyproject.toml
            from start is used; no file means default config.
        start: Directory to search from (default: cwd)

    Returns:
        StyleConfig

    Raises:
        ConfigError: File unreadable, invalid TOML or invalid values
    """
    if path is None:
        path = find_pyproject(start)
        if path is None:
            logger.debug("no %s found, using defaults", PYPROJECT)
            return StyleConfig()

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except OSError as exc:
        raise ConfigError(str(path), f"cannot read: {exc.strerror or exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(str(path), f"invalid TOML: {exc}") from exc

    tool = data.get("tool", {})
    section = tool.get(SECTION, {}) if isinstance(tool, dict) else {}
    if not isinstance(section, dict):
        raise ConfigError(SECTION, "must be a table")

    logger.debug("loaded [tool.%s] from %s", SECTION, path)
    return config_from_mapping(section)
