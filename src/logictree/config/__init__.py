"""
logictree.config - Configuration loading and defaults

Configuration is layered:
1. DEFAULT_CONFIG
2. ``.logictree.toml`` found by walking up from the working directory
3. ``LOGICTREE_<SECTION>_<KEY>`` environment variables
4. The legacy ``DISABLE_TREE_LOGGING`` switch
"""

from __future__ import annotations

import copy
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import ParseError

CONFIG_FILENAME = ".logictree.toml"
ENV_PREFIX = "LOGICTREE_"
LEGACY_DISABLE_LOGGING_ENV = "DISABLE_TREE_LOGGING"

COLOR_MODES = ("auto", "always", "never")
TRANSPORTS = ("stdio", "sse")

DEFAULT_CONFIG: dict[str, dict[str, Any]] = {
    "logging": {
        "disable_tree_logging": False,
        "color": "auto",
    },
    "server": {
        "name": "logic-tree-server",
        "transport": "stdio",
    },
}


class ConfigError(ValueError):
    """Raised for unreadable or invalid configuration."""


@dataclass
class LogicTreeConfig:
    """
    Resolved configuration.

    Attributes:
        disable_tree_logging: Suppress the stderr echo of visualize_tree
        color: ANSI color mode for the stderr echo ("auto", "always", "never")
        server_name: Name announced by the MCP server
        transport: Default MCP transport ("stdio" or "sse")
        config_path: File the settings were read from, if any
    """

    disable_tree_logging: bool = False
    color: str = "auto"
    server_name: str = "logic-tree-server"
    transport: str = "stdio"
    config_path: Path | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], config_path: Path | None = None) -> LogicTreeConfig:
        """
        Create LogicTreeConfig from a merged configuration dictionary.

        Raises:
            ConfigError: If a value has the wrong type or is not allowed
        """
        logging_section = data.get("logging", {})
        server_section = data.get("server", {})

        disable = logging_section.get("disable_tree_logging", False)
        if not isinstance(disable, bool):
            raise ConfigError(
                f"logging.disable_tree_logging must be a boolean, got {disable!r}"
            )
        color = logging_section.get("color", "auto")
        if color not in COLOR_MODES:
            raise ConfigError(f"logging.color must be one of {', '.join(COLOR_MODES)}")
        transport = server_section.get("transport", "stdio")
        if transport not in TRANSPORTS:
            raise ConfigError(f"server.transport must be one of {', '.join(TRANSPORTS)}")

        return cls(
            disable_tree_logging=disable,
            color=color,
            server_name=str(server_section.get("name", "logic-tree-server")),
            transport=transport,
            config_path=config_path,
        )

    def use_color(self, is_tty: bool) -> bool:
        """Resolve the color mode against the output stream."""
        if self.color == "always":
            return True
        if self.color == "never":
            return False
        return is_tty

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {
            "logging": {
                "disable_tree_logging": self.disable_tree_logging,
                "color": self.color,
            },
            "server": {
                "name": self.server_name,
                "transport": self.transport,
            },
        }


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Walk up from start_path looking for .logictree.toml."""
    current = (start_path or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config_file(path: Path) -> dict[str, Any]:
    """Parse a TOML config file into plain dicts.

    Raises:
        ConfigError: If the file is not valid TOML
    """
    try:
        document = tomlkit.parse(path.read_text(encoding="utf-8"))
    except ParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    return document.unwrap()


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def _try_parse_env_value(value: str) -> Any:
    """Parse an environment value into a typed Python value.

    JSON arrays/objects and true/false are converted; everything else,
    malformed JSON included, is returned as the raw string.
    """
    stripped = value.strip()
    if stripped.lower() == "true":
        return True
    if stripped.lower() == "false":
        return False
    if stripped.startswith(("[", "{")):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return value
    return value


def _apply_env_overrides(config: dict[str, Any], environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Apply LOGICTREE_<SECTION>_<KEY> and legacy overrides to config."""
    env = os.environ if environ is None else environ
    result = copy.deepcopy(config)

    for name, raw in env.items():
        if not name.startswith(ENV_PREFIX):
            continue
        section, _, key = name[len(ENV_PREFIX) :].lower().partition("_")
        if not section or not key:
            continue
        result.setdefault(section, {})[key] = _try_parse_env_value(raw)

    if env.get(LEGACY_DISABLE_LOGGING_ENV, "").lower() == "true":
        result.setdefault("logging", {})["disable_tree_logging"] = True

    return result


def get_config(start_path: Path | None = None, environ: dict[str, str] | None = None) -> LogicTreeConfig:
    """Load the effective configuration.

    Args:
        start_path: Directory to start the config file search from
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Resolved LogicTreeConfig
    """
    data = copy.deepcopy(DEFAULT_CONFIG)
    config_path = find_config_file(start_path)
    if config_path is not None:
        data = merge_configs(data, load_config_file(config_path))
    data = _apply_env_overrides(data, environ)
    return LogicTreeConfig.from_dict(data, config_path=config_path)


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "ConfigError",
    "LogicTreeConfig",
    "find_config_file",
    "get_config",
    "load_config_file",
    "merge_configs",
]
