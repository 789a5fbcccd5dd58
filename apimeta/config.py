"""Configuration loading for apimeta (.apimeta.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import DEFAULT_EXTENSION_PREFIX

_CONFIG_NAME = ".apimeta.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ExtensionConfig:
    """Vendor extension settings."""

    prefix: str = DEFAULT_EXTENSION_PREFIX


@dataclass
class ResponseConfig:
    """Defaults for response registration."""

    override_existing: bool = True
    warn_unknown_status: bool = False


@dataclass
class LoggingConfig:
    """Logging sink settings."""

    verbose: bool = False
    log_file: Optional[Path] = None


@dataclass
class ApiMetaConfig:
    """Represents the settings defined in .apimeta.yml."""

    root: Optional[Path] = None
    extensions: ExtensionConfig = field(default_factory=ExtensionConfig)
    responses: ResponseConfig = field(default_factory=ResponseConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Path) -> ApiMetaConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ApiMetaConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{_CONFIG_NAME} must contain a mapping at the root")

    extensions = ExtensionConfig()
    extension_data = _as_dict(data.get("extensions"))
    prefix = _as_str(extension_data.get("prefix"))
    if prefix is not None:
        if not prefix:
            raise ConfigError("extensions.prefix must not be empty")
        extensions.prefix = prefix

    responses = ResponseConfig()
    response_data = _as_dict(data.get("responses"))
    override = _as_bool(response_data.get("override_existing"))
    if override is not None:
        responses.override_existing = override
    warn = _as_bool(response_data.get("warn_unknown_status"))
    if warn is not None:
        responses.warn_unknown_status = warn

    logging_config = LoggingConfig()
    logging_data = _as_dict(data.get("logging"))
    logging_config.verbose = _as_bool(logging_data.get("verbose")) or False
    log_file = _as_str(logging_data.get("log_file"))
    if log_file:
        logging_config.log_file = root / log_file

    return ApiMetaConfig(
        root=root,
        extensions=extensions,
        responses=responses,
        logging=logging_config,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / _CONFIG_NAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "ApiMetaConfig",
    "ConfigError",
    "ExtensionConfig",
    "LoggingConfig",
    "ResponseConfig",
    "load_config",
]
