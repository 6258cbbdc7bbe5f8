"""Load and merge configuration from .imgreview.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from imgreview.config.schema import (
    LOG_LEVELS,
    OUTPUT_FORMATS,
    GitConfig,
    HistoryConfig,
    LoggingConfig,
    OutputConfig,
    ReviewConfig,
)

CONFIG_FILENAME = ".imgreview.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: ReviewConfig) -> None:
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"Invalid output format: {cfg.output.format}")
    if cfg.logging.level.upper() not in LOG_LEVELS:
        raise ConfigError(f"Invalid log level: {cfg.logging.level}")
    limit = cfg.history.limit
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise ConfigError(f"history.limit must be a non-negative integer: {cfg.history.limit}")
    timeout = cfg.git.timeout
    if timeout is not None and (
        isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0
    ):
        raise ConfigError(f"git.timeout must be positive: {cfg.git.timeout}")


def _merge_env_overrides(cfg: ReviewConfig) -> None:
    """Apply IMGREVIEW_* environment variable overrides; bad values are ignored."""
    if val := os.environ.get("IMGREVIEW_GIT"):
        cfg.git.executable = val
    if val := os.environ.get("IMGREVIEW_TIMEOUT"):
        try:
            timeout = float(val)
        except ValueError:
            pass
        else:
            if timeout > 0:
                cfg.git.timeout = timeout
    if val := os.environ.get("IMGREVIEW_HISTORY_LIMIT"):
        try:
            limit = int(val)
        except ValueError:
            pass
        else:
            if limit >= 0:
                cfg.history.limit = limit
    if val := os.environ.get("IMGREVIEW_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("IMGREVIEW_LOG_LEVEL"):
        if val.upper() in LOG_LEVELS:
            cfg.logging.level = val.upper()


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> ReviewConfig:
    """Load, validate, and return a ReviewConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = ReviewConfig()
    else:
        raw = _parse_toml(config_path)
        try:
            cfg = ReviewConfig(
                git=_build_section(raw, GitConfig, "git"),
                history=_build_section(raw, HistoryConfig, "history"),
                output=_build_section(raw, OutputConfig, "output"),
                logging=_build_section(raw, LoggingConfig, "logging"),
            )
        except TypeError as exc:
            raise ConfigError(f"Invalid config in {config_path}: {exc}") from exc
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
