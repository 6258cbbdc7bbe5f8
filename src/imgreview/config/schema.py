"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

OutputFormat = Literal["terminal", "json"]
LogFormat = Literal["console", "json"]

OUTPUT_FORMATS = ("terminal", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GitConfig:
    executable: str = "git"
    timeout: Optional[float] = None  # seconds; None waits indefinitely


@dataclass
class HistoryConfig:
    limit: int = 50


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    format: LogFormat = "console"


@dataclass
class ReviewConfig:
    git: GitConfig = field(default_factory=GitConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
