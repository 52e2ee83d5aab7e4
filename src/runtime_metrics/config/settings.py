"""CatalogSettings dataclass, loading logic and global configuration state.

Settings only affect the introspection tooling (logging and docs rendering);
the catalog itself has nothing to configure.
"""

from __future__ import annotations

import json
import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from runtime_metrics.config.parsing import (
    _normalize_docs_format,
    _normalize_log_level,
    _try_parse_bool,
)
from runtime_metrics.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV_VAR = "RUNTIME_METRICS_CONFIG_FILE"
TOML_SECTION = "runtime_metrics"
PROJECT_CONFIG_NAME = "runtime-metrics.toml"

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
class _JsonLineFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


_installed_handler: Optional[logging.Handler] = None


@dataclass
class CatalogSettings:
    """Settings for the runtime-metrics tooling.

    Attributes:
        log_level: Level for the ``runtime_metrics`` logger hierarchy
        structured_logging: Emit log records as JSON lines
        docs_format: Default format for rendered docs ("text" or "markdown")
    """

    log_level: str = "WARNING"
    structured_logging: bool = False
    docs_format: str = "text"

    @classmethod
    def from_toml_dict(cls, data: Dict[str, Any]) -> "CatalogSettings":
        """Create settings from a TOML dict (the [runtime_metrics] table).

        Args:
            data: Dict from TOML parsing

        Returns:
            CatalogSettings instance
        """
        settings = cls()
        settings._apply(data, source="TOML")
        return settings

    @classmethod
    def from_env(cls, config_file: Optional[str] = None) -> "CatalogSettings":
        """
        Create settings from environment variables and optional TOML files.

        Priority (highest to lowest):
        1. Environment variables
        2. Explicit config file (argument or RUNTIME_METRICS_CONFIG_FILE)
        3. Project config (./runtime-metrics.toml)
        4. XDG config (~/.config/runtime-metrics/config.toml)
        5. Default values

        Raises:
            ConfigError: If an explicitly requested config file cannot be parsed.
        """
        settings = cls()

        toml_path = config_file or os.environ.get(CONFIG_FILE_ENV_VAR)
        if toml_path:
            settings._load_toml(Path(toml_path), strict=True)
        else:
            xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
            xdg_config = Path(xdg_config_home) / "runtime-metrics" / "config.toml"
            if xdg_config.exists():
                settings._load_toml(xdg_config)
                logger.debug(f"Loaded XDG config from {xdg_config}")

            project_config = Path(PROJECT_CONFIG_NAME)
            if project_config.exists():
                settings._load_toml(project_config)
                logger.debug(f"Loaded project config from {project_config}")

        settings._load_env()
        return settings

    def _apply(self, data: Dict[str, Any], *, source: str) -> None:
        if "log_level" in data:
            self.log_level = _normalize_log_level(data["log_level"], self.log_level)
        if "structured_logging" in data:
            parsed = _try_parse_bool(data["structured_logging"])
            if parsed is None:
                logger.warning(
                    "Ignoring structured_logging from %s: value must be boolean-compatible, got %r",
                    source,
                    data["structured_logging"],
                )
            else:
                self.structured_logging = parsed
        if "docs_format" in data:
            self.docs_format = _normalize_docs_format(data["docs_format"], self.docs_format)

    def _load_toml(self, path: Path, strict: bool = False) -> None:
        """Load settings from the [runtime_metrics] table of a TOML file."""
        if not path.exists():
            logger.warning(f"Config file not found: {path}")
            return

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            if strict:
                raise ConfigError(f"Error loading config file {path}: {e}", path=path, reason=str(e)) from e
            logger.error(f"Error loading config file {path}: {e}")
            return

        section = data.get(TOML_SECTION, {})
        if not isinstance(section, dict):
            logger.warning(f"Ignoring [{TOML_SECTION}] in {path}: expected a table")
            return
        self._apply(section, source=str(path))

    def _load_env(self) -> None:
        """Load settings from environment variables."""
        env: Dict[str, Any] = {}
        if level := os.environ.get("RUNTIME_METRICS_LOG_LEVEL"):
            env["log_level"] = level
        if structured := os.environ.get("RUNTIME_METRICS_STRUCTURED_LOGGING"):
            env["structured_logging"] = structured
        if docs_format := os.environ.get("RUNTIME_METRICS_DOCS_FORMAT"):
            env["docs_format"] = docs_format
        self._apply(env, source="environment")

    def setup_logging(self) -> None:
        """Configure the ``runtime_metrics`` logger hierarchy to write to stderr.

        Calling this again replaces the handler installed by the previous call.
        """
        global _installed_handler
        level = getattr(logging, self.log_level, logging.WARNING)
        formatter: logging.Formatter
        if self.structured_logging:
            formatter = _JsonLineFormatter()
        else:
            formatter = logging.Formatter(_LOG_FORMAT)

        handler = logging.StreamHandler()
        handler.setFormatter(formatter)

        root_logger = logging.getLogger("runtime_metrics")
        if _installed_handler is not None:
            root_logger.removeHandler(_installed_handler)
        root_logger.setLevel(level)
        root_logger.addHandler(handler)
        _installed_handler = handler


# Global configuration instance
_config: Optional[CatalogSettings] = None


def get_config() -> CatalogSettings:
    """Get the global settings instance."""
    global _config
    if _config is None:
        _config = CatalogSettings.from_env()
    return _config


def set_config(config: Optional[CatalogSettings]) -> None:
    """Set (or, with None, reset) the global settings instance."""
    global _config
    _config = config
