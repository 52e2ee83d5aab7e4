"""Configuration package for runtime-metrics.

Sub-modules:
    parsing  – Boolean, log-level and docs-format parsing helpers
    settings – CatalogSettings dataclass, get_config/set_config globals
"""

from runtime_metrics.config.parsing import (  # noqa: F401
    _normalize_docs_format,
    _normalize_log_level,
    _try_parse_bool,
)
from runtime_metrics.config.settings import (  # noqa: F401
    CONFIG_FILE_ENV_VAR,
    CatalogSettings,
    get_config,
    set_config,
)

__all__ = [
    "CONFIG_FILE_ENV_VAR",
    "CatalogSettings",
    "get_config",
    "set_config",
]
