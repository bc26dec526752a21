"""Configuration module for List Pages."""

from .settings import config, Config, DatabaseConfig, FacetConfig, AppConfig
from .config_loader import ConfigurationError, load_facets
from .constants import (
    TOKEN_DELIMITER,
    OPERATOR_LABELS,
    MONTH_NAMES,
    CACHE_CONTEXTS,
    INDEX_TABLE,
)

__all__ = [
    "config",
    "Config",
    "DatabaseConfig",
    "FacetConfig",
    "AppConfig",
    "ConfigurationError",
    "load_facets",
    "TOKEN_DELIMITER",
    "OPERATOR_LABELS",
    "MONTH_NAMES",
    "CACHE_CONTEXTS",
    "INDEX_TABLE",
]
