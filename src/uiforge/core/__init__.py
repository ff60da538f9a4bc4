"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import (
    ValidationError,
    ValidationResult,
    DesignValidator,
)
from .logging_config import configure_logging, get_logger, LogContext
from .json import (
    extract_json,
    safe_json_dumps,
    JSONParseError,
    validate_json_size,
    validate_json_depth,
)
from .hash import hash_string, hash_fields
from .cache import LRUCache, Stats


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "ValidationResult",
    "DesignValidator",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "extract_json",
    "safe_json_dumps",
    "JSONParseError",
    "validate_json_size",
    "validate_json_depth",
    # Hashing
    "hash_string",
    "hash_fields",
    # Caching
    "LRUCache",
    "Stats",
]
