"""Core utilities and infrastructure."""

from .config import DEFAULT_MAX_FORM_ID, Settings, get_settings
from .logging_config import configure_logging, get_logger, LogContext
from .json import (
    JSONParseError,
    dumps,
    loads,
    loads_object,
    validate_json_size,
    validate_json_depth,
)


def create_container(transport=None, settings=None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(transport, settings)


__all__ = [
    # Config
    "DEFAULT_MAX_FORM_ID",
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "JSONParseError",
    "dumps",
    "loads",
    "loads_object",
    "validate_json_size",
    "validate_json_depth",
    # DI
    "create_container",
]
