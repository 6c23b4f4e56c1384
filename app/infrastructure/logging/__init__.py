"""Structured logging infrastructure.

Centralized logging configuration and utilities for mailroom using structlog.

Public API:
    - configure_logging(): Initialize logging for the process
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module
    - bind_dispatch_context(): Context manager for dispatch-scoped logging
    - get_dispatch_id(): Get current dispatch ID from context
    - clear_dispatch_context(): Clear all bound context

Example:
    from infrastructure.logging import configure_logging, get_module_logger

    # Configured on import; call again to apply overrides
    configure_logging(is_production=True)

    # In a module
    logger = get_module_logger()
    logger.info("module_initialized")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)
from infrastructure.logging.context import (
    bind_dispatch_context,
    get_dispatch_id,
    clear_dispatch_context,
)
from infrastructure.logging.formatters import (
    mask_sensitive_data,
    truncate_large_values,
    add_environment_info,
    SENSITIVE_PATTERNS,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_logger",
    "get_module_logger",
    # Context
    "bind_dispatch_context",
    "get_dispatch_id",
    "clear_dispatch_context",
    # Formatters
    "mask_sensitive_data",
    "truncate_large_values",
    "add_environment_info",
    "SENSITIVE_PATTERNS",
]
