"""Structlog processors used by the logging setup.

Usage:
    from infrastructure.logging.formatters import mask_sensitive_data

    configure_logging(extra_processors=[mask_sensitive_data(mask_value="***")])
"""

import re
from typing import Any, Mapping

# Key fragments whose values must never reach the logs
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "api_key",
        "apikey",
        "authorization",
        "credential",
        "private_key",
        "cookie",
        "bearer",
    }
)

# Slack bot, user, app and refresh tokens
SLACK_TOKEN_RE = re.compile(r"\bxox[abeprs]-[A-Za-z0-9-]+")


def _is_sensitive_key(key: str, patterns: frozenset[str]) -> bool:
    key_lower = key.lower()
    return any(p in key_lower for p in patterns)


def _mask(value: Any, patterns: frozenset[str], mask_value: str) -> Any:
    if isinstance(value, Mapping):
        return {
            k: (
                mask_value
                if v is not None and _is_sensitive_key(str(k), patterns)
                else _mask(v, patterns, mask_value)
            )
            for k, v in value.items()
        }
    if isinstance(value, str):
        return SLACK_TOKEN_RE.sub(mask_value, value)
    return value


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: frozenset[str] | None = None,
):
    """Create a processor that masks secrets in log entries.

    Values of sensitive-looking keys are replaced (case-insensitive substring
    match, so ``SLACK_TOKEN`` and ``slack_token`` both match). Nested dicts,
    such as Slack message options, are masked the same way, and Slack tokens
    embedded in any string value (error messages, ...) are masked wherever
    they appear.

    Args:
        mask_value: The string to replace sensitive values with.
        additional_patterns: Extra key patterns to consider sensitive.

    Returns:
        A structlog processor function.
    """
    patterns = SENSITIVE_PATTERNS
    if additional_patterns:
        patterns = patterns | additional_patterns

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        return _mask(event_dict, patterns, mask_value)

    return processor


def truncate_large_values(max_length: int = 500):
    """Create a processor that truncates overly long string values.

    Rendered notification bodies can be large; this keeps log lines bounded.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = f"{value[:max_length]}...({len(value)} chars)"
        return event_dict

    return processor


def add_environment_info(environment: str):
    """Create a processor that adds the deployment environment to log entries."""

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["environment"] = environment
        return event_dict

    return processor
