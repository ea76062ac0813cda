"""Helpers for logging configuration values."""

import logging

SENSITIVE_PLACEHOLDER = "********"


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask all but the last ``keep_chars`` characters of a secret.

    Args:
        value: The secret to mask
        keep_chars: Number of trailing characters left visible

    Returns:
        The masked value, or ``"Not Provided"`` when empty
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return SENSITIVE_PLACEHOLDER
    return f"{SENSITIVE_PLACEHOLDER}{value[-keep_chars:]}"


def log_config_param(
    logger: logging.Logger,
    service: str,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Log a configuration parameter, masking it if sensitive.

    Args:
        logger: The logger to use
        service: The service name (e.g., 'Jira')
        param: The parameter name
        value: The parameter value
        sensitive: Whether the value should be masked
    """
    display_value = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.info(f"{service} {param}: {display_value}")
