"""Environment variable utility functions for MCP Jira."""

import os


def is_env_ssl_verify(env_var_name: str, default: str = "true") -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to false values.

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True unless explicitly set to false values
    """
    return os.getenv(env_var_name, default).lower() not in ("false", "0", "no")


def get_first_env(*env_var_names: str) -> str | None:
    """Return the first non-empty value among several environment variables."""
    for name in env_var_names:
        value = os.getenv(name)
        if value:
            return value
    return None
