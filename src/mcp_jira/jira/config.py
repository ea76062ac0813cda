"""Configuration module for Jira API interactions."""

import os
from dataclasses import dataclass

from ..utils.env import get_first_env, is_env_ssl_verify
from .constants import DEFAULT_DIAGNOSTICS_DIR


@dataclass
class JiraConfig:
    """Jira API configuration.

    Jira Cloud basic authentication: the account e-mail as username and an
    API token as password.
    """

    url: str  # Base URL for Jira
    username: str  # Email or username
    api_token: str  # API token
    ssl_verify: bool = True  # Whether to verify SSL certificates
    timeout: float | None = None  # Request timeout in seconds, None waits forever
    diagnostics_dir: str | None = DEFAULT_DIAGNOSTICS_DIR  # None disables dumps

    def __post_init__(self) -> None:
        self.url = self.url.rstrip("/")

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        url = get_first_env("JIRA_BASE_URL", "JIRA_URL")
        username = os.getenv("JIRA_USERNAME")
        api_token = os.getenv("JIRA_API_TOKEN")

        missing = [
            name
            for name, value in (
                ("JIRA_BASE_URL", url),
                ("JIRA_USERNAME", username),
                ("JIRA_API_TOKEN", api_token),
            )
            if not value
        ]
        if missing:
            error_msg = f"Missing required Jira environment variables: {', '.join(missing)}"
            raise ValueError(error_msg)

        timeout = None
        timeout_env = os.getenv("JIRA_TIMEOUT")
        if timeout_env:
            try:
                timeout = float(timeout_env)
            except ValueError as e:
                error_msg = f"JIRA_TIMEOUT must be a number of seconds, got {timeout_env!r}"
                raise ValueError(error_msg) from e

        # An empty JIRA_DIAGNOSTICS_DIR turns the JSON dumps off
        diagnostics_dir = os.environ.get("JIRA_DIAGNOSTICS_DIR", DEFAULT_DIAGNOSTICS_DIR)

        return cls(
            url=url,
            username=username,
            api_token=api_token,
            ssl_verify=is_env_ssl_verify("JIRA_SSL_VERIFY"),
            timeout=timeout,
            diagnostics_dir=diagnostics_dir or None,
        )
