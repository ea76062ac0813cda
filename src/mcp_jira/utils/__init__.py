"""
Utility functions for the MCP Jira server.
"""

from .env import get_first_env, is_env_ssl_verify
from .io import timestamp_for_filename, write_diagnostic_log
from .logging import log_config_param, mask_sensitive
from .urls import extract_issue_key_from_url, extract_project_key_from_url, is_url

__all__ = [
    "extract_issue_key_from_url",
    "extract_project_key_from_url",
    "get_first_env",
    "is_env_ssl_verify",
    "is_url",
    "log_config_param",
    "mask_sensitive",
    "timestamp_for_filename",
    "write_diagnostic_log",
]
