"""URL-related utility functions for MCP Jira."""

import re

BROWSE_KEY_PATTERN = re.compile(r"/browse/([A-Z0-9]+-[0-9]+)")
ISSUES_KEY_PATTERN = re.compile(r"/issues/([A-Z0-9]+-[0-9]+)")
ANY_KEY_PATTERN = re.compile(r"([A-Z0-9]+-[0-9]+)")
PROJECTS_KEY_PATTERN = re.compile(r"/projects/([A-Z0-9]+)")


def is_url(value: str) -> bool:
    """Return True if the value looks like an http(s) URL."""
    return value.startswith(("http://", "https://"))


def extract_issue_key_from_url(url: str) -> str | None:
    """Extract a Jira issue key from a Jira web link.

    Handles ``/browse/PROJ-123`` and ``/issues/PROJ-123`` links, then falls
    back to the first key-shaped token anywhere in the URL.

    Args:
        url: The Jira issue URL

    Returns:
        The issue key, or None if no key is present
    """
    for pattern in (BROWSE_KEY_PATTERN, ISSUES_KEY_PATTERN, ANY_KEY_PATTERN):
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def extract_project_key_from_url(url: str) -> str | None:
    """Extract a Jira project key from a Jira web link.

    Args:
        url: The Jira URL

    Returns:
        The project key, or None if none can be found
    """
    match = PROJECTS_KEY_PATTERN.search(url)
    if match:
        return match.group(1)

    issue_key = extract_issue_key_from_url(url)
    if issue_key:
        return issue_key.split("-")[0]
    return None
