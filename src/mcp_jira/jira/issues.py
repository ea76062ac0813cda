"""Module for Jira issue operations."""

from typing import Any
from urllib.parse import quote

from .client import JiraClient
from .constants import ISSUE_ENDPOINT


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    async def get_issue(self, issue_key: str) -> dict[str, Any]:
        """
        Get a Jira issue by key.

        Args:
            issue_key: The issue key (e.g., PROJECT-123)

        Returns:
            The issue as returned by the Jira API

        Raises:
            JiraApiError: If Jira rejects the request (e.g. unknown issue)
            JiraTransportError: If Jira cannot be reached
        """
        endpoint = ISSUE_ENDPOINT.format(issue_key=quote(issue_key, safe=""))
        issue = await self.request(endpoint)
        await self._write_diagnostic_log(f"jira-issue-{issue_key}.json", issue)
        return issue
