"""Module for Jira project and issue type operations."""

from typing import Any

from .client import JiraClient
from .constants import ISSUE_TYPE_ENDPOINT, PROJECT_ENDPOINT


class ProjectsMixin(JiraClient):
    """Mixin for Jira project operations."""

    async def get_projects(self) -> list[dict[str, Any]]:
        """Get all projects visible to the authenticated user.

        Returns:
            The project list as returned by the Jira API
        """
        return await self.request(PROJECT_ENDPOINT)

    async def get_issue_types(self) -> Any:
        """Get all issue types visible to the authenticated user.

        Returns:
            The issue types as returned by the Jira API
        """
        return await self.request(ISSUE_TYPE_ENDPOINT)
