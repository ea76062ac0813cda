"""Module for Jira search operations."""

import logging
from typing import Any

from ..models.jira import JiraSearchQuery
from ..utils.io import timestamp_for_filename
from . import jql
from .client import JiraClient
from .constants import SEARCH_ENDPOINT

logger = logging.getLogger("mcp-jira.search")


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    async def search_issues(self, query: JiraSearchQuery) -> dict[str, Any]:
        """
        Search for issues using JQL (Jira Query Language).

        Args:
            query: The JQL query, result cap and field selection

        Returns:
            The search result as returned by the Jira API
            (``startAt``, ``maxResults``, ``total``, ``issues``)

        Raises:
            JiraApiError: If Jira rejects the query
            JiraTransportError: If Jira cannot be reached
        """
        logger.debug(f"Searching with JQL: {query.jql}")
        result = await self.request(
            SEARCH_ENDPOINT, method="POST", data=query.to_request_body()
        )
        await self._write_diagnostic_log(
            f"jira-search-{timestamp_for_filename()}.json", result
        )
        return result

    async def get_assigned_issues(
        self, project_key: str | None = None, max_results: int | None = None
    ) -> dict[str, Any]:
        """Get issues assigned to the current user, optionally in one project."""
        return await self.search_issues(
            jql.assigned_to_current_user(project_key, max_results)
        )

    async def get_issues_by_type(
        self,
        issue_type: str,
        project_key: str | None = None,
        max_results: int | None = None,
    ) -> dict[str, Any]:
        """Get issues of a given type, optionally in one project."""
        return await self.search_issues(
            jql.issues_by_type(issue_type, project_key, max_results)
        )
