"""
Jira search models.

This module provides Pydantic models for JQL search requests and results.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..base import ApiModel
from .issue import JiraIssue

logger = logging.getLogger(__name__)


class JiraSearchQuery(BaseModel):
    """
    A JQL search request as sent to ``POST /rest/api/3/search``.

    Attribute names are snake_case; the request body uses the camelCase
    names the Jira API expects.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    jql: str
    start_at: int | None = Field(default=None, alias="startAt", ge=0)
    max_results: int | None = Field(default=None, alias="maxResults", gt=0)
    fields: list[str] | None = None

    def to_request_body(self) -> dict[str, Any]:
        """Serialize to the JSON body of the search request."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_request_body(cls, body: dict[str, Any]) -> "JiraSearchQuery":
        """Parse a search request body back into a query."""
        return cls.model_validate(body)


class JiraSearchResult(ApiModel):
    """
    Model representing a Jira search (JQL) result.
    """

    total: int = 0
    start_at: int = 0
    max_results: int = 0
    issues: list[JiraIssue] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSearchResult":
        """
        Create a JiraSearchResult from a Jira API response.

        Args:
            data: The search result data from the Jira API
            **kwargs: Additional arguments to pass to the constructor

        Returns:
            A JiraSearchResult instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        issues = []
        issues_data = data.get("issues", [])
        if isinstance(issues_data, list):
            for issue_data in issues_data:
                if issue_data:
                    issues.append(JiraIssue.from_api_response(issue_data))

        try:
            total = int(data.get("total", len(issues)))
        except (ValueError, TypeError):
            total = len(issues)

        try:
            start_at = int(data.get("startAt", 0))
        except (ValueError, TypeError):
            start_at = 0

        try:
            max_results = int(data.get("maxResults", len(issues)))
        except (ValueError, TypeError):
            max_results = len(issues)

        return cls(
            total=total,
            start_at=start_at,
            max_results=max_results,
            issues=issues,
        )
