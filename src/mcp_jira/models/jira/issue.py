"""
Jira issue models.

This module provides the Pydantic model for Jira issues.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, JIRA_DEFAULT_KEY
from .common import JiraIssueType, JiraPriority, JiraStatus, JiraUser
from .project import JiraProject

logger = logging.getLogger(__name__)


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue.

    Only the fields the server reasons about are modelled; the remaining
    payload of the API response is never inspected.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    # Cloud (v3) returns Atlassian Document Format, Server returns plain text
    description: str | dict[str, Any] | None = None
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING
    status: JiraStatus | None = None
    issue_type: JiraIssueType | None = None
    priority: JiraPriority | None = None
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    project: JiraProject | None = None
    labels: list[str] = Field(default_factory=list)
    components: list[str] = Field(default_factory=list)
    fix_versions: list[str] = Field(default_factory=list)
    due_date: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data from the Jira API
            **kwargs: Additional context parameters

        Returns:
            A JiraIssue instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        fields = data.get("fields", {}) or {}

        status = None
        if fields.get("status"):
            status = JiraStatus.from_api_response(fields["status"])

        issue_type = None
        if fields.get("issuetype"):
            issue_type = JiraIssueType.from_api_response(fields["issuetype"])

        priority = None
        if fields.get("priority"):
            priority = JiraPriority.from_api_response(fields["priority"])

        assignee = None
        if fields.get("assignee"):
            assignee = JiraUser.from_api_response(fields["assignee"])

        reporter = None
        if fields.get("reporter"):
            reporter = JiraUser.from_api_response(fields["reporter"])

        project = None
        if fields.get("project"):
            project = JiraProject.from_api_response(fields["project"])

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            key=str(data.get("key", JIRA_DEFAULT_KEY)),
            summary=str(fields.get("summary") or EMPTY_STRING),
            description=fields.get("description"),
            created=str(fields.get("created") or EMPTY_STRING),
            updated=str(fields.get("updated") or EMPTY_STRING),
            status=status,
            issue_type=issue_type,
            priority=priority,
            assignee=assignee,
            reporter=reporter,
            project=project,
            labels=[str(label) for label in fields.get("labels") or []],
            components=_names(fields.get("components")),
            fix_versions=_names(fields.get("fixVersions")),
            due_date=fields.get("duedate"),
        )


def _names(items: list[dict[str, Any]] | None) -> list[str]:
    """Collect the ``name`` of each named entity in a list field."""
    if not items:
        return []
    return [
        str(item["name"]) for item in items if isinstance(item, dict) and "name" in item
    ]
