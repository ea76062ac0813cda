"""
Jira project models.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import JIRA_DEFAULT_ID, JIRA_DEFAULT_PROJECT, UNKNOWN
from .common import JiraUser

logger = logging.getLogger(__name__)


class JiraProject(ApiModel):
    """
    Model representing a Jira project.

    Issues embed a reduced project (key and name only), so everything but
    the key is optional.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_PROJECT
    name: str = UNKNOWN
    description: str | None = None
    lead: JiraUser | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraProject":
        """
        Create a JiraProject from a Jira API response.

        Args:
            data: The project data from the Jira API
            **kwargs: Additional context parameters

        Returns:
            A JiraProject instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        lead = None
        if data.get("lead"):
            lead = JiraUser.from_api_response(data["lead"])

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            key=str(data.get("key", JIRA_DEFAULT_PROJECT)),
            name=str(data.get("name", UNKNOWN)),
            description=data.get("description") or None,
            lead=lead,
        )
