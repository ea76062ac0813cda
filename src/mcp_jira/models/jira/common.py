"""
Common Jira entity models.

Small models shared by issues and projects: users, statuses, issue types
and priorities.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, UNKNOWN

logger = logging.getLogger(__name__)


class JiraUser(ApiModel):
    """
    Model representing a Jira user.
    """

    account_id: str | None = None
    display_name: str | None = None
    email: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraUser":
        """
        Create a JiraUser from a Jira API response.

        Args:
            data: The user data from the Jira API
            **kwargs: Additional context parameters

        Returns:
            A JiraUser instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            account_id=data.get("accountId"),
            display_name=data.get("displayName"),
            email=data.get("emailAddress"),
        )


class JiraStatusCategory(ApiModel):
    """
    Model representing a Jira status category (To Do, In Progress, Done).
    """

    key: str = EMPTY_STRING
    name: str = UNKNOWN

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraStatusCategory":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            key=str(data.get("key", EMPTY_STRING)),
            name=str(data.get("name", UNKNOWN)),
        )


class JiraStatus(ApiModel):
    """
    Model representing a Jira issue status.
    """

    name: str = UNKNOWN
    category: JiraStatusCategory | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraStatus":
        if not data or not isinstance(data, dict):
            return cls()

        category = None
        if data.get("statusCategory"):
            category = JiraStatusCategory.from_api_response(data["statusCategory"])

        return cls(name=str(data.get("name", UNKNOWN)), category=category)


class JiraIssueType(ApiModel):
    """
    Model representing a Jira issue type.
    """

    id: str | None = None
    name: str = UNKNOWN
    icon_url: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueType":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=data.get("id"),
            name=str(data.get("name", UNKNOWN)),
            icon_url=data.get("iconUrl"),
        )


class JiraPriority(ApiModel):
    """
    Model representing a Jira priority.
    """

    id: str | None = None
    name: str | None = None
    icon_url: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraPriority":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=data.get("id"),
            name=data.get("name"),
            icon_url=data.get("iconUrl"),
        )
