"""
Pydantic models for Jira API responses and the reports built from them.
"""

from .base import ApiModel
from .jira import (
    EpicSummaryReport,
    EpicTicket,
    JiraIssue,
    JiraIssueType,
    JiraPriority,
    JiraProject,
    JiraSearchQuery,
    JiraSearchResult,
    JiraStatus,
    JiraStatusCategory,
    JiraUser,
)

__all__ = [
    "ApiModel",
    "EpicSummaryReport",
    "EpicTicket",
    "JiraIssue",
    "JiraIssueType",
    "JiraPriority",
    "JiraProject",
    "JiraSearchQuery",
    "JiraSearchResult",
    "JiraStatus",
    "JiraStatusCategory",
    "JiraUser",
]
