"""
Jira data models for the MCP Jira server.

This package provides Pydantic models for Jira API data structures,
organized by entity type.
"""

from .common import (
    JiraIssueType,
    JiraPriority,
    JiraStatus,
    JiraStatusCategory,
    JiraUser,
)
from .epic import EpicSummaryReport, EpicTicket
from .issue import JiraIssue
from .project import JiraProject
from .search import JiraSearchQuery, JiraSearchResult

__all__ = [
    # Common models
    "JiraUser",
    "JiraStatusCategory",
    "JiraStatus",
    "JiraIssueType",
    "JiraPriority",
    # Entity-specific models
    "JiraProject",
    "JiraIssue",
    "JiraSearchQuery",
    "JiraSearchResult",
    # Epic roll-up
    "EpicTicket",
    "EpicSummaryReport",
]
