"""
Epic roll-up models.

``EpicSummaryReport`` is built by ``mcp_jira.jira.epics.summarize_epic_issues``
from an epic and its child issues.
"""

import math
from typing import Any

from pydantic import Field

from ..base import ApiModel
from .issue import JiraIssue


class EpicTicket(ApiModel):
    """Compact record of a child issue that is not done yet."""

    key: str
    summary: str
    status: str
    type: str
    priority: str
    assignee: str | None = None

    def to_simplified_dict(self) -> dict[str, Any]:
        # assignee stays in the output as null when unassigned
        return self.model_dump()


class EpicSummaryReport(ApiModel):
    """Counts and groupings over all child issues of an epic."""

    epic: JiraIssue
    total_issues: int = 0
    done_issues: int = 0
    non_done_issues: int = 0
    unassigned_issues: int = 0
    issues_by_status: dict[str, int] = Field(default_factory=dict)
    issues_by_type: dict[str, int] = Field(default_factory=dict)
    issues_by_priority: dict[str, int] = Field(default_factory=dict)
    non_done_tickets: list[EpicTicket] = Field(default_factory=list)

    @property
    def completion_percentage(self) -> int:
        """Share of done issues as a whole percentage, 0 for an empty epic.

        Halves round up (12.5 -> 13) instead of to the nearest even number.
        """
        if self.total_issues <= 0:
            return 0
        return math.floor(self.done_issues / self.total_issues * 100 + 0.5)

    def to_simplified_dict(self) -> dict[str, Any]:
        """Presentation shape returned by the ``get_epic_summary`` tool."""
        return {
            "epic": {
                "key": self.epic.key,
                "summary": self.epic.summary,
                "status": self.epic.status.name if self.epic.status else None,
            },
            "statistics": {
                "totalIssues": self.total_issues,
                "doneIssues": self.done_issues,
                "nonDoneIssues": self.non_done_issues,
                "unassignedIssues": self.unassigned_issues,
                "completionPercentage": self.completion_percentage,
            },
            "breakdown": {
                "byStatus": dict(self.issues_by_status),
                "byType": dict(self.issues_by_type),
                "byPriority": dict(self.issues_by_priority),
            },
            "nonDoneTickets": [
                ticket.to_simplified_dict() for ticket in self.non_done_tickets
            ],
        }
