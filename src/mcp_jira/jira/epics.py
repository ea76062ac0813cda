"""Module for Jira epic operations."""

import logging
from collections import Counter
from collections.abc import Sequence
from typing import Any

from ..models.jira import EpicSummaryReport, EpicTicket, JiraIssue, JiraSearchResult
from . import jql
from .constants import DONE_STATUSES, NO_PRIORITY_LABEL
from .issues import IssuesMixin
from .search import SearchMixin

logger = logging.getLogger("mcp-jira.epics")

# Fields the roll-up cannot do without; everything else is optional
REQUIRED_SUMMARY_FIELDS = ("status", "issuetype")


def is_done_status(status_name: str) -> bool:
    """Return True if the status name is one of the literal done statuses."""
    return status_name in DONE_STATUSES


def summarize_epic_issues(
    epic: JiraIssue, issues: Sequence[JiraIssue]
) -> EpicSummaryReport:
    """Count and group the child issues of an epic in a single pass.

    Every issue is counted by status, type and priority (``"None"`` when it
    has no priority). Issues whose status is one of ``DONE_STATUSES`` count as
    done; the rest are listed, in input order, as non-done tickets. Unassigned
    issues are counted whatever their status.

    Args:
        epic: The epic itself
        issues: Its child issues, each with a status and an issue type

    Returns:
        The epic summary report
    """
    by_status: Counter[str] = Counter()
    by_type: Counter[str] = Counter()
    by_priority: Counter[str] = Counter()
    done = 0
    unassigned = 0
    non_done_tickets: list[EpicTicket] = []

    for issue in issues:
        status = issue.status.name if issue.status else ""
        issue_type = issue.issue_type.name if issue.issue_type else ""
        priority = (issue.priority.name if issue.priority else None) or NO_PRIORITY_LABEL
        assignee = (issue.assignee.display_name if issue.assignee else None) or None

        by_status[status] += 1
        by_type[issue_type] += 1
        by_priority[priority] += 1

        if is_done_status(status):
            done += 1
        else:
            non_done_tickets.append(
                EpicTicket(
                    key=issue.key,
                    summary=issue.summary,
                    status=status,
                    type=issue_type,
                    priority=priority,
                    assignee=assignee,
                )
            )

        if assignee is None:
            unassigned += 1

    total = len(issues)
    return EpicSummaryReport(
        epic=epic,
        total_issues=total,
        done_issues=done,
        non_done_issues=total - done,
        unassigned_issues=unassigned,
        issues_by_status=dict(by_status),
        issues_by_type=dict(by_type),
        issues_by_priority=dict(by_priority),
        non_done_tickets=non_done_tickets,
    )


def validate_summary_fields(issue_data: dict[str, Any]) -> None:
    """Check that a raw child issue carries the fields the roll-up reads.

    Raises:
        ValueError: If the entry is not an issue object, or ``status.name`` or
            ``issuetype.name`` is missing
    """
    if not isinstance(issue_data, dict):
        raise ValueError(f"Issue {issue_data!r} has no fields in the search result")
    fields = issue_data.get("fields")
    if not isinstance(fields, dict):
        fields = {}
    for field in REQUIRED_SUMMARY_FIELDS:
        value = fields.get(field)
        if not isinstance(value, dict) or not value.get("name"):
            key = issue_data.get("key", "<unknown>")
            raise ValueError(f"Issue {key} has no {field} name in the search result")


class EpicsMixin(IssuesMixin, SearchMixin):
    """Mixin for Jira epic operations."""

    async def get_epic_issues(
        self, epic_key: str, max_results: int | None = None
    ) -> dict[str, Any]:
        """
        Get the issues under an epic.

        Args:
            epic_key: The key of the epic (e.g. PROJ-1)
            max_results: Result cap, defaults to 50

        Returns:
            The search result as returned by the Jira API
        """
        return await self.search_issues(jql.epic_children(epic_key, max_results))

    async def get_epic_summary(self, epic_key: str) -> EpicSummaryReport:
        """
        Summarize the progress of an epic.

        Fetches the epic, then up to 1000 of its children in one search, and
        aggregates them with ``summarize_epic_issues``.

        Args:
            epic_key: The key of the epic (e.g. PROJ-1)

        Returns:
            The epic summary report

        Raises:
            JiraApiError: If the epic or the search is rejected by Jira
            JiraTransportError: If Jira cannot be reached
            ValueError: If a child issue lacks a status or issue type
        """
        epic = JiraIssue.from_api_response(await self.get_issue(epic_key))

        raw_result = await self.search_issues(jql.epic_children_for_summary(epic_key))
        raw_issues = (raw_result or {}).get("issues") or []
        for issue_data in raw_issues:
            validate_summary_fields(issue_data)

        children = JiraSearchResult.from_api_response(raw_result).issues
        logger.debug(f"Summarizing {len(children)} child issues of epic {epic_key}")
        return summarize_epic_issues(epic, children)
