"""JQL query builders.

Pure functions: no I/O, same input always gives the same query. Values are
interpolated as given; a quote inside an issue type or key produces invalid
JQL, which Jira reports back as an API error.
"""

from ..models.jira import JiraSearchQuery
from .constants import (
    DEFAULT_MAX_RESULTS,
    DEFAULT_SEARCH_FIELDS,
    EPIC_ISSUE_FIELDS,
    EPIC_SUMMARY_FIELDS,
    EPIC_SUMMARY_MAX_RESULTS,
)

ORDER_BY_UPDATED = "ORDER BY updated DESC"


def _with_project(clause: str, project_key: str | None) -> str:
    if project_key:
        return f"{clause} AND project = {project_key}"
    return clause


def assigned_to_current_user(
    project_key: str | None = None, max_results: int | None = None
) -> JiraSearchQuery:
    """Issues assigned to the authenticated user, most recently updated first.

    Args:
        project_key: Restrict to one project (e.g. ``PROJ``)
        max_results: Result cap, defaults to 50
    """
    jql = _with_project("assignee = currentUser()", project_key)
    return JiraSearchQuery(
        jql=f"{jql} {ORDER_BY_UPDATED}",
        max_results=max_results or DEFAULT_MAX_RESULTS,
        fields=list(DEFAULT_SEARCH_FIELDS),
    )


def issues_by_type(
    issue_type: str,
    project_key: str | None = None,
    max_results: int | None = None,
) -> JiraSearchQuery:
    """Issues of one type (Bug, Story, Epic, ...), most recently updated first.

    Args:
        issue_type: Issue type name
        project_key: Restrict to one project
        max_results: Result cap, defaults to 50
    """
    jql = _with_project(f'issuetype = "{issue_type}"', project_key)
    return JiraSearchQuery(
        jql=f"{jql} {ORDER_BY_UPDATED}",
        max_results=max_results or DEFAULT_MAX_RESULTS,
        fields=list(DEFAULT_SEARCH_FIELDS),
    )


def epic_children(epic_key: str, max_results: int | None = None) -> JiraSearchQuery:
    """Direct children of an epic, most recently updated first."""
    return JiraSearchQuery(
        jql=f'parent = "{epic_key}" {ORDER_BY_UPDATED}',
        max_results=max_results or DEFAULT_MAX_RESULTS,
        fields=list(EPIC_ISSUE_FIELDS),
    )


def epic_children_for_summary(epic_key: str) -> JiraSearchQuery:
    """Every child of an epic (up to 1000) with just the fields the roll-up reads."""
    return JiraSearchQuery(
        jql=f'parent = "{epic_key}" ORDER BY status ASC, priority DESC',
        max_results=EPIC_SUMMARY_MAX_RESULTS,
        fields=list(EPIC_SUMMARY_FIELDS),
    )
