"""Jira API module for the MCP Jira server."""

from .client import JiraClient
from .config import JiraConfig
from .epics import EpicsMixin
from .issues import IssuesMixin
from .projects import ProjectsMixin
from .search import SearchMixin


class JiraFetcher(EpicsMixin, ProjectsMixin, IssuesMixin, SearchMixin):
    """
    The main Jira client class providing access to all Jira read operations.

    This class inherits from multiple mixins that provide specific functionality:
    - IssuesMixin: Fetching a single issue
    - SearchMixin: JQL searches (assigned issues, issues by type)
    - ProjectsMixin: Projects and issue types
    - EpicsMixin: Epic children and epic summaries
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient"]
