"""Constants for the Jira REST API and the queries built against it."""

# REST endpoints (relative to the site base URL)
ISSUE_ENDPOINT = "/rest/api/3/issue/{issue_key}"
SEARCH_ENDPOINT = "/rest/api/3/search"
PROJECT_ENDPOINT = "/rest/api/3/project"
ISSUE_TYPE_ENDPOINT = "/rest/api/3/issuetype"

DEFAULT_MAX_RESULTS = 50
# Single request standing in for "all children"; not real pagination
EPIC_SUMMARY_MAX_RESULTS = 1000

DEFAULT_SEARCH_FIELDS: tuple[str, ...] = (
    "summary",
    "description",
    "status",
    "issuetype",
    "priority",
    "assignee",
    "project",
)

EPIC_ISSUE_FIELDS: tuple[str, ...] = (*DEFAULT_SEARCH_FIELDS, "parent")

EPIC_SUMMARY_FIELDS: tuple[str, ...] = (
    "summary",
    "status",
    "issuetype",
    "priority",
    "assignee",
)

# Literal, case-sensitive status names counted as done in epic summaries
DONE_STATUSES: frozenset[str] = frozenset(
    {"Done", "Closed", "Resolved", "Complete", "Completed"}
)

NO_PRIORITY_LABEL = "None"

DEFAULT_DIAGNOSTICS_DIR = "logs"
