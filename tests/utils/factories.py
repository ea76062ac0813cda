"""Test data factories for creating consistent test objects."""

from typing import Any


class JiraIssueFactory:
    """Factory for creating Jira issue test data."""

    @staticmethod
    def create(key: str = "TEST-123", **overrides) -> dict[str, Any]:
        """Create a Jira issue with default values."""
        defaults = {
            "id": "12345",
            "key": key,
            "self": f"https://test.atlassian.net/rest/api/3/issue/{key}",
            "fields": {
                "summary": "Test Issue Summary",
                "description": "Test issue description",
                "status": {
                    "name": "Open",
                    "id": "1",
                    "statusCategory": {"key": "new", "name": "To Do"},
                },
                "issuetype": {"name": "Task", "id": "10001"},
                "priority": {"name": "Medium", "id": "3"},
                "assignee": {
                    "accountId": "acc-1",
                    "displayName": "Test User",
                    "emailAddress": "test@example.com",
                },
                "reporter": {
                    "accountId": "acc-2",
                    "displayName": "Reporter User",
                    "emailAddress": "reporter@example.com",
                },
                "created": "2023-01-01T12:00:00.000+0000",
                "updated": "2023-01-02T12:00:00.000+0000",
                "project": {"key": "TEST", "name": "Test Project"},
                "labels": ["backend"],
                "components": [{"name": "API"}],
                "fixVersions": [{"name": "1.0"}],
                "duedate": "2023-02-01",
            },
        }
        return deep_merge(defaults, overrides)

    @staticmethod
    def create_child(
        key: str,
        status: str = "To Do",
        issue_type: str = "Task",
        priority: str | None = "Medium",
        assignee: str | None = "Test User",
        summary: str | None = None,
    ) -> dict[str, Any]:
        """Create a child issue carrying only the epic summary fields."""
        fields: dict[str, Any] = {
            "summary": summary or f"Summary of {key}",
            "status": {"name": status},
            "issuetype": {"name": issue_type},
            "priority": {"name": priority} if priority else None,
            "assignee": {"displayName": assignee} if assignee else None,
        }
        return {"id": key.split("-")[-1], "key": key, "fields": fields}

    @staticmethod
    def create_search_result(
        issues: list[dict[str, Any]], max_results: int = 50
    ) -> dict[str, Any]:
        """Wrap issues in a search response."""
        return {
            "startAt": 0,
            "maxResults": max_results,
            "total": len(issues),
            "issues": issues,
        }


class ErrorResponseFactory:
    """Factory for creating error response test data."""

    @staticmethod
    def create_api_error(message: str = "Bad Request") -> dict[str, Any]:
        """Create API error response."""
        return {"errorMessages": [message], "errors": {}}

    @staticmethod
    def create_auth_error() -> dict[str, Any]:
        """Create authentication error response."""
        return {"message": "Client must be authenticated to access this resource."}


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
