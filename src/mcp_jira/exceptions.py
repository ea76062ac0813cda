class MCPJiraError(Exception):
    """Base exception for MCP-Jira errors."""

    pass


class JiraApiError(MCPJiraError):
    """Raised when the Jira API answers with a non-2xx status."""

    def __init__(self, status: int, message: str) -> None:
        self.status = status
        self.message = message
        super().__init__(f"Jira API error ({status}): {message}")


class JiraTransportError(MCPJiraError):
    """Raised when no response could be obtained from the Jira API."""

    pass
