"""
Root pytest configuration file for MCP Jira tests.
"""

from pathlib import Path

import pytest

from mcp_jira.jira import JiraConfig, JiraFetcher
from tests.utils.factories import JiraIssueFactory
from tests.utils.mocks import MockJiraApi


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def diagnostics_dir(tmp_path: Path) -> Path:
    return tmp_path / "logs"


@pytest.fixture
def jira_config(diagnostics_dir: Path) -> JiraConfig:
    """Jira configuration pointing at a fake Cloud site."""
    return JiraConfig(
        url="https://test.atlassian.net/",
        username="test@example.com",
        api_token="test-api-token",
        diagnostics_dir=str(diagnostics_dir),
    )


@pytest.fixture
def mock_jira_api() -> MockJiraApi:
    return MockJiraApi()


@pytest.fixture
def jira_fetcher(jira_config: JiraConfig, mock_jira_api: MockJiraApi) -> JiraFetcher:
    """JiraFetcher whose HTTP traffic is served by ``mock_jira_api``."""
    return JiraFetcher(config=jira_config, transport=mock_jira_api.transport)


@pytest.fixture
def epic_issue() -> dict:
    return JiraIssueFactory.create(
        "PROJ-1",
        fields={
            "summary": "Checkout revamp",
            "status": {"name": "In Progress"},
            "issuetype": {"name": "Epic"},
        },
    )
