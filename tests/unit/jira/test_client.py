"""Tests for the Jira REST client."""

import base64
import json
import threading
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

from mcp_jira.exceptions import JiraApiError, JiraTransportError
from mcp_jira.jira import JiraClient, JiraConfig, JiraFetcher
from tests.utils.factories import ErrorResponseFactory, JiraIssueFactory
from tests.utils.mocks import MockJiraApi

PROJECTS_PATH = "/rest/api/3/project"
SEARCH_PATH = "/rest/api/3/search"


class TestJiraClient:
    """Tests for JiraClient request handling."""

    def test_init_strips_trailing_slash(self, jira_config):
        """Test that the base URL loses its trailing slash."""
        client = JiraClient(config=jira_config)
        assert client.base_url == "https://test.atlassian.net"

    def test_init_from_env(self, monkeypatch):
        """Test that the configuration is read from the environment when omitted."""
        monkeypatch.setenv("JIRA_BASE_URL", "https://env.atlassian.net")
        monkeypatch.setenv("JIRA_USERNAME", "env@example.com")
        monkeypatch.setenv("JIRA_API_TOKEN", "env-token")

        client = JiraClient()

        assert client.base_url == "https://env.atlassian.net"
        assert client.config.username == "env@example.com"

    @pytest.mark.anyio
    async def test_request_url_and_headers(self, jira_fetcher, mock_jira_api):
        """Test that requests carry basic auth and JSON headers."""
        mock_jira_api.add("GET", PROJECTS_PATH, json=[])

        await jira_fetcher.request(PROJECTS_PATH)

        request = mock_jira_api.last_request
        assert str(request.url) == "https://test.atlassian.net/rest/api/3/project"
        expected = base64.b64encode(b"test@example.com:test-api-token").decode()
        assert request.headers["Authorization"] == f"Basic {expected}"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["Content-Type"] == "application/json"

    @pytest.mark.anyio
    async def test_get_sends_no_body(self, jira_fetcher, mock_jira_api):
        """Test that GET requests ignore the data argument."""
        mock_jira_api.add("GET", PROJECTS_PATH, json=[])

        await jira_fetcher.request(PROJECTS_PATH, data={"ignored": True})

        assert mock_jira_api.last_request.content == b""

    @pytest.mark.anyio
    async def test_post_sends_json_body(self, jira_fetcher, mock_jira_api):
        """Test that POST requests send the data as JSON."""
        mock_jira_api.add("POST", SEARCH_PATH, json={"issues": []})
        body = {"jql": "project = PROJ", "maxResults": 5}

        result = await jira_fetcher.request(SEARCH_PATH, method="POST", data=body)

        assert result == {"issues": []}
        assert json.loads(mock_jira_api.last_request.content) == body

    @pytest.mark.anyio
    async def test_returns_body_unchanged(self, jira_fetcher, mock_jira_api):
        """Test that the decoded body is passed through as-is."""
        issue = JiraIssueFactory.create("PROJ-7", customfield_10001="kept")
        mock_jira_api.add("GET", "/rest/api/3/issue/PROJ-7", json=issue)

        assert await jira_fetcher.request("/rest/api/3/issue/PROJ-7") == issue

    @pytest.mark.anyio
    async def test_empty_body_returns_none(self, jira_fetcher, mock_jira_api):
        """Test that a 204 without content returns None."""
        mock_jira_api.add("GET", PROJECTS_PATH, status_code=204, text="")

        assert await jira_fetcher.request(PROJECTS_PATH) is None

    @pytest.mark.anyio
    async def test_error_messages_first_entry(self, jira_fetcher, mock_jira_api):
        """Test that the first errorMessages entry becomes the error message."""
        mock_jira_api.add(
            "GET",
            "/rest/api/3/issue/PROJ-404",
            status_code=404,
            json={"errorMessages": ["Issue does not exist", "second"]},
        )

        with pytest.raises(JiraApiError) as exc_info:
            await jira_fetcher.get_issue("PROJ-404")

        assert exc_info.value.status == 404
        assert exc_info.value.message == "Issue does not exist"
        assert "Issue does not exist" in str(exc_info.value)

    @pytest.mark.anyio
    async def test_error_message_field(self, jira_fetcher, mock_jira_api):
        """Test the fallback on the message field."""
        mock_jira_api.add(
            "GET",
            PROJECTS_PATH,
            status_code=401,
            json=ErrorResponseFactory.create_auth_error(),
        )

        with pytest.raises(JiraApiError) as exc_info:
            await jira_fetcher.request(PROJECTS_PATH)

        assert exc_info.value.status == 401
        assert exc_info.value.message == (
            "Client must be authenticated to access this resource."
        )

    @pytest.mark.anyio
    async def test_empty_error_messages_fall_back_to_message(
        self, jira_fetcher, mock_jira_api
    ):
        """Test that an empty errorMessages list is skipped."""
        mock_jira_api.add(
            "POST",
            SEARCH_PATH,
            status_code=400,
            json={"errorMessages": [], "message": "Bad JQL"},
        )

        with pytest.raises(JiraApiError) as exc_info:
            await jira_fetcher.request(SEARCH_PATH, method="POST", data={})

        assert exc_info.value.message == "Bad JQL"

    @pytest.mark.anyio
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"text": "<html>Internal Server Error</html>"},
            {"json": {"errors": {}}},
            {"json": ["not", "a", "dict"]},
        ],
    )
    async def test_unknown_error(self, jira_fetcher, mock_jira_api, kwargs):
        """Test that unreadable error bodies give 'Unknown error'."""
        mock_jira_api.add("GET", PROJECTS_PATH, status_code=500, **kwargs)

        with pytest.raises(JiraApiError) as exc_info:
            await jira_fetcher.request(PROJECTS_PATH)

        assert exc_info.value.status == 500
        assert exc_info.value.message == "Unknown error"

    @pytest.mark.anyio
    async def test_transport_error(self, jira_fetcher, mock_jira_api):
        """Test that a failed connection raises JiraTransportError."""
        mock_jira_api.fail("GET", PROJECTS_PATH, httpx.ConnectError("Connection refused"))

        with pytest.raises(JiraTransportError) as exc_info:
            await jira_fetcher.request(PROJECTS_PATH)

        assert str(exc_info.value) == (
            "Failed to make request to Jira API: Connection refused"
        )

    @pytest.mark.anyio
    async def test_context_manager_closes_session(self, jira_config, mock_jira_api):
        """Test that leaving the context closes the HTTP session."""
        async with JiraFetcher(
            config=jira_config, transport=mock_jira_api.transport
        ) as jira:
            pass

        assert jira.session.is_closed


class TestDiagnosticLogs:
    """Tests for the JSON dumps of successful responses."""

    @pytest.mark.anyio
    async def test_issue_dump(self, jira_fetcher, mock_jira_api, diagnostics_dir):
        """Test that fetching an issue writes jira-issue-<key>.json."""
        issue = JiraIssueFactory.create("PROJ-1")
        mock_jira_api.add("GET", "/rest/api/3/issue/PROJ-1", json=issue)

        await jira_fetcher.get_issue("PROJ-1")

        dump = diagnostics_dir / "jira-issue-PROJ-1.json"
        assert json.loads(dump.read_text(encoding="utf-8")) == issue

    @pytest.mark.anyio
    async def test_search_dump(self, jira_fetcher, mock_jira_api, diagnostics_dir):
        """Test that a search writes a timestamped jira-search file."""
        result = JiraIssueFactory.create_search_result([])
        mock_jira_api.add("POST", SEARCH_PATH, json=result)

        await jira_fetcher.get_assigned_issues()

        dumps = list(diagnostics_dir.glob("jira-search-*.json"))
        assert len(dumps) == 1
        assert ":" not in dumps[0].name
        assert json.loads(dumps[0].read_text(encoding="utf-8")) == result

    @pytest.mark.anyio
    async def test_dump_failure_is_swallowed(self, tmp_path: Path, mock_jira_api):
        """Test that an unwritable diagnostics directory does not fail the call."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("x")
        config = JiraConfig(
            url="https://test.atlassian.net",
            username="test@example.com",
            api_token="test-api-token",
            diagnostics_dir=str(blocker / "logs"),
        )
        jira = JiraFetcher(config=config, transport=mock_jira_api.transport)
        issue = JiraIssueFactory.create("PROJ-1")
        mock_jira_api.add("GET", "/rest/api/3/issue/PROJ-1", json=issue)

        assert await jira.get_issue("PROJ-1") == issue

    @pytest.mark.anyio
    async def test_dumps_disabled(self, tmp_path: Path, mock_jira_api, monkeypatch):
        """Test that no file is written without a diagnostics directory."""
        monkeypatch.chdir(tmp_path)
        config = JiraConfig(
            url="https://test.atlassian.net",
            username="test@example.com",
            api_token="test-api-token",
            diagnostics_dir=None,
        )
        jira = JiraFetcher(config=config, transport=mock_jira_api.transport)
        mock_jira_api.add(
            "GET", "/rest/api/3/issue/PROJ-1", json=JiraIssueFactory.create("PROJ-1")
        )

        await jira.get_issue("PROJ-1")

        assert list(tmp_path.iterdir()) == []


@pytest.mark.anyio
async def test_dump_runs_off_the_event_loop_thread(jira_fetcher, mock_jira_api):
    """Test that the diagnostic dump is written from a worker thread."""
    loop_thread = threading.get_ident()
    dump_threads = []
    mock_jira_api.add(
        "GET", "/rest/api/3/issue/PROJ-1", json=JiraIssueFactory.create("PROJ-1")
    )

    with patch(
        "mcp_jira.jira.client.write_diagnostic_log",
        side_effect=lambda *args: dump_threads.append(threading.get_ident()),
    ) as mock_write:
        await jira_fetcher.get_issue("PROJ-1")

    mock_write.assert_called_once()
    assert mock_write.call_args[0][1] == "jira-issue-PROJ-1.json"
    assert dump_threads and dump_threads[0] != loop_thread
