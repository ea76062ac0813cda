"""Jira tool catalog and dispatch.

Each tool declares its arguments once; the JSON input schema advertised to
MCP clients and the argument parsing both derive from that declaration.

Errors raised by Jira (or while talking to it) never fail the tool call:
they are returned as ordinary text content starting with ``Error``. Only an
unknown tool name or malformed arguments raise.
"""

import json
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any, Literal

from mcp.types import TextContent, Tool, ToolAnnotations

from .jira import JiraFetcher
from .logging_config import log_operation
from .utils.urls import extract_issue_key_from_url, extract_project_key_from_url, is_url

logger = logging.getLogger("mcp-jira.tools")

ArgumentType = Literal["string", "integer"]
ToolHandler = Callable[..., Awaitable[Any]]


@dataclass(frozen=True)
class ToolArgument:
    """One named argument of a tool."""

    name: str  # camelCase name on the wire
    param: str  # keyword passed to the handler
    type: ArgumentType
    description: str
    required: bool = False

    def to_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.type == "integer":
            schema["minimum"] = 1
        return schema

    def parse(self, value: Any) -> str | int:
        """Validate a raw argument value.

        Raises:
            ValueError: If the value does not have the declared type
        """
        if self.type == "string":
            if not isinstance(value, str):
                raise ValueError(f"Argument '{self.name}' must be a string")
            return value

        # JSON clients may send 10.0 for 10
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ValueError(f"Argument '{self.name}' must be an integer")
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(f"Argument '{self.name}' must be an integer")
            value = int(value)
        if value < 1:
            raise ValueError(f"Argument '{self.name}' must be a positive integer")
        return value


@dataclass(frozen=True)
class JiraTool:
    """A callable operation exposed to MCP clients."""

    name: str
    title: str
    description: str
    arguments: tuple[ToolArgument, ...]
    handler: ToolHandler
    failure: str  # completes "Error <failure>: <message>"

    @property
    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {arg.name: arg.to_schema() for arg in self.arguments},
            "required": [arg.name for arg in self.arguments if arg.required],
        }

    def to_mcp_tool(self) -> Tool:
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
            annotations=ToolAnnotations(title=self.title, readOnlyHint=True),
        )

    def parse_arguments(self, arguments: dict[str, Any] | None) -> dict[str, Any]:
        """Map wire arguments to handler keyword arguments.

        Optional arguments that are absent or null are left out, so the
        handler's own defaults apply.

        Raises:
            ValueError: If a required argument is missing or has the wrong type
        """
        arguments = arguments or {}
        params: dict[str, Any] = {}
        for arg in self.arguments:
            value = arguments.get(arg.name)
            if value is None:
                if arg.required:
                    raise ValueError(
                        f"Missing required parameter for {self.name}: {arg.name}"
                    )
                continue
            params[arg.param] = arg.parse(value)
        return params


def normalize_issue_key(value: str) -> str:
    """Accept either an issue key or a Jira link to the issue."""
    if is_url(value):
        return extract_issue_key_from_url(value) or value
    return value


def normalize_project_key(value: str) -> str:
    """Accept either a project key or a Jira link inside the project."""
    if is_url(value):
        return extract_project_key_from_url(value) or value
    return value


def _for_project(project_key: str | None) -> str:
    return f" for project: {project_key}" if project_key else ""


async def get_issue(jira: JiraFetcher, issue_key: str) -> dict[str, Any]:
    issue_key = normalize_issue_key(issue_key)
    logger.info(f"Fetching issue: {issue_key}")
    issue = await jira.get_issue(issue_key) or {}
    summary = (issue.get("fields") or {}).get("summary")
    logger.info(f"Successfully fetched issue: {issue.get('key')} - {summary}")
    return issue


async def get_assigned_issues(
    jira: JiraFetcher,
    project_key: str | None = None,
    max_results: int | None = None,
) -> dict[str, Any]:
    if project_key:
        project_key = normalize_project_key(project_key)
    logger.info(f"Fetching assigned issues{_for_project(project_key)}")
    result = await jira.get_assigned_issues(project_key, max_results) or {}
    logger.info(
        f"Successfully fetched {len(result.get('issues') or [])} assigned issues"
    )
    return result


async def get_issues_by_type(
    jira: JiraFetcher,
    issue_type: str,
    project_key: str | None = None,
    max_results: int | None = None,
) -> dict[str, Any]:
    if project_key:
        project_key = normalize_project_key(project_key)
    logger.info(f"Fetching issues of type: {issue_type}{_for_project(project_key)}")
    result = await jira.get_issues_by_type(issue_type, project_key, max_results) or {}
    logger.info(
        f"Successfully fetched {len(result.get('issues') or [])} issues of type {issue_type}"
    )
    return result


async def get_projects(jira: JiraFetcher) -> list[dict[str, Any]]:
    logger.info("Fetching projects")
    projects = await jira.get_projects() or []
    logger.info(f"Successfully fetched {len(projects)} projects")
    return projects


async def get_issue_types(jira: JiraFetcher) -> Any:
    logger.info("Fetching issue types")
    issue_types = await jira.get_issue_types()
    logger.info("Successfully fetched issue types")
    return issue_types


async def get_epic_issues(
    jira: JiraFetcher, epic_key: str, max_results: int | None = None
) -> dict[str, Any]:
    epic_key = normalize_issue_key(epic_key)
    logger.info(f"Fetching issues under epic: {epic_key}")
    result = await jira.get_epic_issues(epic_key, max_results) or {}
    logger.info(
        f"Successfully fetched {len(result.get('issues') or [])} issues under epic {epic_key}"
    )
    return result


async def get_epic_summary(jira: JiraFetcher, epic_key: str) -> dict[str, Any]:
    epic_key = normalize_issue_key(epic_key)
    logger.info(f"Fetching epic summary for: {epic_key}")
    report = await jira.get_epic_summary(epic_key)
    logger.info(
        f"Successfully generated summary for epic {epic_key}: "
        f"{report.non_done_issues}/{report.total_issues} issues remaining"
    )
    return report.to_simplified_dict()


_PROJECT_KEY = ToolArgument(
    name="projectKey",
    param="project_key",
    type="string",
    description="The key of the Jira project to fetch issues from",
)
_MAX_RESULTS = ToolArgument(
    name="maxResults",
    param="max_results",
    type="integer",
    description="Maximum number of results to return (default 50)",
)

JIRA_TOOLS: tuple[JiraTool, ...] = (
    JiraTool(
        name="get_issue",
        title="Get Issue",
        description="Get detailed information about a Jira issue",
        arguments=(
            ToolArgument(
                name="issueKey",
                param="issue_key",
                type="string",
                description="The key of the Jira issue to fetch (e.g., PROJECT-123)",
                required=True,
            ),
        ),
        handler=get_issue,
        failure="fetching issue",
    ),
    JiraTool(
        name="get_assigned_issues",
        title="Get Assigned Issues",
        description="Get issues assigned to the current user in a project",
        arguments=(_PROJECT_KEY, _MAX_RESULTS),
        handler=get_assigned_issues,
        failure="fetching assigned issues",
    ),
    JiraTool(
        name="get_issues_by_type",
        title="Get Issues By Type",
        description="Get issues of a specific type",
        arguments=(
            ToolArgument(
                name="issueType",
                param="issue_type",
                type="string",
                description="The type of issue to fetch (e.g., Bug, Story, Epic)",
                required=True,
            ),
            _PROJECT_KEY,
            _MAX_RESULTS,
        ),
        handler=get_issues_by_type,
        failure="fetching issues by type",
    ),
    JiraTool(
        name="get_projects",
        title="Get Projects",
        description="Get list of available Jira projects",
        arguments=(),
        handler=get_projects,
        failure="fetching projects",
    ),
    JiraTool(
        name="get_issue_types",
        title="Get Issue Types",
        description="Get list of available Jira issue types",
        arguments=(),
        handler=get_issue_types,
        failure="fetching issue types",
    ),
    JiraTool(
        name="get_epic_issues",
        title="Get Epic Issues",
        description="Get issues under a specific epic",
        arguments=(
            ToolArgument(
                name="epicKey",
                param="epic_key",
                type="string",
                description="The key of the epic to get issues for (e.g., PROJECT-123)",
                required=True,
            ),
            _MAX_RESULTS,
        ),
        handler=get_epic_issues,
        failure="fetching issues under epic",
    ),
    JiraTool(
        name="get_epic_summary",
        title="Get Epic Summary",
        description="Get summary of non-DONE tickets under an epic with statistics",
        arguments=(
            ToolArgument(
                name="epicKey",
                param="epic_key",
                type="string",
                description="The key of the epic to summarize (e.g., PROJECT-123)",
                required=True,
            ),
        ),
        handler=get_epic_summary,
        failure="fetching epic summary",
    ),
)

TOOLS_BY_NAME: dict[str, JiraTool] = {tool.name: tool for tool in JIRA_TOOLS}


def list_jira_tools() -> list[Tool]:
    """Return the MCP descriptors of every Jira tool."""
    return [tool.to_mcp_tool() for tool in JIRA_TOOLS]


def text_content(text: str) -> list[TextContent]:
    return [TextContent(type="text", text=text)]


async def call_jira_tool(
    jira: JiraFetcher, name: str, arguments: dict[str, Any] | None
) -> Sequence[TextContent]:
    """Run a Jira tool and render its result as text.

    Args:
        jira: Fetcher the tool delegates to
        name: Tool name
        arguments: Raw tool arguments from the client

    Returns:
        A single text item: pretty-printed JSON on success, or
        ``Error <what failed>: <message>`` if the Jira call failed

    Raises:
        ValueError: If the tool is unknown or the arguments are malformed
    """
    tool = TOOLS_BY_NAME.get(name)
    if tool is None:
        raise ValueError(f"Unknown tool: {name}")

    params = tool.parse_arguments(arguments)

    with log_operation(logger, name):
        try:
            result = await tool.handler(jira, **params)
        except Exception as e:
            logger.error(f"Error {tool.failure}: {e}")
            return text_content(f"Error {tool.failure}: {e}")

    return text_content(json.dumps(result, indent=2, ensure_ascii=False))
