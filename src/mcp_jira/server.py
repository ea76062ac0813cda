"""MCP server setup and transports (stdio, HTTP + SSE)."""

import logging
from collections.abc import Sequence
from typing import Any

from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.types import TextContent, Tool
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route

from .jira import JiraConfig, JiraFetcher
from .tools import call_jira_tool, list_jira_tools
from .utils.logging import log_config_param

logger = logging.getLogger("mcp-jira.server")

SERVER_NAME = "mcp-jira"
SSE_PATH = "/sse"
MESSAGES_PATH = "/messages/"


def create_server(jira: JiraFetcher) -> Server:
    """Create the MCP server exposing the Jira tools backed by ``jira``."""
    app: Server = Server(SERVER_NAME)

    @app.list_tools()
    async def list_tools() -> list[Tool]:
        """List available Jira tools."""
        return list_jira_tools()

    @app.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> Sequence[TextContent]:
        """Handle tool calls for Jira operations."""
        return await call_jira_tool(jira, name, arguments)

    return app


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def create_sse_app(app: Server, debug: bool = False) -> Starlette:
    """Wrap the MCP server in a Starlette app.

    ``GET /sse`` opens one event stream per client; the client then posts its
    messages to ``/messages/`` with the session id announced on the stream.
    """
    sse = SseServerTransport(MESSAGES_PATH)

    async def handle_sse(request: Request) -> Response:
        logger.info("New SSE connection established")
        async with sse.connect_sse(
            request.scope, request.receive, request._send
        ) as streams:
            await app.run(streams[0], streams[1], app.create_initialization_options())
        return Response()

    return Starlette(
        debug=debug,
        routes=[
            Route(SSE_PATH, endpoint=handle_sse),
            Mount(MESSAGES_PATH, app=sse.handle_post_message),
            Route("/healthz", endpoint=health_check, methods=["GET"]),
        ],
    )


def log_jira_config(config: JiraConfig) -> None:
    log_config_param(logger, "Jira", "URL", config.url)
    log_config_param(logger, "Jira", "Username", config.username)
    log_config_param(logger, "Jira", "API Token", config.api_token, sensitive=True)
    log_config_param(logger, "Jira", "SSL Verify", str(config.ssl_verify))
    log_config_param(logger, "Jira", "Diagnostics Dir", config.diagnostics_dir)


async def run_server(
    config: JiraConfig,
    transport: str = "stdio",
    port: int = 3000,
    host: str = "0.0.0.0",  # noqa: S104
) -> None:
    """Run the MCP Jira server with the specified transport."""
    log_jira_config(config)

    async with JiraFetcher(config=config) as jira:
        app = create_server(jira)

        if transport == "sse":
            import uvicorn

            starlette_app = create_sse_app(app)
            logger.info(f"HTTP server listening on port {port}")
            logger.info(f"SSE endpoint available at http://localhost:{port}{SSE_PATH}")
            logger.info(
                f"Message endpoint available at http://localhost:{port}{MESSAGES_PATH}"
            )

            uvicorn_config = uvicorn.Config(starlette_app, host=host, port=port)
            server = uvicorn.Server(uvicorn_config)
            # serve() instead of run() to stay in the same event loop
            await server.serve()
        else:
            from mcp.server.stdio import stdio_server

            logger.info("Using stdio transport")
            async with stdio_server() as (read_stream, write_stream):
                await app.run(
                    read_stream, write_stream, app.create_initialization_options()
                )
