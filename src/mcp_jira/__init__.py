import asyncio
import os
import sys

import click
from dotenv import load_dotenv

__version__ = "0.1.0"

from .logging_config import log_operation, setup_logger

logger = setup_logger()

DEFAULT_HTTP_PORT = 3000


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse"]),
    help="Transport type (stdio or sse). Defaults to MCP_TRANSPORT or stdio",
)
@click.option(
    "--port",
    type=int,
    help="Port to listen on for SSE transport. Defaults to HTTP_PORT or 3000",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--jira-url",
    help="Jira URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--jira-username", help="Jira username/email")
@click.option("--jira-token", help="Jira API token")
def main(
    verbose: int,
    env_file: str | None,
    transport: str | None,
    port: int | None,
    log_dir: str | None,
    log_to_file: bool,
    jira_url: str | None,
    jira_username: str | None,
    jira_token: str | None,
) -> None:
    """MCP Jira Server - read-only Jira tools (issues, searches, epic summaries) for MCP."""
    logging_level = "DEBUG" if verbose >= 2 else os.getenv("LOG_LEVEL", "INFO")

    setup_logger(
        name="mcp-jira",
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    with log_operation(logger, "application_startup", app_version=__version__):
        if env_file:
            logger.info(f"Loading environment from file: {env_file}")
            load_dotenv(env_file)
        else:
            logger.debug("Attempting to load environment from default .env file")
            load_dotenv()

        # Command line arguments win over the environment
        if jira_url:
            os.environ["JIRA_BASE_URL"] = jira_url
        if jira_username:
            os.environ["JIRA_USERNAME"] = jira_username
        if jira_token:
            os.environ["JIRA_API_TOKEN"] = jira_token

        transport = transport or os.getenv("MCP_TRANSPORT", "stdio")
        if transport not in ("stdio", "sse"):
            logger.error(f"Unsupported transport: {transport}")
            sys.exit(1)

        if port is None:
            port_env = os.getenv("HTTP_PORT")
            try:
                port = int(port_env) if port_env else DEFAULT_HTTP_PORT
            except ValueError:
                logger.error(f"HTTP_PORT must be an integer, got {port_env!r}")
                sys.exit(1)

        from .jira import JiraConfig

        try:
            config = JiraConfig.from_env()
        except ValueError as e:
            logger.error(str(e))
            sys.exit(1)

    from . import server

    logger.info(f"Starting MCP Jira v{__version__} with {transport} transport")
    asyncio.run(server.run_server(config, transport=transport, port=port))


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
