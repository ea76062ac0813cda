"""Base client module for Jira API interactions."""

import logging
from typing import Any, Literal

import httpx
from anyio import to_thread

from ..exceptions import JiraApiError, JiraTransportError
from ..utils.io import write_diagnostic_log
from .config import JiraConfig

logger = logging.getLogger("mcp-jira.client")

HttpMethod = Literal["GET", "POST"]

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class JiraClient:
    """Base client for Jira API interactions.

    One ``httpx.AsyncClient`` is shared by every call made through this
    client, so concurrent tool invocations reuse the same connection pool.
    """

    def __init__(
        self,
        config: JiraConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from environment variables.
            transport: Optional httpx transport, used by tests to stub the network.

        Raises:
            ValueError: If configuration is missing from the environment.
        """
        self.config = config or JiraConfig.from_env()
        self.base_url = self.config.url
        self.session = self._create_session(transport)

    def _create_session(
        self, transport: httpx.AsyncBaseTransport | None = None
    ) -> httpx.AsyncClient:
        """Create HTTP session with basic authentication.

        Returns:
            Authenticated HTTP session
        """
        return httpx.AsyncClient(
            auth=(self.config.username, self.config.api_token),
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            verify=self.config.ssl_verify,
            timeout=self.config.timeout,
            transport=transport,
        )

    async def request(
        self,
        endpoint: str,
        method: HttpMethod = "GET",
        data: dict[str, Any] | None = None,
    ) -> Any:
        """Send an authenticated request to the Jira REST API.

        Args:
            endpoint: API path relative to the base URL, e.g. ``/rest/api/3/project``
            method: ``GET`` or ``POST``
            data: JSON body, sent with ``POST`` only

        Returns:
            The decoded JSON body, unchanged

        Raises:
            JiraApiError: If Jira answers with a non-2xx status
            JiraTransportError: If no response could be obtained
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"Calling {method} {url}")

        try:
            response = await self.session.request(
                method, url, json=data if method == "POST" else None
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._api_error(e.response) from e
        except httpx.HTTPError as e:
            reason = str(e) or type(e).__name__
            logger.error(f"Request error for {url}: {reason}")
            raise JiraTransportError(
                f"Failed to make request to Jira API: {reason}"
            ) from e

        if not response.content:
            return None
        return response.json()

    @staticmethod
    def _api_error(response: httpx.Response) -> JiraApiError:
        """Build a JiraApiError from an error response.

        The message is the first of ``errorMessages``, else ``message``,
        else ``"Unknown error"``.
        """
        logger.error(
            f"Jira API Error Response ({response.status_code}): {response.text}"
        )
        return JiraApiError(response.status_code, extract_error_message(response))

    async def _write_diagnostic_log(self, name: str, payload: Any) -> None:
        """Dump a successful response under the diagnostics directory.

        Serialising and writing run in a worker thread, off the event loop.
        """
        if self.config.diagnostics_dir:
            await to_thread.run_sync(
                write_diagnostic_log, self.config.diagnostics_dir, name, payload
            )

    async def close(self) -> None:
        """Close HTTP session."""
        await self.session.aclose()

    async def __aenter__(self) -> "JiraClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


def extract_error_message(response: httpx.Response) -> str:
    """Extract the human readable message of a Jira error body."""
    try:
        error_data = response.json()
    except ValueError:
        return UNKNOWN_ERROR_MESSAGE

    if not isinstance(error_data, dict):
        return UNKNOWN_ERROR_MESSAGE

    messages = error_data.get("errorMessages")
    if isinstance(messages, list) and messages and messages[0]:
        return str(messages[0])
    if error_data.get("message"):
        return str(error_data["message"])
    return UNKNOWN_ERROR_MESSAGE
