"""n8n REST API client.

One method per n8n capability, all funnelled through `request()`, which
attaches the API key, checks the status and decodes the JSON body.
No retries, no caching.
"""

from typing import Any

import httpx

from flow_config.settings import Settings
from flow_obs.logging import get_logger
from flow_obs.metrics import n8n_api_requests_total

from .exceptions import N8nAPIError

logger = get_logger(__name__)

API_VERSION_PATH = "/api/v1"
MAX_PAGE_SIZE = 25


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


def _page_params(limit: int | None, cursor: str | None) -> dict[str, str]:
    params = {}
    if limit:
        params["limit"] = str(min(limit, MAX_PAGE_SIZE))
    if cursor:
        params["cursor"] = cursor
    return params


class N8nClient:
    """HTTP client for the n8n public API."""

    def __init__(
        self,
        host: str,
        api_key: str,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize n8n client.

        Args:
            host: n8n base URL, with or without /api/v1
            api_key: Value for the X-N8N-API-KEY header
            timeout_seconds: Request timeout (None waits indefinitely)
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = self.normalize_host(host)
        self.api_key = api_key
        self.client = httpx.AsyncClient(timeout=timeout_seconds, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "N8nClient":
        return cls(
            host=settings.N8N_HOST,
            api_key=settings.N8N_API_KEY,
            timeout_seconds=settings.N8N_TIMEOUT_SECONDS,
            **kwargs,
        )

    @staticmethod
    def normalize_host(host: str) -> str:
        """Return the API base URL, always ending in /api/v1/."""
        if API_VERSION_PATH not in host:
            host = host.rstrip("/") + API_VERSION_PATH
        if not host.endswith("/"):
            host += "/"
        return host

    def build_url(self, endpoint: str) -> str:
        if endpoint.startswith("/"):
            endpoint = endpoint[1:]
        return f"{self.base_url}{endpoint}"

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        params: dict[str, str] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Call an n8n endpoint and return the decoded JSON body.

        Args:
            endpoint: Path relative to /api/v1
            method: HTTP method
            params: Query parameters; keys not present are not sent
            json: Request body
            headers: Extra headers, merged over the defaults

        Returns:
            Parsed JSON response

        Raises:
            N8nAPIError: Any non-2xx response
            httpx.HTTPError: Network errors
        """
        url = self.build_url(endpoint)
        logger.info("n8n_api_request", url=url, method=method, params=params or {})

        request_headers = {
            "X-N8N-API-KEY": self.api_key,
            "Content-Type": "application/json",
            **(headers or {}),
        }

        response = await self.client.request(
            method,
            url,
            params=params,
            json=json,
            headers=request_headers,
        )
        n8n_api_requests_total.labels(method=method, status=str(response.status_code)).inc()

        if not response.is_success:
            logger.error(
                "n8n_api_request_failed",
                url=url,
                method=method,
                status=response.status_code,
                status_text=response.reason_phrase,
            )
            raise N8nAPIError(
                f"N8N API error: {response.reason_phrase}",
                status_code=response.status_code,
                status_text=response.reason_phrase,
            )

        return response.json()

    # ========================================================================
    # WORKFLOWS
    # ========================================================================

    async def list_workflows(
        self,
        active: bool | None = None,
        tags: str | None = None,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> Any:
        """List workflows.

        Args:
            active: Filter by active flag
            tags: Comma separated tag names
            limit: Page size, capped at 25
            cursor: Pagination cursor from a previous page
        """
        params = {}
        if active is not None:
            params["active"] = _bool_param(active)
        if tags:
            params["tags"] = tags
        params.update(_page_params(limit, cursor))

        return await self.request("/workflows", params=params)

    async def get_workflow(self, workflow_id: str) -> Any:
        return await self.request(f"/workflows/{workflow_id}")

    async def create_workflow(
        self,
        name: str,
        nodes: list[dict[str, Any]],
        connections: dict[str, Any],
    ) -> Any:
        """Create a workflow; n8n assigns the id."""
        return await self.request(
            "/workflows",
            method="POST",
            json={"name": name, "nodes": nodes, "connections": connections},
        )

    async def update_workflow(self, workflow_id: str, data: dict[str, Any]) -> Any:
        """Update a workflow with the given fields only."""
        return await self.request(f"/workflows/{workflow_id}", method="PUT", json=data)

    async def activate_workflow(self, workflow_id: str, active: bool) -> Any:
        action = "activate" if active else "deactivate"
        return await self.request(f"/workflows/{workflow_id}/{action}", method="POST")

    # ========================================================================
    # EXECUTIONS
    # ========================================================================

    async def get_workflow_executions(
        self,
        workflow_id: str,
        include_data: bool | None = None,
        status: str | None = None,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> Any:
        """List executions of one workflow.

        Args:
            workflow_id: Workflow to list executions for
            include_data: Include each execution's detailed data
            status: error, success or waiting
            limit: Page size, capped at 25
            cursor: Pagination cursor from a previous page
        """
        params = {"workflowId": workflow_id}
        if include_data is not None:
            params["includeData"] = _bool_param(include_data)
        if status:
            params["status"] = status
        params.update(_page_params(limit, cursor))

        return await self.request("/executions", params=params)

    # ========================================================================
    # CREDENTIALS
    # ========================================================================

    async def create_credential(self, name: str, type: str, data: dict[str, Any]) -> Any:
        return await self.request(
            "/credentials",
            method="POST",
            json={"name": name, "type": type, "data": data},
        )

    async def get_credential_schema(self, credential_type_name: str) -> Any:
        return await self.request(f"/credentials/schema/{credential_type_name}")

    async def close(self):
        """Close HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
