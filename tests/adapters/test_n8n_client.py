"""Tests for the n8n API client."""

import json

import pytest

from flow_tools.adapters.n8n import N8nAPIError, N8nClient


@pytest.mark.parametrize(
    "host",
    [
        "http://n8n.test:5678",
        "http://n8n.test:5678/",
        "http://n8n.test:5678/api/v1",
        "http://n8n.test:5678/api/v1/",
    ],
)
def test_normalize_host_adds_api_path_once(host):
    """Base URL always ends in exactly one /api/v1/."""
    assert N8nClient.normalize_host(host) == "http://n8n.test:5678/api/v1/"


def test_build_url_single_separator():
    """Leading slash on the endpoint does not double the separator."""
    client = N8nClient(host="http://n8n.test:5678", api_key="key")

    assert client.build_url("/workflows") == "http://n8n.test:5678/api/v1/workflows"
    assert client.build_url("workflows") == "http://n8n.test:5678/api/v1/workflows"


@pytest.mark.asyncio
async def test_request_sets_auth_and_content_type_headers(make_client, recorded_requests):
    """Every call carries the API key and JSON content type."""
    client = make_client(response={"data": []})

    await client.request("/workflows", headers={"X-Trace": "abc"})

    request = recorded_requests[0]
    assert request.headers["X-N8N-API-KEY"] == "test-api-key"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["X-Trace"] == "abc"


@pytest.mark.asyncio
async def test_request_raises_on_server_error_without_retry(make_client, recorded_requests):
    """HTTP 500 raises with the reason phrase after a single attempt."""
    client = make_client(response={"message": "boom"}, status_code=500)

    with pytest.raises(N8nAPIError) as exc_info:
        await client.get_workflow("1")

    assert "Internal Server Error" in str(exc_info.value)
    assert exc_info.value.status_code == 500
    assert exc_info.value.status_text == "Internal Server Error"
    assert len(recorded_requests) == 1


@pytest.mark.asyncio
async def test_request_raises_on_client_error(make_client):
    """4xx is treated the same as 5xx."""
    client = make_client(status_code=404)

    with pytest.raises(N8nAPIError, match="N8N API error: Not Found"):
        await client.get_workflow("missing")


class TestListWorkflows:
    """Query string shaping for list_workflows."""

    @pytest.mark.asyncio
    async def test_no_filters_sends_no_query(self, make_client, recorded_requests):
        client = make_client(response={"data": [], "nextCursor": None})

        result = await client.list_workflows()

        request = recorded_requests[0]
        assert request.method == "GET"
        assert request.url.path == "/api/v1/workflows"
        assert not request.url.params
        assert result == {"data": [], "nextCursor": None}

    @pytest.mark.asyncio
    async def test_unset_filters_are_absent(self, make_client, recorded_requests):
        client = make_client()

        await client.list_workflows(tags="billing")

        params = recorded_requests[0].url.params
        assert params["tags"] == "billing"
        for key in ("active", "limit", "cursor"):
            assert key not in params

    @pytest.mark.asyncio
    async def test_active_false_is_sent(self, make_client, recorded_requests):
        """False is a filter value, not an unset filter."""
        client = make_client()

        await client.list_workflows(active=False)

        assert recorded_requests[0].url.params["active"] == "false"

    @pytest.mark.asyncio
    async def test_all_filters(self, make_client, recorded_requests):
        client = make_client()

        await client.list_workflows(active=True, tags="a,b", limit=10, cursor="next-page")

        params = recorded_requests[0].url.params
        assert params["active"] == "true"
        assert params["tags"] == "a,b"
        assert params["limit"] == "10"
        assert params["cursor"] == "next-page"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit,expected", [(1, "1"), (25, "25"), (26, "25"), (250, "25")])
    async def test_limit_capped_at_25(self, make_client, recorded_requests, limit, expected):
        client = make_client()

        await client.list_workflows(limit=limit)

        assert recorded_requests[0].url.params["limit"] == expected

    @pytest.mark.asyncio
    async def test_zero_limit_is_omitted(self, make_client, recorded_requests):
        client = make_client()

        await client.list_workflows(limit=0)

        assert "limit" not in recorded_requests[0].url.params


class TestWorkflowWrites:
    """Create, update and activation requests."""

    @pytest.mark.asyncio
    async def test_create_workflow_body(self, make_client, recorded_requests):
        client = make_client(response={"id": "7", "name": "A"})

        result = await client.create_workflow(name="A", nodes=[], connections={})

        request = recorded_requests[0]
        assert request.method == "POST"
        assert request.url.path == "/api/v1/workflows"
        assert json.loads(request.content) == {"name": "A", "nodes": [], "connections": {}}
        assert result["id"] == "7"

    @pytest.mark.asyncio
    async def test_update_workflow_sends_given_fields_only(self, make_client, recorded_requests):
        client = make_client(response={"id": "7", "name": "B"})

        await client.update_workflow("7", {"name": "B"})

        request = recorded_requests[0]
        assert request.method == "PUT"
        assert request.url.path == "/api/v1/workflows/7"
        assert json.loads(request.content) == {"name": "B"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("active,action", [(True, "activate"), (False, "deactivate")])
    async def test_activate_workflow_sub_path(self, make_client, recorded_requests, active, action):
        client = make_client(response={"id": "42", "active": active})

        await client.activate_workflow("42", active)

        request = recorded_requests[0]
        assert request.method == "POST"
        assert request.url.path == f"/api/v1/workflows/42/{action}"

    @pytest.mark.asyncio
    async def test_get_workflow_twice_issues_two_requests(self, make_client, recorded_requests):
        """No caching between reads."""
        client = make_client(response={"id": "3", "name": "Sync", "nodes": []})

        first = await client.get_workflow("3")
        second = await client.get_workflow("3")

        assert len(recorded_requests) == 2
        assert first.keys() == second.keys()


class TestExecutions:
    """Query string shaping for get_workflow_executions."""

    @pytest.mark.asyncio
    async def test_workflow_id_always_sent(self, make_client, recorded_requests):
        client = make_client(response={"data": []})

        await client.get_workflow_executions("9")

        request = recorded_requests[0]
        assert request.url.path == "/api/v1/executions"
        assert dict(request.url.params) == {"workflowId": "9"}

    @pytest.mark.asyncio
    async def test_filters(self, make_client, recorded_requests):
        client = make_client(response={"data": []})

        await client.get_workflow_executions(
            "9", include_data=False, status="error", limit=100, cursor="c1"
        )

        params = recorded_requests[0].url.params
        assert params["workflowId"] == "9"
        assert params["includeData"] == "false"
        assert params["status"] == "error"
        assert params["limit"] == "25"
        assert params["cursor"] == "c1"


class TestCredentials:
    """Credential endpoints."""

    @pytest.mark.asyncio
    async def test_create_credential(self, make_client, recorded_requests):
        client = make_client(response={"id": "c1", "name": "GH", "type": "githubApi"})

        await client.create_credential(name="GH", type="githubApi", data={"accessToken": "x"})

        request = recorded_requests[0]
        assert request.method == "POST"
        assert request.url.path == "/api/v1/credentials"
        assert json.loads(request.content) == {
            "name": "GH",
            "type": "githubApi",
            "data": {"accessToken": "x"},
        }

    @pytest.mark.asyncio
    async def test_get_credential_schema(self, make_client, recorded_requests):
        client = make_client(response={"type": "object", "required": ["accessToken"]})

        result = await client.get_credential_schema("githubApi")

        assert recorded_requests[0].url.path == "/api/v1/credentials/schema/githubApi"
        assert result["required"] == ["accessToken"]
