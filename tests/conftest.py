"""Pytest fixtures."""

import httpx
import pytest

from flow_config.settings import Settings
from flow_tools.adapters.n8n import N8nClient, register_n8n_tools
from flow_tools.dispatcher import ToolDispatcher
from flow_tools.registry import ToolRegistry

N8N_TEST_HOST = "http://n8n.test:5678"
N8N_TEST_KEY = "test-api-key"


@pytest.fixture
def settings():
    """Settings isolated from the developer's .env file."""
    return Settings(_env_file=None, N8N_HOST=N8N_TEST_HOST, N8N_API_KEY=N8N_TEST_KEY)


@pytest.fixture
def recorded_requests():
    """Requests seen by the mock n8n server."""
    return []


@pytest.fixture
def make_client(recorded_requests):
    """Build an N8nClient backed by httpx.MockTransport.

    Every request is appended to `recorded_requests` and answered with
    the given JSON body and status code.
    """

    def factory(response=None, status_code=200, host=N8N_TEST_HOST):
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return httpx.Response(status_code, json=response if response is not None else {})

        return N8nClient(
            host=host,
            api_key=N8N_TEST_KEY,
            transport=httpx.MockTransport(handler),
        )

    return factory


@pytest.fixture
def make_dispatcher(make_client):
    """Build a ToolDispatcher with all n8n tools over a mock client."""

    def factory(response=None, status_code=200):
        registry = ToolRegistry()
        register_n8n_tools(registry, make_client(response, status_code))
        return ToolDispatcher(registry)

    return factory
