"""n8n adapter for mcp-n8n-workflow.

Provides tools for interacting with the n8n public API:
- List, get, create and update workflows
- Activate or deactivate workflows
- Fetch execution history
- Create credentials and look up credential schemas

Usage:
    from flow_tools.adapters.n8n import N8nClient, register_n8n_tools
    from flow_tools.registry import ToolRegistry

    registry = ToolRegistry()
    client = N8nClient(host="http://localhost:5678", api_key="...")
    register_n8n_tools(registry, client)
"""

from .client import N8nClient
from .exceptions import N8nAdapterError, N8nAPIError, N8nValidationError
from .schemas import (
    ActivateWorkflowInput,
    Credential,
    CreateCredentialInput,
    CreateWorkflowInput,
    GetCredentialSchemaInput,
    GetWorkflowExecutionsInput,
    GetWorkflowInput,
    ListWorkflowsInput,
    UpdateWorkflowInput,
    Workflow,
)
from .tools import (
    ActivateWorkflowTool,
    CreateCredentialTool,
    CreateWorkflowTool,
    GetCredentialSchemaTool,
    GetWorkflowExecutionsTool,
    GetWorkflowTool,
    ListWorkflowsTool,
    UpdateWorkflowTool,
)

__all__ = [
    # Client
    "N8nClient",
    # Exceptions
    "N8nAdapterError",
    "N8nAPIError",
    "N8nValidationError",
    # Schemas
    "Workflow",
    "Credential",
    "ListWorkflowsInput",
    "GetWorkflowInput",
    "CreateWorkflowInput",
    "UpdateWorkflowInput",
    "GetWorkflowExecutionsInput",
    "ActivateWorkflowInput",
    "CreateCredentialInput",
    "GetCredentialSchemaInput",
    # Tools
    "ListWorkflowsTool",
    "GetWorkflowTool",
    "CreateWorkflowTool",
    "UpdateWorkflowTool",
    "GetWorkflowExecutionsTool",
    "ActivateWorkflowTool",
    "CreateCredentialTool",
    "GetCredentialSchemaTool",
    "register_n8n_tools",
]


def register_n8n_tools(registry, client: N8nClient) -> None:
    """Register all n8n tools with the tool registry.

    All tools share one client, so one connection pool serves every call.

    Args:
        registry: ToolRegistry instance
        client: n8n API client
    """
    registry.register(ListWorkflowsTool(client))
    registry.register(GetWorkflowTool(client))
    registry.register(CreateWorkflowTool(client))
    registry.register(UpdateWorkflowTool(client))
    registry.register(GetWorkflowExecutionsTool(client))
    registry.register(ActivateWorkflowTool(client))
    registry.register(CreateCredentialTool(client))
    registry.register(GetCredentialSchemaTool(client))
