"""n8n Get Workflow Tool."""

from typing import Any

from flow_tools.base import ToolMetadata, format_json
from flow_tools.adapters.n8n.client import N8nClient
from flow_tools.adapters.n8n.schemas import GetWorkflowInput, parse_input


class GetWorkflowTool:
    """Tool for fetching a single n8n workflow with its nodes and connections."""

    name = "get_workflow"
    description = "Get a specific N8N workflow by ID"

    input_schema = {
        "type": "object",
        "properties": {
            "workflowId": {
                "type": "string",
                "description": "ID of the workflow to fetch",
            },
        },
        "required": ["workflowId"],
    }

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["n8n.read", "n8n.workflows"],
        risk_level="low",
    )

    def __init__(self, client: N8nClient):
        self.client = client

    async def execute(self, input_data: dict[str, Any]) -> str:
        input_obj = parse_input(GetWorkflowInput, input_data)

        workflow = await self.client.get_workflow(input_obj.workflow_id)
        return format_json(workflow)
