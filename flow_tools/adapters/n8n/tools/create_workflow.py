"""n8n Create Workflow Tool.

Create a new workflow from a node list and a connection graph.
"""

from typing import Any

from flow_tools.base import ToolMetadata
from flow_tools.adapters.n8n.client import N8nClient
from flow_tools.adapters.n8n.schemas import CreateWorkflowInput, Workflow, parse_input


class CreateWorkflowTool:
    """Tool for creating n8n workflows.

    The workflow is created inactive; n8n assigns its id.
    """

    name = "create_workflow"
    description = "Create a new N8N workflow"

    input_schema = {
        "type": "object",
        "properties": {
            "name": {
                "type": "string",
                "description": "Name of the workflow",
            },
            "nodes": {
                "type": "array",
                "description": "Array of workflow nodes",
                "items": {"type": "object"},
            },
            "connections": {
                "type": "object",
                "description": "Workflow connections configuration",
            },
        },
        "required": ["name", "nodes", "connections"],
    }

    metadata = ToolMetadata(
        idempotent=False,  # Creating twice creates two workflows
        capabilities=["n8n.write", "n8n.workflows"],
        risk_level="medium",
    )

    def __init__(self, client: N8nClient):
        """Initialize CreateWorkflowTool.

        Args:
            client: Shared n8n API client
        """
        self.client = client

    async def execute(self, input_data: dict[str, Any]) -> str:
        """Execute create workflow.

        Args:
            input_data: Tool input matching CreateWorkflowInput schema

        Returns:
            Confirmation naming the new workflow id and name
        """
        input_obj = parse_input(CreateWorkflowInput, input_data)

        result = await self.client.create_workflow(
            name=input_obj.name,
            nodes=input_obj.nodes,
            connections=input_obj.connections,
        )
        workflow = Workflow.model_construct(**result)
        return f"Created workflow {workflow.id}: {workflow.name}"
