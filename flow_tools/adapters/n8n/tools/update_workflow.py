"""n8n Update Workflow Tool.

Partial update: only the fields the caller supplied are sent.
"""

from typing import Any

from flow_tools.base import ToolMetadata
from flow_tools.adapters.n8n.client import N8nClient
from flow_tools.adapters.n8n.schemas import UpdateWorkflowInput, Workflow, parse_input


class UpdateWorkflowTool:
    """Tool for updating an existing n8n workflow.

    Use Cases:
    - "Rename workflow 12 to 'Nightly sync'"
    - "Replace the nodes of workflow 12"
    """

    name = "update_workflow"
    description = "Update an existing N8N workflow"

    input_schema = {
        "type": "object",
        "properties": {
            "workflowId": {
                "type": "string",
                "description": "ID of the workflow to update",
            },
            "name": {
                "type": "string",
                "description": "New name of the workflow",
            },
            "nodes": {
                "type": "array",
                "description": "Updated array of workflow nodes",
                "items": {"type": "object"},
            },
            "connections": {
                "type": "object",
                "description": "Updated workflow connections configuration",
            },
        },
        "required": ["workflowId"],
    }

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["n8n.write", "n8n.workflows"],
        risk_level="medium",
    )

    def __init__(self, client: N8nClient):
        self.client = client

    async def execute(self, input_data: dict[str, Any]) -> str:
        """Execute update workflow.

        Returns:
            Confirmation naming the updated workflow id and name
        """
        input_obj = parse_input(UpdateWorkflowInput, input_data)

        result = await self.client.update_workflow(
            input_obj.workflow_id,
            input_obj.update_body(),
        )
        workflow = Workflow.model_construct(**result)
        return f"Updated workflow {workflow.id}: {workflow.name}"
