"""n8n Activate Workflow Tool."""

from typing import Any

from flow_tools.base import ToolMetadata
from flow_tools.adapters.n8n.client import N8nClient
from flow_tools.adapters.n8n.schemas import ActivateWorkflowInput, Workflow, parse_input


class ActivateWorkflowTool:
    """Tool for activating or deactivating an n8n workflow.

    Active workflows run on their triggers; inactive ones only run manually.
    """

    name = "activate_workflow"
    description = "Activate or deactivate a workflow"

    input_schema = {
        "type": "object",
        "properties": {
            "workflowId": {
                "type": "string",
                "description": "ID of the workflow",
            },
            "active": {
                "type": "boolean",
                "description": "Whether to activate (true) or deactivate (false) the workflow",
            },
        },
        "required": ["workflowId", "active"],
    }

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["n8n.write", "n8n.workflows"],
        risk_level="high",  # Starts or stops production automations
    )

    def __init__(self, client: N8nClient):
        self.client = client

    async def execute(self, input_data: dict[str, Any]) -> str:
        input_obj = parse_input(ActivateWorkflowInput, input_data)

        result = await self.client.activate_workflow(input_obj.workflow_id, input_obj.active)
        workflow = Workflow.model_construct(**result)

        workflow_id = workflow.id if workflow.id is not None else input_obj.workflow_id
        state = "activated" if input_obj.active else "deactivated"
        return f"Workflow {workflow_id} {state}"
