"""n8n Get Workflow Executions Tool.

Fetch the execution history of one workflow.
"""

from typing import Any

from flow_tools.base import ToolMetadata, format_json
from flow_tools.adapters.n8n.client import N8nClient
from flow_tools.adapters.n8n.schemas import GetWorkflowExecutionsInput, parse_input


class GetWorkflowExecutionsTool:
    """Tool for listing executions of an n8n workflow.

    Capabilities:
    - Filter by status (error, success, waiting)
    - Optionally include each execution's data
    - Page through results with a cursor (page size capped at 25)

    Use Cases:
    - "Did workflow 7 fail recently?"
    - "Show the last successful runs of the invoice workflow"
    """

    name = "get_workflow_executions"
    description = "Get the execution history of a workflow"

    input_schema = {
        "type": "object",
        "properties": {
            "workflowId": {
                "type": "string",
                "description": "ID of the workflow",
            },
            "includeData": {
                "type": "boolean",
                "description": "Whether to include the execution's detailed data",
            },
            "status": {
                "type": "string",
                "enum": ["error", "success", "waiting"],
                "description": "Status to filter the executions by",
            },
            "limit": {
                "type": "number",
                "maximum": 250,
                "description": "Maximum number of executions to return (max: 250)",
            },
            "cursor": {
                "type": "string",
                "description": "Cursor for pagination",
            },
        },
        "required": ["workflowId"],
    }

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["n8n.read", "n8n.executions"],
        risk_level="low",
    )

    def __init__(self, client: N8nClient):
        """Initialize GetWorkflowExecutionsTool.

        Args:
            client: Shared n8n API client
        """
        self.client = client

    async def execute(self, input_data: dict[str, Any]) -> str:
        """Execute get workflow executions.

        Args:
            input_data: Tool input matching GetWorkflowExecutionsInput schema

        Returns:
            The n8n response as pretty-printed JSON

        Raises:
            N8nValidationError: Missing workflowId or invalid filters
            N8nAPIError: API errors
        """
        input_obj = parse_input(GetWorkflowExecutionsInput, input_data)

        executions = await self.client.get_workflow_executions(
            input_obj.workflow_id,
            include_data=input_obj.include_data,
            status=input_obj.status,
            limit=input_obj.limit,
            cursor=input_obj.cursor,
        )
        return format_json(executions)
