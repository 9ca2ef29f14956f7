"""n8n List Workflows Tool.

List workflows, optionally filtered by active flag and tags.
"""

from typing import Any

from flow_tools.base import ToolMetadata, format_json
from flow_tools.adapters.n8n.client import N8nClient
from flow_tools.adapters.n8n.schemas import ListWorkflowsInput, parse_input


class ListWorkflowsTool:
    """Tool for listing n8n workflows.

    Capabilities:
    - Filter by active/inactive
    - Filter by comma separated tags
    - Page through results with a cursor (page size capped at 25)

    Use Cases:
    - "Which workflows are active?"
    - "List workflows tagged 'billing'"
    """

    name = "list_workflows"
    description = "List all N8N workflows"

    input_schema = {
        "type": "object",
        "properties": {
            "active": {
                "type": "boolean",
                "description": "Whether to filter by active workflows",
            },
            "tags": {
                "type": "string",
                "description": "Tags to filter by. Comma separated list of tags",
            },
            "limit": {
                "type": "number",
                "maximum": 250,
                "description": "Maximum number of workflows to return",
            },
            "cursor": {
                "type": "string",
                "description": "Cursor for pagination",
            },
        },
        "required": [],
    }

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["n8n.read", "n8n.workflows"],
        risk_level="low",
    )

    def __init__(self, client: N8nClient):
        """Initialize ListWorkflowsTool.

        Args:
            client: Shared n8n API client
        """
        self.client = client

    async def execute(self, input_data: dict[str, Any]) -> str:
        """Execute list workflows.

        Args:
            input_data: Tool input matching ListWorkflowsInput schema

        Returns:
            The n8n response as pretty-printed JSON

        Raises:
            N8nValidationError: Invalid arguments
            N8nAPIError: API errors
        """
        input_obj = parse_input(ListWorkflowsInput, input_data)

        workflows = await self.client.list_workflows(
            active=input_obj.active,
            tags=input_obj.tags,
            limit=input_obj.limit,
            cursor=input_obj.cursor,
        )
        return format_json(workflows)
