"""n8n Create Credential Tool.

Use get_credential_schema first to learn which data fields a type needs.
"""

from typing import Any

from flow_tools.base import ToolMetadata
from flow_tools.adapters.n8n.client import N8nClient
from flow_tools.adapters.n8n.schemas import Credential, CreateCredentialInput, parse_input


class CreateCredentialTool:
    """Tool for creating n8n credentials."""

    name = "create_credential"
    description = "Create a new credential"

    input_schema = {
        "type": "object",
        "properties": {
            "name": {
                "type": "string",
                "description": "Name of the credential",
            },
            "type": {
                "type": "string",
                "description": "Type of the credential (e.g., 'githubApi')",
            },
            "data": {
                "type": "object",
                "description": "Credential data object containing the required fields",
            },
        },
        "required": ["name", "type", "data"],
    }

    metadata = ToolMetadata(
        idempotent=False,
        capabilities=["n8n.write", "n8n.credentials"],
        risk_level="high",  # Stores secrets
    )

    def __init__(self, client: N8nClient):
        self.client = client

    async def execute(self, input_data: dict[str, Any]) -> str:
        """Execute create credential.

        Returns:
            Confirmation naming the credential id, name and type
        """
        input_obj = parse_input(CreateCredentialInput, input_data)

        result = await self.client.create_credential(
            name=input_obj.name,
            type=input_obj.credential_type,
            data=input_obj.data,
        )
        credential = Credential.model_construct(**result)
        return f"Created credential {credential.id}: {credential.name} ({credential.type})"
