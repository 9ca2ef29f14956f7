"""n8n Get Credential Schema Tool."""

from typing import Any

from flow_tools.base import ToolMetadata, format_json
from flow_tools.adapters.n8n.client import N8nClient
from flow_tools.adapters.n8n.schemas import GetCredentialSchemaInput, parse_input


class GetCredentialSchemaTool:
    """Tool for fetching the data fields a credential type requires."""

    name = "get_credential_schema"
    description = "Get the required schema for a specific credential type"

    input_schema = {
        "type": "object",
        "properties": {
            "credentialTypeName": {
                "type": "string",
                "description": "Name of the credential type to get the schema for",
            },
        },
        "required": ["credentialTypeName"],
    }

    metadata = ToolMetadata(
        idempotent=True,
        capabilities=["n8n.read", "n8n.credentials"],
        risk_level="low",
    )

    def __init__(self, client: N8nClient):
        self.client = client

    async def execute(self, input_data: dict[str, Any]) -> str:
        input_obj = parse_input(GetCredentialSchemaInput, input_data)

        schema = await self.client.get_credential_schema(input_obj.credential_type_name)
        return format_json(schema)
