"""Tool Interface & Metadata."""

import json
from typing import Any, Protocol

from pydantic import BaseModel


class ToolMetadata(BaseModel):
    """Tool capability metadata."""

    idempotent: bool = False
    capabilities: list[str] = []
    risk_level: str = "low"


class Tool(Protocol):
    """Tool interface."""

    name: str
    description: str
    input_schema: dict[str, Any]
    metadata: ToolMetadata

    async def execute(self, input_data: dict[str, Any]) -> str:
        """Execute tool action and return the text shown to the caller."""
        ...


def format_json(result: Any) -> str:
    """Render an API result the way read tools return it."""
    return json.dumps(result, indent=2)
