"""n8n adapter Pydantic schemas.

Input schemas for all n8n tools, plus pass-through shapes for the records
the n8n API returns.

Argument coercion (pydantic lax mode):
- workflowId: str, or int converted to str; empty string rejected
- active / includeData: bool, "true"/"false", 0/1
- limit: int or integral numeric string
- status: error | success | waiting
"""

from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import N8nValidationError

ExecutionStatus = Literal["error", "success", "waiting"]


# ============================================================================
# N8N RECORDS (pass-through, never validated)
# ============================================================================


class N8nRecord(BaseModel):
    """Base for records returned by n8n.

    Built with model_construct() so an unexpected server shape never turns
    a successful call into an error.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Workflow(N8nRecord):
    """Workflow as returned by n8n."""

    id: str | int | None = None
    name: str | None = None
    active: bool | None = None
    nodes: list[dict[str, Any]] = Field(default_factory=list)
    connections: dict[str, Any] = Field(default_factory=dict)


class Credential(N8nRecord):
    """Credential as returned by n8n after creation."""

    id: str | None = None
    name: str | None = None
    type: str | None = None
    data: dict[str, Any] = Field(default_factory=dict)


# ============================================================================
# TOOL INPUTS
# ============================================================================


class ToolInput(BaseModel):
    """Base for tool argument models.

    Arguments arrive in camelCase (workflowId); snake_case is accepted too.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class WorkflowRef(ToolInput):
    """Arguments that address a single workflow."""

    workflow_id: str = Field(..., alias="workflowId", min_length=1, description="ID of the workflow")

    @field_validator("workflow_id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class ListWorkflowsInput(ToolInput):
    """Input schema for ListWorkflowsTool."""

    active: bool | None = Field(None, description="Whether to filter by active workflows")
    tags: str | None = Field(None, description="Comma separated list of tags")
    limit: int | None = Field(None, description="Maximum number of workflows to return")
    cursor: str | None = Field(None, description="Cursor for pagination")


class GetWorkflowInput(WorkflowRef):
    """Input schema for GetWorkflowTool."""


class CreateWorkflowInput(ToolInput):
    """Input schema for CreateWorkflowTool."""

    name: str = Field(..., min_length=1, description="Name of the workflow")
    nodes: list[dict[str, Any]] = Field(..., description="Array of workflow nodes")
    connections: dict[str, Any] = Field(..., description="Workflow connections configuration")


class UpdateWorkflowInput(WorkflowRef):
    """Input schema for UpdateWorkflowTool.

    Unknown fields are kept and forwarded to n8n with the update.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str | None = Field(None, description="New name of the workflow")
    nodes: list[dict[str, Any]] | None = Field(None, description="Updated array of workflow nodes")
    connections: dict[str, Any] | None = Field(None, description="Updated workflow connections")

    def update_body(self) -> dict[str, Any]:
        """Fields the caller supplied, without the workflow identifier."""
        body = {
            field: getattr(self, field)
            for field in ("name", "nodes", "connections")
            if field in self.model_fields_set
        }
        body.update(self.model_extra or {})
        return body


class GetWorkflowExecutionsInput(WorkflowRef):
    """Input schema for GetWorkflowExecutionsTool."""

    include_data: bool | None = Field(None, alias="includeData")
    status: ExecutionStatus | None = None
    limit: int | None = None
    cursor: str | None = None


class ActivateWorkflowInput(WorkflowRef):
    """Input schema for ActivateWorkflowTool."""

    active: bool = Field(..., description="True to activate, False to deactivate")


class CreateCredentialInput(ToolInput):
    """Input schema for CreateCredentialTool."""

    name: str = Field(..., min_length=1)
    credential_type: str = Field(..., alias="type", min_length=1)
    data: dict[str, Any] = Field(...)


class GetCredentialSchemaInput(ToolInput):
    """Input schema for GetCredentialSchemaTool."""

    credential_type_name: str = Field(..., alias="credentialTypeName", min_length=1)


InputT = TypeVar("InputT", bound=ToolInput)


def parse_input(model: type[InputT], input_data: dict[str, Any] | None) -> InputT:
    """Build a tool input model from the raw argument bag.

    Raises:
        N8nValidationError: naming every missing or invalid argument
    """
    try:
        return model.model_validate(input_data or {})
    except ValidationError as e:
        problems = []
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]) or "arguments"
            if error["type"] == "missing" or error.get("input") is None:
                problems.append(f"Missing required argument: {field}")
            else:
                problems.append(f"Invalid argument {field}: {error['msg']}")
        raise N8nValidationError("; ".join(problems)) from e
