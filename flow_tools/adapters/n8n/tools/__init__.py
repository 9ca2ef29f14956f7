"""n8n tools."""

from .activate_workflow import ActivateWorkflowTool
from .create_credential import CreateCredentialTool
from .create_workflow import CreateWorkflowTool
from .get_credential_schema import GetCredentialSchemaTool
from .get_executions import GetWorkflowExecutionsTool
from .get_workflow import GetWorkflowTool
from .list_workflows import ListWorkflowsTool
from .update_workflow import UpdateWorkflowTool

__all__ = [
    "ListWorkflowsTool",
    "GetWorkflowTool",
    "CreateWorkflowTool",
    "UpdateWorkflowTool",
    "GetWorkflowExecutionsTool",
    "ActivateWorkflowTool",
    "CreateCredentialTool",
    "GetCredentialSchemaTool",
]
