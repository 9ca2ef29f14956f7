"""n8n adapter exceptions.

Custom exception hierarchy for n8n API errors.
"""

from flow_tools.exceptions import ToolError


class N8nAdapterError(ToolError):
    """Base exception for n8n adapter."""

    pass


class N8nAPIError(N8nAdapterError):
    """Non-2xx response from the n8n REST API.

    Only the status line is kept; the response body is not inspected.
    """

    def __init__(self, message: str, status_code: int | None = None, status_text: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.status_text = status_text


class N8nValidationError(N8nAdapterError):
    """Missing or invalid tool arguments."""

    pass
