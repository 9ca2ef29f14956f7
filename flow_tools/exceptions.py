"""Tool system exceptions.

Every error raised while serving a single tool call or resource read
derives from ToolError, so one failing call never takes the server down.
"""


class ToolError(Exception):
    """Base exception for tool calls and resource reads."""

    pass


class UnknownToolError(ToolError):
    """No tool registered under the requested name."""

    pass


class ResourceNotFoundError(ToolError):
    """Resource URI does not resolve to a known item."""

    pass
