"""mcp-n8n-workflow Tool System.

Tool interface, registry, dispatcher and resource stores.
"""

from flow_tools.base import Tool, ToolMetadata
from flow_tools.dispatcher import ToolDispatcher
from flow_tools.exceptions import ResourceNotFoundError, ToolError, UnknownToolError
from flow_tools.registry import ToolRegistry

__all__ = [
    "Tool",
    "ToolMetadata",
    "ToolRegistry",
    "ToolDispatcher",
    "ToolError",
    "UnknownToolError",
    "ResourceNotFoundError",
]
