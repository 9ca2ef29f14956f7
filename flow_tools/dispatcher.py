"""Tool call dispatcher.

Routes a named call with its argument bag to the registered tool. Each call
is independent; errors propagate to the caller (the MCP layer turns them
into an error result for that call only).
"""

import time
from typing import Any

from flow_obs.logging import get_logger
from flow_obs.metrics import tool_execution_duration, tool_executions_total
from flow_tools.exceptions import UnknownToolError
from flow_tools.registry import ToolRegistry

logger = get_logger(__name__)


class ToolDispatcher:
    """Dispatches tool calls against a ToolRegistry."""

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    async def call(self, name: str, arguments: dict[str, Any] | None = None) -> str:
        """Run one tool call.

        Args:
            name: Registered tool name
            arguments: Raw arguments from the caller

        Returns:
            Text content for the caller

        Raises:
            UnknownToolError: No tool with that name
            ToolError: Validation or n8n API failure
        """
        tool = self.registry.get(name)
        if tool is None:
            logger.warning("tool_call_unknown", tool_name=name)
            raise UnknownToolError(f"Unknown tool: {name}")

        logger.info("tool_call_started", tool_name=name)
        started = time.perf_counter()

        try:
            with tool_execution_duration.labels(tool_name=name).time():
                text = await tool.execute(arguments or {})
        except Exception as e:
            tool_executions_total.labels(tool_name=name, status="failure").inc()
            logger.error(
                "tool_call_failed",
                tool_name=name,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        tool_executions_total.labels(tool_name=name, status="success").inc()
        logger.info(
            "tool_call_completed",
            tool_name=name,
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return text
