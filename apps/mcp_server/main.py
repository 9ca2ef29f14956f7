"""
mcp-n8n-workflow MCP Server Entry Point.

This module:
- Loads settings once from the environment
- Configures structured logging (stderr) and the optional metrics exporter
- Wires the n8n client, tool registry, dispatcher and note store into an
  MCP server
- Serves MCP over stdin/stdout until the stream closes

Run with `mcp-n8n-workflow` or `python -m apps.mcp_server`.
"""

import asyncio
import sys
from typing import Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from pydantic import ValidationError

from flow_config.settings import ConfigurationError, Settings
from flow_obs.logging import get_logger, setup_logging
from flow_obs.metrics import start_metrics_server
from flow_tools.adapters.n8n import N8nClient, register_n8n_tools
from flow_tools.dispatcher import ToolDispatcher
from flow_tools.registry import ToolRegistry
from flow_tools.resources.notes import NOTE_MIME_TYPE, NoteStore

logger = get_logger(__name__)


class N8nMcpServer:
    """MCP handlers for n8n tools and note resources."""

    def __init__(
        self,
        settings: Settings,
        client: N8nClient | None = None,
        notes: NoteStore | None = None,
    ):
        """Initialize server components.

        Args:
            settings: Application settings
            client: Optional n8n client (created from settings if None)
            notes: Optional note store (default notes if None)
        """
        self.settings = settings
        self.client = client or N8nClient.from_settings(settings)
        self.registry = ToolRegistry()
        register_n8n_tools(self.registry, self.client)
        self.dispatcher = ToolDispatcher(self.registry)
        self.notes = notes or NoteStore()

    async def list_tools(self) -> list[types.Tool]:
        return [
            types.Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.input_schema,
            )
            for tool in self.registry.list_tools()
        ]

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        text = await self.dispatcher.call(name, arguments)
        return [types.TextContent(type="text", text=text)]

    async def list_resources(self) -> list[types.Resource]:
        return self.notes.list_resources()

    async def read_resource(self, uri: Any) -> list[ReadResourceContents]:
        content = self.notes.read(str(uri))
        return [ReadResourceContents(content=content, mime_type=NOTE_MIME_TYPE)]

    def build(self) -> Server:
        """Create the MCP server with all handlers registered."""
        server = Server(self.settings.MCP_SERVER_NAME, version=self.settings.MCP_SERVER_VERSION)

        server.list_tools()(self.list_tools)
        # Arguments are validated by the tool input models, not the SDK
        server.call_tool(validate_input=False)(self.call_tool)
        server.list_resources()(self.list_resources)
        server.read_resource()(self.read_resource)

        return server

    async def close(self) -> None:
        await self.client.close()


async def serve(settings: Settings) -> None:
    """Run the MCP server over stdio until the client disconnects."""
    app = N8nMcpServer(settings)
    server = app.build()

    logger.info(
        "mcp_server_starting",
        server_name=settings.MCP_SERVER_NAME,
        n8n_base_url=app.client.base_url,
        tools=len(app.registry),
    )

    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await app.close()
        logger.info("mcp_server_stopped")


def run() -> None:
    """Console entry point."""
    try:
        settings = Settings()
    except (ConfigurationError, ValidationError) as e:
        # Logging is not configured yet and stdout belongs to the protocol
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(settings)

    if start_metrics_server(settings):
        logger.info("metrics_server_started", port=settings.METRICS_PORT)

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("mcp_server_interrupted")
    except Exception:
        logger.exception("mcp_server_failed")
        sys.exit(1)


if __name__ == "__main__":
    run()
