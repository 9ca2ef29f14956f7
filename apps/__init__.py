"""
mcp-n8n-workflow Applications Package.

Contains:
- mcp_server: MCP server over stdio exposing n8n tools and note resources
"""

__version__ = "0.1.0"
