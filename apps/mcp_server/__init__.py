"""
mcp-n8n-workflow MCP Server.

Exposes over stdio:
- tools: n8n workflow, execution and credential operations
- resources: note:/// placeholder notes
"""
