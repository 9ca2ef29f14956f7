from apps.mcp_server.main import run

run()
