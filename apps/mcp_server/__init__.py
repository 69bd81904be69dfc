"""MCP server application: session adapter and HTTP entry point."""
