"""
Mailer Applications Package.

Contains:
- mcp_server: FastAPI application hosting the MCP SSE transport
"""

__version__ = "0.2.0"
