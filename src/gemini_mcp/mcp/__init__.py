"""
JSON-RPC over HTTP transport for the MCP tools.
"""
