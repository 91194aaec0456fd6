"""
MCP server - FastAPI routes for JSON-RPC requests.
"""
from fastapi import APIRouter, Request

from .models import (
    MCPRequest,
    ERROR_METHOD_NOT_FOUND
)
from .utils import error_response, handle_tools_call, handle_tools_list

router = APIRouter()


@router.post("/mcp")
async def mcp_endpoint(payload: MCPRequest, request: Request):
    """
    Main MCP endpoint.
    Routes requests based on method field.
    """
    dispatcher = request.app.state.dispatcher

    # Route: tools/list
    if payload.method == "tools/list":
        return handle_tools_list(payload, dispatcher)

    # Route: tools/call
    elif payload.method == "tools/call":
        return await handle_tools_call(payload, dispatcher)

    # Error: unknown method
    else:
        return error_response(payload, ERROR_METHOD_NOT_FOUND, f"Method '{payload.method}' not found")
