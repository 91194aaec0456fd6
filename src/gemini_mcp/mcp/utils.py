"""
MCP utilities - handler functions for processing JSON-RPC requests.
"""
from ..tools import Dispatcher
from .models import (
    ERROR_INVALID_PARAMS,
    MCPError,
    MCPRequest,
    MCPResponse,
)


def error_response(request: MCPRequest, code: int, message: str) -> dict:
    return MCPResponse(
        id=request.id,
        error=MCPError(code=code, message=message)
    ).model_dump(exclude_none=True)


def handle_tools_list(request: MCPRequest, dispatcher: Dispatcher) -> dict:
    """
    Handle tools/list request.
    Returns all registered tools in MCP format.
    """
    tools_json = [
        tool.model_dump(mode="json", by_alias=True, exclude_none=True)
        for tool in dispatcher.list_tools()
    ]
    return MCPResponse(
        id=request.id,
        result={"tools": tools_json}
    ).model_dump(exclude_none=True)


async def handle_tools_call(request: MCPRequest, dispatcher: Dispatcher) -> dict:
    """
    Handle tools/call request.
    Executes a tool and returns its CallToolResult. Tool failures are results
    with isError=true, not JSON-RPC errors.
    """
    params = request.params or {}
    tool_name = params.get("name")
    if not isinstance(tool_name, str) or not tool_name:
        return error_response(request, ERROR_INVALID_PARAMS, "tools/call requires a 'name' string")

    result = await dispatcher.dispatch(tool_name, params.get("arguments"))

    return MCPResponse(
        id=request.id,
        result=result.model_dump(mode="json", by_alias=True, exclude_none=True)
    ).model_dump(exclude_none=True)
