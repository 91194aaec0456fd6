"""
Dispatcher - routes a tool call to its handler and normalizes the outcome.

Every call goes through the same pipeline:
    lookup -> validate -> invoke (exactly once) -> wrap into CallToolResult

Unknown tools, invalid arguments and handler failures all come back as a
CallToolResult with isError=True. Nothing raised by a single call escapes dispatch().
"""
import logging
from typing import Any, Optional

from mcp import types

from ..errors import InvalidArgumentsError, UpstreamErrorKind, classify_upstream_error
from .base import ToolContext, ToolRegistry
from .schemas import text_block, validate_arguments

logger = logging.getLogger(__name__)


def error_result(message: str) -> types.CallToolResult:
    return types.CallToolResult(content=[text_block(message)], isError=True)


class Dispatcher:
    """Transport-independent tool execution."""

    def __init__(self, registry: ToolRegistry, context: ToolContext):
        self.registry = registry
        self.context = context

    def list_tools(self) -> list[types.Tool]:
        return self.registry.list()

    async def dispatch(self, tool_name: str, arguments: Optional[Any] = None) -> types.CallToolResult:
        """
        Execute one tool call.

        Args:
            tool_name: Name of the registered tool
            arguments: Raw argument record from the caller

        Returns:
            CallToolResult, isError=True for every failure
        """
        # Step 1: Lookup
        tool = self.registry.get(tool_name)
        if tool is None:
            logger.info("Unknown tool requested: %s", tool_name, extra={"tool_name": tool_name})
            return error_result(f"Unknown tool: {tool_name}")

        # Step 2: Validate
        try:
            args = validate_arguments(
                tool.arguments_model,
                arguments,
                default_model=self.context.settings.active_model
            )
        except InvalidArgumentsError as e:
            logger.info("Invalid arguments for %s: %s", tool_name, e, extra={"tool_name": tool_name})
            return error_result(f"Invalid arguments for {tool_name}: {e}")

        # Step 3: Invoke
        logger.debug("Calling %s", tool_name, extra={"tool_name": tool_name})
        try:
            content = await tool.handler(args, self.context)
        except Exception as e:
            kind, message = classify_upstream_error(e, secrets=(self.context.settings.api_key,))
            extra = {"tool_name": tool_name, "error_kind": kind.value}
            if kind is UpstreamErrorKind.UNCLASSIFIED:
                logger.exception("Tool %s failed", tool_name, extra=extra)
            else:
                logger.warning("Tool %s failed (%s): %s", tool_name, kind.value, e, extra=extra)
            return error_result(message)

        # Step 4: Normalize
        logger.info("Tool %s completed", tool_name, extra={"tool_name": tool_name})
        return types.CallToolResult(content=list(content), isError=False)
