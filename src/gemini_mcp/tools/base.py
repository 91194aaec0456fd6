"""
Tool registry and decorator for the Gemini MCP server.

The registry is filled once at startup (see tools/__init__.py), then sealed.
After sealing it is only read, so concurrent tool calls can share it freely.
"""
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from mcp import types

from ..config import Settings
from ..errors import ToolRegistrationError
from .schemas import ToolArguments, ToolDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolContext:
    """Shared, read-only state handed to every handler: the Gemini client and settings."""
    client: Any
    settings: Settings


class ToolRegistry:
    """Name -> ToolDefinition mapping, in registration order."""

    def __init__(self):
        self._tools: dict[str, ToolDefinition] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def register(self, definition: ToolDefinition) -> ToolDefinition:
        """
        Add a tool.

        Raises:
            ToolRegistrationError: If the name is taken or the registry is sealed
        """
        if self._sealed:
            raise ToolRegistrationError(
                f"Cannot register tool '{definition.name}': registry is sealed"
            )
        if definition.name in self._tools:
            raise ToolRegistrationError(f"Tool '{definition.name}' is already registered")
        self._tools[definition.name] = definition
        logger.debug("Registered tool %s", definition.name)
        return definition

    def tool(
        self,
        name: str,
        title: str,
        arguments: type[ToolArguments],
        description: Optional[str] = None,
        annotations: Optional[types.ToolAnnotations] = None
    ) -> Callable:
        """
        Decorator to register an async handler as a tool.

        Usage:
            @registry.tool(name="echo", title="Echo", arguments=EchoArguments)
            async def echo(args: EchoArguments, ctx: ToolContext) -> list[TextContent]:
                \"\"\"Returns what you send.\"\"\"
                return [text_block(args.message)]

        The handler's docstring is the description unless one is given.
        The handler itself is returned unchanged.
        """
        def decorator(func: Callable) -> Callable:
            self.register(ToolDefinition(
                name=name,
                title=title,
                description=description or inspect.getdoc(func) or title,
                arguments_model=arguments,
                handler=func,
                annotations=annotations
            ))
            return func

        return decorator

    def seal(self) -> None:
        """End the startup phase. Later register() calls fail."""
        self._sealed = True

    def get(self, name: str) -> Optional[ToolDefinition]:
        """Get a tool by name."""
        return self._tools.get(name)

    def list(self) -> list[types.Tool]:
        """Return the public metadata of all registered tools, in registration order."""
        return [definition.to_schema() for definition in self._tools.values()]

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools
