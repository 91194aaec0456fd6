"""
Gemini MCP Tools Registry.

This module provides centralized tool registration for the MCP server.
"""
from . import generate, messages, search, status, youtube
from .base import ToolContext, ToolRegistry
from .dispatch import Dispatcher


def register_all_tools(registry: ToolRegistry) -> None:
    """Register all tools with the registry.

    Args:
        registry: The registry to fill (must not be sealed yet)
    """
    generate.register(registry)
    messages.register(registry)
    search.register(registry)
    youtube.register(registry)
    status.register(registry)


def build_registry() -> ToolRegistry:
    """Create a registry holding every tool, sealed against further registration."""
    registry = ToolRegistry()
    register_all_tools(registry)
    registry.seal()
    return registry


__all__ = ["Dispatcher", "ToolContext", "ToolRegistry", "build_registry", "register_all_tools"]
