"""
Server status tool. Reports model configuration without calling Gemini.
"""
from mcp import types

from ..base import ToolContext, ToolRegistry
from ..schemas import ToolArguments, text_block


class StatusArguments(ToolArguments):
    """No arguments."""


ANNOTATIONS = types.ToolAnnotations(
    readOnlyHint=True,
    idempotentHint=True,
    openWorldHint=False
)


def format_status(ctx: ToolContext) -> str:
    settings = ctx.settings
    lines = [
        "**Gemini MCP Server Status**",
        "",
        f"Active model: {settings.active_model}",
        f"Configured model (GEMINI_MODEL): {settings.configured_model or '(not set)'}",
        f"Fallback model: {settings.fallback_model}",
        f"API key configured: {'yes' if settings.has_api_key else 'no'}",
    ]
    if settings.configured_model and settings.active_model != settings.configured_model:
        lines.append("")
        lines.append("Note: the configured model was not recognized, the fallback model is in use.")
    return "\n".join(lines)


def register(registry: ToolRegistry) -> None:
    """Register the status tool."""

    @registry.tool(
        name="gemini_status",
        title="Gemini Server Status",
        arguments=StatusArguments,
        annotations=ANNOTATIONS
    )
    async def gemini_status(args: StatusArguments, ctx: ToolContext) -> list[types.TextContent]:
        """Report the active, configured and fallback Gemini models and whether an API key is set."""
        return [text_block(format_status(ctx))]
