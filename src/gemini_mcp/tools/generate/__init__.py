"""
Text generation tool for the Gemini MCP server.
"""
from mcp import types

from ..base import ToolContext, ToolRegistry
from ..schemas import text_block
from ..utils import build_generation_config, response_text
from .schemas import GenerateArguments

ANNOTATIONS = types.ToolAnnotations(
    readOnlyHint=True,
    idempotentHint=False,
    openWorldHint=True
)


def register(registry: ToolRegistry) -> None:
    """Register the generate tool."""

    @registry.tool(
        name="gemini_generate",
        title="Gemini Generate",
        arguments=GenerateArguments,
        annotations=ANNOTATIONS
    )
    async def gemini_generate(args: GenerateArguments, ctx: ToolContext) -> list[types.TextContent]:
        """Generate text using Google Gemini AI with a simple input prompt."""
        response = await ctx.client.aio.models.generate_content(
            model=args.model,
            contents=args.prompt,
            config=build_generation_config(args)
        )
        return [text_block(response_text(response))]
