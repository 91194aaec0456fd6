"""
Search tools for the Gemini MCP server.
"""
from google.genai import types as genai_types
from mcp import types

from ..base import ToolContext, ToolRegistry
from ..schemas import text_block
from ..utils import build_generation_config, response_text
from .schemas import SearchArguments
from .utils import format_search_response, grounding_metadata

ANNOTATIONS = types.ToolAnnotations(
    readOnlyHint=True,
    idempotentHint=False,
    openWorldHint=True
)


def register(registry: ToolRegistry) -> None:
    """Register search tools."""

    @registry.tool(
        name="gemini_search",
        title="Gemini Search",
        arguments=SearchArguments,
        annotations=ANNOTATIONS
    )
    async def gemini_search(args: SearchArguments, ctx: ToolContext) -> list[types.TextContent]:
        """Search the web and generate an AI response with citations using Gemini + Google Search grounding."""
        google_search = genai_types.Tool(google_search=genai_types.GoogleSearch())
        response = await ctx.client.aio.models.generate_content(
            model=args.model,
            contents=args.query,
            config=build_generation_config(args, tools=[google_search])
        )
        text = format_search_response(response_text(response), grounding_metadata(response))
        return [text_block(text)]
