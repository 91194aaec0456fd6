"""
Multi-turn chat tool for the Gemini MCP server.
"""
from google.genai import types as genai_types
from mcp import types

from ..base import ToolContext, ToolRegistry
from ..schemas import text_block
from ..utils import build_generation_config, response_text
from .schemas import ChatMessage, MessagesArguments

# Gemini calls the assistant side of a conversation "model"
GEMINI_ROLES = {"user": "user", "assistant": "model"}

ANNOTATIONS = types.ToolAnnotations(
    readOnlyHint=True,
    idempotentHint=False,
    openWorldHint=True
)


def to_contents(messages: list[ChatMessage]) -> list[genai_types.Content]:
    return [
        genai_types.Content(
            role=GEMINI_ROLES[message.role],
            parts=[genai_types.Part(text=message.content)]
        )
        for message in messages
    ]


def register(registry: ToolRegistry) -> None:
    """Register the chat tool."""

    @registry.tool(
        name="gemini_messages",
        title="Gemini Chat",
        arguments=MessagesArguments,
        annotations=ANNOTATIONS
    )
    async def gemini_messages(args: MessagesArguments, ctx: ToolContext) -> list[types.TextContent]:
        """Generate text using Gemini with structured conversation messages (roles: user, assistant)."""
        response = await ctx.client.aio.models.generate_content(
            model=args.model,
            contents=to_contents(args.messages),
            config=build_generation_config(args)
        )
        return [text_block(response_text(response))]
