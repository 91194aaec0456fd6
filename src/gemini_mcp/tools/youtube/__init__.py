"""
YouTube video analysis tool for the Gemini MCP server.
"""
from mcp import types

from ..base import ToolContext, ToolRegistry
from ..schemas import text_block
from ..utils import build_generation_config, response_text
from .schemas import YouTubeArguments
from .utils import build_video_contents, format_video_analysis, normalize_youtube_url

ANNOTATIONS = types.ToolAnnotations(
    readOnlyHint=True,
    idempotentHint=False,
    openWorldHint=True
)


def register(registry: ToolRegistry) -> None:
    """Register the video analysis tool."""

    @registry.tool(
        name="gemini_youtube",
        title="Gemini YouTube Analysis",
        arguments=YouTubeArguments,
        annotations=ANNOTATIONS
    )
    async def gemini_youtube(args: YouTubeArguments, ctx: ToolContext) -> list[types.TextContent]:
        """Analyze YouTube videos - transcribe, summarize, answer questions about video content.

        Supports public YouTube videos only. Can process specific video segments
        using start/end offsets.
        """
        video_url = normalize_youtube_url(args.youtube_url)
        response = await ctx.client.aio.models.generate_content(
            model=args.model,
            contents=build_video_contents(video_url, args.prompt, args.start_offset, args.end_offset),
            config=build_generation_config(args)
        )
        text = format_video_analysis(video_url, response_text(response), args.start_offset, args.end_offset)
        return [text_block(text)]
