"""
Pydantic schema for the gemini_youtube tool.
"""
from typing import Annotated, Optional

from pydantic import Field, model_validator

from ..schemas import GenerationArguments, NonEmptyStr

# Gemini video offsets are durations in seconds, e.g. "60s" or "90.5s"
Offset = Annotated[str, Field(strict=True, pattern=r"^\d+(\.\d+)?s$")]


def offset_seconds(offset: str) -> float:
    return float(offset[:-1])


class YouTubeArguments(GenerationArguments):
    """Video analysis, optionally limited to a segment."""

    youtube_url: NonEmptyStr = Field(
        description="YouTube video URL (e.g. https://www.youtube.com/watch?v=... or https://youtu.be/...)"
    )
    prompt: NonEmptyStr = Field(
        description="Question, instruction, or task about the video (e.g. 'Summarize this video')"
    )
    start_offset: Optional[Offset] = Field(default=None, description="Start time offset in seconds (e.g. '60s')")
    end_offset: Optional[Offset] = Field(default=None, description="End time offset in seconds (e.g. '120s')")

    @model_validator(mode="after")
    def check_segment(self):
        if self.start_offset and self.end_offset:
            if offset_seconds(self.end_offset) <= offset_seconds(self.start_offset):
                raise ValueError("end_offset must be after start_offset")
        return self
