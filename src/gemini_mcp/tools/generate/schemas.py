"""
Pydantic schema for the gemini_generate tool.
"""
from pydantic import Field

from ..schemas import NonEmptyStr, SamplingArguments


class GenerateArguments(SamplingArguments):
    """Single-prompt generation."""

    prompt: NonEmptyStr = Field(description="The input text or prompt for Gemini")
