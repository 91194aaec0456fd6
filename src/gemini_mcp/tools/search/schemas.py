"""
Pydantic schema for the gemini_search tool.
"""
from pydantic import Field

from ..schemas import GenerationArguments, NonEmptyStr


class SearchArguments(GenerationArguments):
    """Google Search grounded generation."""

    query: NonEmptyStr = Field(description="The search query or question")
