"""
Grounding metadata formatting for the search tool.
"""
from typing import Optional

from google.genai import types as genai_types


def grounding_metadata(response: genai_types.GenerateContentResponse) -> Optional[genai_types.GroundingMetadata]:
    """Grounding metadata of the first candidate, if any."""
    if not response.candidates:
        return None
    return response.candidates[0].grounding_metadata


def format_search_response(
    text: str,
    metadata: Optional[genai_types.GroundingMetadata]
) -> str:
    """Append the search queries and the cited sources to the answer.

    Args:
        text: Answer text from Gemini
        metadata: Grounding metadata, None when the answer was not grounded

    Returns:
        text, followed by a "Search Queries" section and then a "Sources"
        section. Each section only appears when it has entries.
    """
    if metadata is None:
        return text

    formatted = text

    queries = metadata.web_search_queries or []
    if queries:
        formatted += "\n\n**Search Queries:**\n"
        for query in queries:
            formatted += f"- {query}\n"

    sources = [chunk.web for chunk in (metadata.grounding_chunks or []) if chunk.web]
    if sources:
        formatted += "\n**Sources:**\n"
        for web in sources:
            formatted += f"- [{web.title or 'Source'}]({web.uri})\n"

    return formatted
