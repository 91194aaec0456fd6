"""
Helpers shared by the Gemini tool handlers.
"""
from typing import Optional

from google.genai import types as genai_types

from .schemas import GenerationArguments

EMPTY_RESPONSE_TEXT = "(empty response)"


def build_generation_config(
    args: GenerationArguments,
    tools: Optional[list[genai_types.Tool]] = None
) -> Optional[genai_types.GenerateContentConfig]:
    """
    Map the optional generation fields onto a GenerateContentConfig.

    Only the values the caller supplied are forwarded. Returns None when there
    is nothing to send, so Gemini applies its own defaults.
    """
    params = {}
    if args.temperature is not None:
        params["temperature"] = args.temperature
    if args.max_tokens is not None:
        params["max_output_tokens"] = args.max_tokens

    # Only SamplingArguments carry these
    top_p = getattr(args, "top_p", None)
    top_k = getattr(args, "top_k", None)
    if top_p is not None:
        params["top_p"] = top_p
    if top_k is not None:
        params["top_k"] = top_k

    if tools:
        params["tools"] = tools

    return genai_types.GenerateContentConfig(**params) if params else None


def response_text(response: genai_types.GenerateContentResponse) -> str:
    """Text of the first candidate, or a placeholder when Gemini returned none."""
    return response.text or EMPTY_RESPONSE_TEXT
