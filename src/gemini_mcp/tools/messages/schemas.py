"""
Pydantic schemas for the gemini_messages tool.
"""
from typing import Literal

from pydantic import Field

from ..schemas import NonEmptyStr, SamplingArguments, ToolArguments


class ChatMessage(ToolArguments):
    """One conversation turn."""

    role: Literal["user", "assistant"] = Field(description="Message role")
    content: NonEmptyStr = Field(description="Message content")


class MessagesArguments(SamplingArguments):
    """Multi-turn chat. At least one message is required."""

    messages: list[ChatMessage] = Field(
        min_length=1,
        description="Conversation messages, oldest first"
    )
