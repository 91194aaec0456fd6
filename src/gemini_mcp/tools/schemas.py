"""
Tool schema definitions for the Gemini MCP server.

ToolArguments: closed (extra fields forbidden) base for every tool's input model.
ToolDefinition: internal storage that includes the handler.
validate_arguments: the one validator every tool call goes through.

NOTE:
1. The arguments model is the schema. tools/list advertises its JSON Schema and
   tools/call validates against it, so the two can never drift apart.
2. Scalar fields are strict: "0.5" is not a temperature, True is not a top_k.
"""
from dataclasses import dataclass
from typing import Annotated, Any, Awaitable, Callable, Mapping, Optional

from mcp import types
from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, model_validator

from ..errors import InvalidArgumentsError

NonEmptyStr = Annotated[str, Field(strict=True, min_length=1)]
Temperature = Annotated[float, Field(strict=True, ge=0, le=2)]
TopP = Annotated[float, Field(strict=True, ge=0, le=1)]
PositiveInt = Annotated[int, Field(strict=True, ge=1)]


class ToolArguments(BaseModel):
    """Base for tool input models. Unknown fields are rejected."""
    model_config = ConfigDict(extra="forbid")


class GenerationArguments(ToolArguments):
    """Fields shared by every tool that calls Gemini."""
    model: Optional[NonEmptyStr] = Field(
        default=None,
        description="Gemini model variant to use (defaults to the server's active model)"
    )
    temperature: Optional[Temperature] = Field(default=None, description="Temperature for randomness (0-2)")
    max_tokens: Optional[PositiveInt] = Field(
        default=None,
        description="Maximum tokens to generate (integer >= 1; 100.0 is rejected)"
    )

    @model_validator(mode="after")
    def apply_default_model(self, info: ValidationInfo):
        if self.model is None and info.context:
            self.model = info.context.get("default_model")
        return self


class SamplingArguments(GenerationArguments):
    """Generation fields plus nucleus and top-k sampling."""
    top_p: Optional[TopP] = Field(default=None, description="Top-p sampling parameter (0-1)")
    top_k: Optional[PositiveInt] = Field(
        default=None,
        description="Top-k sampling parameter (integer >= 1; 40.0 is rejected)"
    )


def validate_arguments(
    arguments_model: type[ToolArguments],
    raw: Any,
    default_model: Optional[str] = None
) -> ToolArguments:
    """
    Validate a raw argument record against a tool's arguments model.

    Args:
        arguments_model: The tool's ToolArguments subclass
        raw: Arguments as received from the caller (None means no arguments)
        default_model: Substituted for an absent "model" field

    Returns:
        Validated arguments instance

    Raises:
        InvalidArgumentsError: Listing every violation found
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise InvalidArgumentsError([("arguments", "Input should be an object")])

    try:
        return arguments_model.model_validate(dict(raw), context={"default_model": default_model})
    except ValidationError as error:
        violations = [
            (".".join(str(part) for part in err["loc"]) or "arguments", err["msg"])
            for err in error.errors()
        ]
        raise InvalidArgumentsError(violations) from None


def text_block(text: str) -> types.TextContent:
    """Wrap text in an MCP text content block."""
    return types.TextContent(type="text", text=text)


ToolHandler = Callable[[Any, Any], Awaitable[list[types.TextContent]]]


@dataclass(frozen=True)
class ToolDefinition:
    """
    Internal tool storage.
    Includes the handler to execute.
    """
    name: str
    title: str
    description: str
    arguments_model: type[ToolArguments]
    handler: ToolHandler
    annotations: Optional[types.ToolAnnotations] = None

    def to_schema(self) -> types.Tool:
        """Convert to MCP-compliant format (drops handler)."""
        return types.Tool(
            name=self.name,
            title=self.title,
            description=self.description,
            inputSchema=self.arguments_model.model_json_schema(),
            annotations=self.annotations
        )
