"""
Error types and upstream failure classification for the Gemini MCP server.

Two channels:
1. Fatal errors (ConfigurationError, ToolRegistrationError) stop the process at startup.
2. Per-call failures (bad arguments, Gemini API errors) are turned into error envelopes
   by the dispatcher and never leave it.
"""
from enum import Enum

import httpx


class GeminiMCPError(Exception):
    """Base exception for all Gemini MCP errors."""


class ConfigurationError(GeminiMCPError):
    """Missing credential or malformed configuration value."""


class ToolRegistrationError(GeminiMCPError):
    """Duplicate tool name or registration after the registry was sealed."""


class InvalidArgumentsError(GeminiMCPError):
    """
    Tool arguments did not match the tool's schema.

    violations holds (field path, message) pairs, one per problem found.
    """

    def __init__(self, violations: list[tuple[str, str]]):
        self.violations = violations
        super().__init__("; ".join(f"{path}: {message}" for path, message in violations))


class UpstreamErrorKind(str, Enum):
    """Kinds of Gemini API failure, each with its own user-facing message."""
    INVALID_CREDENTIAL = "invalid_credential"
    QUOTA_EXCEEDED = "quota_exceeded"
    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    UNCLASSIFIED = "unclassified"


UPSTREAM_MESSAGES = {
    UpstreamErrorKind.INVALID_CREDENTIAL: (
        "Error: Invalid or missing Google API key. "
        "Check the GOOGLE_API_KEY environment variable."
    ),
    UpstreamErrorKind.QUOTA_EXCEEDED: (
        "Error: Gemini API quota or rate limit exceeded. "
        "Wait a moment and retry the request."
    ),
    UpstreamErrorKind.PERMISSION_DENIED: (
        "Error: Access denied. The requested resource is private or restricted; "
        "only public YouTube videos can be analyzed."
    ),
    UpstreamErrorKind.NOT_FOUND: (
        "Error: Resource not found. Check the model name and, for video analysis, "
        "that the YouTube URL points to an existing video."
    ),
    UpstreamErrorKind.TIMEOUT: (
        "Error: The Gemini request timed out. "
        "Try a shorter prompt or a smaller video segment."
    ),
}

# Status codes are checked across every rule before any message text; first match wins
_RULES = [
    (UpstreamErrorKind.INVALID_CREDENTIAL, {401}, ("api key", "api_key", "unauthenticated")),
    (UpstreamErrorKind.QUOTA_EXCEEDED, {429}, ("quota", "rate limit", "resource_exhausted", "too many requests")),
    (UpstreamErrorKind.PERMISSION_DENIED, {403}, ("permission", "private video", "forbidden")),
    (UpstreamErrorKind.NOT_FOUND, {404}, ("not found", "not_found")),
    (UpstreamErrorKind.TIMEOUT, {408, 504}, ("timeout", "timed out", "deadline")),
]


def _redact(text: str, secrets: tuple[str, ...]) -> str:
    for secret in secrets:
        if secret:
            text = text.replace(secret, "***")
    return text


def classify_upstream_error(
    error: BaseException,
    secrets: tuple[str, ...] = ()
) -> tuple[UpstreamErrorKind, str]:
    """
    Map an exception raised while calling Gemini to a kind and a one-line message.

    Args:
        error: The exception raised by the handler
        secrets: Values (e.g. the API key) that must never appear in the message

    Returns:
        (kind, message) where message is safe to send back to the caller
    """
    if isinstance(error, (httpx.TimeoutException, TimeoutError)):
        return UpstreamErrorKind.TIMEOUT, UPSTREAM_MESSAGES[UpstreamErrorKind.TIMEOUT]

    # google.genai.errors.APIError carries the HTTP status as .code
    code = getattr(error, "code", None)
    status = code if isinstance(code, int) else None
    text = str(error).lower()

    for kind, codes, _ in _RULES:
        if status in codes:
            return kind, UPSTREAM_MESSAGES[kind]
    for kind, _, needles in _RULES:
        if any(needle in text for needle in needles):
            return kind, UPSTREAM_MESSAGES[kind]

    raw = " ".join(str(error).split()) or type(error).__name__
    return UpstreamErrorKind.UNCLASSIFIED, f"Error: {_redact(raw, secrets)}"
