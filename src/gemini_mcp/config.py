"""
Configuration for the Gemini MCP server.

Values come from the process environment and an optional .env file, read through
pydantic-settings. Settings are read once at startup and never change afterwards,
except that the active model is resolved against the provider's model listing.
"""
import logging
from typing import Literal, Optional

import httpx
from google.genai import errors as genai_errors
from pydantic import Field, PositiveInt, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

FALLBACK_MODEL = "gemini-2.5-flash"

DEFAULT_HTTP_HOST = "127.0.0.1"
DEFAULT_HTTP_PORT = 8000


class Settings(BaseSettings):
    """
    Process-wide settings, built once at startup.

    Fields read from the environment use the variable names below as aliases.
    Unaliased fields (active_model) take the GEMINI_MCP_ prefix, but
    active_model is overwritten by resolve_active_model() anyway.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_MCP_",
        env_ignore_empty=True,
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    api_key: str = Field(..., alias="GOOGLE_API_KEY", min_length=1, repr=False, description="Google API key")
    configured_model: Optional[str] = Field(
        default=None, alias="GEMINI_MODEL", description="Model override, checked once at startup"
    )
    active_model: str = Field(default=FALLBACK_MODEL, description="Model used when a call names none")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", alias="GEMINI_MCP_LOG_LEVEL"
    )
    log_format: Literal["text", "json"] = Field(default="text", alias="GEMINI_MCP_LOG_FORMAT")
    timeout_ms: Optional[PositiveInt] = Field(
        default=None, alias="GEMINI_TIMEOUT_MS", description="Per-request timeout for the Gemini client"
    )
    http_host: str = Field(default=DEFAULT_HTTP_HOST, alias="GEMINI_MCP_HOST", min_length=1)
    http_port: PositiveInt = Field(default=DEFAULT_HTTP_PORT, alias="GEMINI_MCP_PORT")

    @field_validator("api_key", "http_host", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("configured_model", mode="before")
    @classmethod
    def blank_model_is_unset(cls, v):
        if isinstance(v, str):
            return v.strip() or None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("log_format", mode="before")
    @classmethod
    def lower_format(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @property
    def fallback_model(self) -> str:
        return FALLBACK_MODEL

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


# Field name -> environment variable, for error messages
ENV_NAMES = {name: field.alias or name for name, field in Settings.model_fields.items()}


def _describe(error: ValidationError) -> str:
    problems = []
    for err in error.errors():
        name = str(err["loc"][0]) if err["loc"] else "settings"
        env_name = ENV_NAMES.get(name, name).upper()
        if env_name == "GOOGLE_API_KEY" and err["type"] in ("missing", "string_too_short"):
            problems.append("GOOGLE_API_KEY not found in environment variables")
        else:
            problems.append(f"{env_name}: {err['msg']}")
    return "; ".join(problems)


def load_settings(env_file: Optional[str] = ".env") -> Settings:
    """
    Build Settings from the environment and the .env file.

    Args:
        env_file: Path of the dotenv file to read, None to read the environment only

    Raises:
        ConfigurationError: If GOOGLE_API_KEY is missing or a value is malformed
    """
    try:
        return Settings(_env_file=env_file)
    except ValidationError as e:
        raise ConfigurationError(_describe(e)) from None


def _short_model_name(name: str) -> str:
    # Listing returns "models/gemini-2.5-flash"
    return name.split("/", 1)[1] if name.startswith("models/") else name


def resolve_active_model(settings: Settings, client) -> Settings:
    """
    Check the GEMINI_MODEL override once against the provider's model listing.

    Returns a copy of settings with active_model set. An unknown override, or a
    listing that cannot be fetched, logs a warning and falls back to the fallback model.
    """
    configured = settings.configured_model
    if not configured:
        return settings.model_copy(update={"active_model": settings.fallback_model})

    try:
        available = {_short_model_name(model.name) for model in client.models.list() if model.name}
    except (genai_errors.APIError, httpx.HTTPError) as e:
        logger.warning(
            "Could not list Gemini models to check GEMINI_MODEL=%s (%s); using fallback model %s",
            configured, e, settings.fallback_model
        )
        return settings.model_copy(update={"active_model": settings.fallback_model})

    if _short_model_name(configured) not in available:
        logger.warning(
            "GEMINI_MODEL=%s is not an available model; using fallback model %s",
            configured, settings.fallback_model
        )
        return settings.model_copy(update={"active_model": settings.fallback_model})

    logger.info("Using configured model %s", configured)
    return settings.model_copy(update={"active_model": _short_model_name(configured)})
