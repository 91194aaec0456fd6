"""
Startup wiring shared by the stdio and HTTP entry points.

Builds, exactly once per process: settings -> Gemini client -> active model -> registry -> dispatcher.
"""
import logging
import sys
from typing import Optional

from google import genai
from google.genai import types as genai_types

from .config import Settings, load_settings, resolve_active_model
from .errors import ConfigurationError
from .observability import setup_logging
from .tools import Dispatcher, ToolContext, build_registry

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> genai.Client:
    """Create the Gemini API client."""
    http_options = None
    if settings.timeout_ms:
        http_options = genai_types.HttpOptions(timeout=settings.timeout_ms)
    return genai.Client(api_key=settings.api_key, http_options=http_options)


def create_dispatcher(settings: Settings, client) -> Dispatcher:
    """Resolve the active model, build the sealed registry and wrap both in a Dispatcher."""
    settings = resolve_active_model(settings, client)
    registry = build_registry()
    logger.info("Loaded %d tools (active model: %s)", len(registry), settings.active_model)
    for tool in registry.list():
        logger.debug("   - %s", tool.name)
    return Dispatcher(registry, ToolContext(client=client, settings=settings))


def bootstrap(env_file: Optional[str] = ".env") -> tuple[Settings, Dispatcher]:
    """
    Build everything a transport needs.

    Exits the process with status 1 when configuration is invalid.
    """
    try:
        settings = load_settings(env_file)
    except ConfigurationError as e:
        setup_logging()
        logger.error("Error: %s", e)
        sys.exit(1)

    setup_logging(settings.log_level, settings.log_format)
    client = create_client(settings)
    return settings, create_dispatcher(settings, client)
