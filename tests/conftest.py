"""Shared fixtures: settings, a mocked Gemini client and a dispatcher over the real registry.

The client is a MagicMock whose aio.models.generate_content is an AsyncMock
returning real google.genai response objects, so handlers read .text and
.candidates exactly as they would in production. No network access.
"""
import os
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import types as genai_types

from gemini_mcp.config import Settings
from gemini_mcp.tools import Dispatcher, ToolContext, build_registry


def _response(text="Hello from Gemini", grounding=None):
    return genai_types.GenerateContentResponse(
        candidates=[
            genai_types.Candidate(
                content=genai_types.Content(role="model", parts=[genai_types.Part(text=text)]),
                grounding_metadata=grounding,
            )
        ]
    )


@pytest.fixture
def make_response():
    return _response


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep the developer's shell and .env file out of settings loading."""
    for name in list(os.environ):
        if name.upper() == "GOOGLE_API_KEY" or name.upper().startswith("GEMINI_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings():
    return Settings(api_key="test-key", active_model="gemini-2.5-flash")


@pytest.fixture
def client():
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=_response())
    return client


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def dispatcher(registry, client, settings):
    return Dispatcher(registry, ToolContext(client=client, settings=settings))
