"""Tool handlers - request shape sent to Gemini and formatting of the answer."""

from google.genai import types as genai_types

from gemini_mcp.config import Settings
from gemini_mcp.tools import ToolContext
from gemini_mcp.tools.search.utils import format_search_response
from gemini_mcp.tools.status import format_status
from gemini_mcp.tools.youtube.utils import format_video_analysis, normalize_youtube_url


def _call_kwargs(client):
    return client.aio.models.generate_content.await_args.kwargs


# ============ gemini_generate ============

async def test_generate_forwards_only_supplied_parameters(dispatcher, client):
    await dispatcher.dispatch(
        "gemini_generate",
        {"prompt": "Write a haiku", "model": "gemini-2.5-pro", "temperature": 0.3, "max_tokens": 100,
         "top_p": 0.9, "top_k": 40},
    )
    kwargs = _call_kwargs(client)
    assert kwargs["model"] == "gemini-2.5-pro"
    assert kwargs["contents"] == "Write a haiku"
    config = kwargs["config"]
    assert config.temperature == 0.3
    assert config.max_output_tokens == 100
    assert config.top_p == 0.9
    assert config.top_k == 40


async def test_generate_sends_no_config_without_parameters(dispatcher, client):
    await dispatcher.dispatch("gemini_generate", {"prompt": "hi"})
    assert _call_kwargs(client)["config"] is None


async def test_empty_gemini_answer_gets_placeholder(dispatcher, client):
    client.aio.models.generate_content.return_value = genai_types.GenerateContentResponse(candidates=[])
    result = await dispatcher.dispatch("gemini_generate", {"prompt": "hi"})
    assert result.isError is False
    assert result.content[0].text == "(empty response)"


# ============ gemini_messages ============

async def test_messages_map_assistant_to_model_role(dispatcher, client):
    await dispatcher.dispatch(
        "gemini_messages",
        {"messages": [
            {"role": "user", "content": "Hi"},
            {"role": "assistant", "content": "Hello!"},
            {"role": "user", "content": "How are you?"},
        ]},
    )
    contents = _call_kwargs(client)["contents"]
    assert [c.role for c in contents] == ["user", "model", "user"]
    assert [c.parts[0].text for c in contents] == ["Hi", "Hello!", "How are you?"]


# ============ gemini_search ============

async def test_search_enables_google_search_tool(dispatcher, client):
    await dispatcher.dispatch("gemini_search", {"query": "latest python release"})
    config = _call_kwargs(client)["config"]
    assert len(config.tools) == 1
    assert config.tools[0].google_search is not None


async def test_search_appends_queries_then_sources(dispatcher, client, make_response):
    grounding = genai_types.GroundingMetadata(
        web_search_queries=["python 3.14 release"],
        grounding_chunks=[
            genai_types.GroundingChunk(web=genai_types.GroundingChunkWeb(uri="https://python.org", title="Python")),
            genai_types.GroundingChunk(web=genai_types.GroundingChunkWeb(uri="https://example.com")),
        ],
    )
    client.aio.models.generate_content.return_value = make_response("Python 3.14 is out.", grounding)

    result = await dispatcher.dispatch("gemini_search", {"query": "python release"})

    text = result.content[0].text
    assert text == (
        "Python 3.14 is out."
        "\n\n**Search Queries:**\n- python 3.14 release\n"
        "\n**Sources:**\n- [Python](https://python.org)\n- [Source](https://example.com)\n"
    )
    assert text.index("**Search Queries:**") < text.index("**Sources:**")


def test_search_without_metadata_is_plain_text():
    assert format_search_response("Answer", None) == "Answer"


def test_search_sections_are_omitted_when_empty():
    metadata = genai_types.GroundingMetadata(web_search_queries=[], grounding_chunks=[])
    assert format_search_response("Answer", metadata) == "Answer"


def test_search_sources_without_queries():
    metadata = genai_types.GroundingMetadata(
        grounding_chunks=[genai_types.GroundingChunk(web=genai_types.GroundingChunkWeb(uri="https://a.io", title="A"))]
    )
    text = format_search_response("Answer", metadata)
    assert "**Search Queries:**" not in text
    assert text.endswith("\n**Sources:**\n- [A](https://a.io)\n")


# ============ gemini_youtube ============

def test_short_url_normalizes_to_watch_url():
    assert normalize_youtube_url("https://youtu.be/abc123") == "https://www.youtube.com/watch?v=abc123"
    assert normalize_youtube_url("youtu.be/abc123?t=30") == "https://www.youtube.com/watch?v=abc123"


def test_other_youtube_forms_normalize():
    assert normalize_youtube_url("https://www.youtube.com/shorts/abc123") == "https://www.youtube.com/watch?v=abc123"
    assert normalize_youtube_url("https://www.youtube.com/embed/abc123") == "https://www.youtube.com/watch?v=abc123"
    assert normalize_youtube_url("dQw4w9WgXcQ") == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


def test_watch_url_is_unchanged():
    url = "https://www.youtube.com/watch?v=abc123"
    assert normalize_youtube_url(url) == url


def test_lookalike_hosts_are_unchanged():
    assert normalize_youtube_url("https://notyoutu.be/x") == "https://notyoutu.be/x"
    assert normalize_youtube_url("https://fakeyoutube.com/shorts/x") == "https://fakeyoutube.com/shorts/x"


def test_youtube_subdomains_normalize():
    assert normalize_youtube_url("https://m.youtube.com/live/abc123") == "https://www.youtube.com/watch?v=abc123"
    assert normalize_youtube_url("youtube.com/shorts/abc123") == "https://www.youtube.com/watch?v=abc123"


async def test_youtube_sends_video_then_prompt(dispatcher, client):
    result = await dispatcher.dispatch(
        "gemini_youtube",
        {"youtube_url": "https://youtu.be/abc123", "prompt": "Summarize", "start_offset": "60s",
         "end_offset": "120s", "temperature": 0.2},
    )
    contents = _call_kwargs(client)["contents"]
    video_part, prompt_part = contents[0].parts
    assert video_part.file_data.file_uri == "https://www.youtube.com/watch?v=abc123"
    assert video_part.video_metadata.start_offset == "60s"
    assert video_part.video_metadata.end_offset == "120s"
    assert prompt_part.text == "Summarize"
    assert _call_kwargs(client)["config"].temperature == 0.2

    assert result.content[0].text == (
        "**YouTube Video Analysis**\n\n"
        "Video: https://www.youtube.com/watch?v=abc123\n"
        "Segment: 60s - 120s\n"
        "\n---\n\n"
        "Hello from Gemini"
    )


async def test_youtube_without_segment_has_no_video_metadata(dispatcher, client):
    await dispatcher.dispatch("gemini_youtube", {"youtube_url": "https://youtu.be/abc123", "prompt": "Summarize"})
    video_part = _call_kwargs(client)["contents"][0].parts[0]
    assert video_part.video_metadata is None


def test_open_ended_segment_header():
    text = format_video_analysis("https://www.youtube.com/watch?v=abc123", "Body", start_offset="30s")
    assert "Segment: 30s - end\n" in text
    text = format_video_analysis("https://www.youtube.com/watch?v=abc123", "Body", end_offset="30s")
    assert "Segment: 0s - 30s\n" in text


# ============ gemini_status ============

async def test_status_reports_models_and_key(dispatcher, client):
    result = await dispatcher.dispatch("gemini_status", {})
    text = result.content[0].text
    assert result.isError is False
    assert "Active model: gemini-2.5-flash" in text
    assert "Configured model (GEMINI_MODEL): (not set)" in text
    assert "Fallback model: gemini-2.5-flash" in text
    assert "API key configured: yes" in text
    client.aio.models.generate_content.assert_not_awaited()


def test_status_notes_fallback_substitution():
    settings = Settings(api_key="k", configured_model="gemini-9", active_model="gemini-2.5-flash")
    text = format_status(ToolContext(client=None, settings=settings))
    assert "Configured model (GEMINI_MODEL): gemini-9" in text
    assert "fallback model is in use" in text
