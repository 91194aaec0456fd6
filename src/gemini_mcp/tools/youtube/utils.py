"""
YouTube URL handling and request building for the video analysis tool.
"""
import re
from typing import Optional

from google.genai import types as genai_types

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

_SHORT_FORM = re.compile(r"(?:^|//|\.)(?:youtu\.be/|youtube\.com/(?:shorts|embed|live)/)([^?&/#]+)")
_BARE_VIDEO_ID = re.compile(r"^[A-Za-z0-9_-]{11}$")


def normalize_youtube_url(url: str) -> str:
    """
    Convert short YouTube forms to the canonical watch URL.

    youtu.be/<id>, youtube.com/shorts/<id>, /embed/<id>, /live/<id> and a bare
    11-character video id become https://www.youtube.com/watch?v=<id>.
    Anything else is returned unchanged.
    """
    url = url.strip()
    if _BARE_VIDEO_ID.match(url):
        return WATCH_URL.format(video_id=url)

    match = _SHORT_FORM.search(url)
    if match:
        return WATCH_URL.format(video_id=match.group(1))

    return url


def build_video_contents(
    video_url: str,
    prompt: str,
    start_offset: Optional[str] = None,
    end_offset: Optional[str] = None
) -> list[genai_types.Content]:
    """Video part (with optional segment) followed by the prompt text."""
    video_metadata = None
    if start_offset or end_offset:
        video_metadata = genai_types.VideoMetadata(start_offset=start_offset, end_offset=end_offset)

    video_part = genai_types.Part(
        file_data=genai_types.FileData(file_uri=video_url),
        video_metadata=video_metadata
    )
    return [genai_types.Content(role="user", parts=[video_part, genai_types.Part(text=prompt)])]


def format_video_analysis(
    video_url: str,
    text: str,
    start_offset: Optional[str] = None,
    end_offset: Optional[str] = None
) -> str:
    header = f"**YouTube Video Analysis**\n\nVideo: {video_url}\n"
    if start_offset or end_offset:
        header += f"Segment: {start_offset or '0s'} - {end_offset or 'end'}\n"
    return f"{header}\n---\n\n{text}"
