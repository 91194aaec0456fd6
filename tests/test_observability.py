"""JSON log formatting."""

import json
import logging

from gemini_mcp.observability import JSONFormatter


def test_json_formatter_includes_tool_extras():
    record = logging.LogRecord("gemini_mcp.tools.dispatch", logging.WARNING, __file__, 1, "Tool %s failed",
                               ("gemini_search",), None)
    record.tool_name = "gemini_search"
    record.error_kind = "quota_exceeded"

    log = json.loads(JSONFormatter().format(record))

    assert log["level"] == "WARNING"
    assert log["logger"] == "gemini_mcp.tools.dispatch"
    assert log["message"] == "Tool gemini_search failed"
    assert log["tool_name"] == "gemini_search"
    assert log["error_kind"] == "quota_exceeded"
    assert "exception" not in log
