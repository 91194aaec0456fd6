"""
Gemini MCP - Google Gemini generation, chat, grounded search and YouTube analysis as MCP tools.
"""
__version__ = "0.2.0"
