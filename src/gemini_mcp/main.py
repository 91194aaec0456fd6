"""
Gemini MCP - FastAPI application (JSON-RPC over HTTP transport).
"""
import logging

from fastapi import FastAPI

from . import __version__
from .mcp.server import router as mcp_router
from .tools import Dispatcher

logger = logging.getLogger(__name__)


def create_app(dispatcher: Dispatcher) -> FastAPI:
    """Build the HTTP app around an already bootstrapped dispatcher."""
    app = FastAPI(
        title="Gemini MCP",
        description="Google Gemini tools over MCP JSON-RPC",
        version=__version__
    )
    app.state.dispatcher = dispatcher

    # Include MCP router
    app.include_router(mcp_router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": "Gemini MCP",
            "version": __version__,
            "status": "operational",
            "tools": [tool.name for tool in dispatcher.list_tools()]
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


def main() -> None:
    import uvicorn

    from .bootstrap import bootstrap

    settings, dispatcher = bootstrap()
    logger.info("Gemini MCP HTTP server on %s:%d", settings.http_host, settings.http_port)
    uvicorn.run(create_app(dispatcher), host=settings.http_host, port=settings.http_port, log_config=None)


if __name__ == "__main__":
    main()
