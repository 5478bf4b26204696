"""
Chat Task Bot - Main Application Entry Point

FastAPI application exposing the chat webhook endpoints.
"""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import settings
from . import __version__
from .bot.handler import get_chat_handler
from .database import init_database, close_database, get_database
from .database.exceptions import DatabaseError
from .models.chat import ChatRequest, ChatResponse

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    logger.info(f"Starting {settings.app_name}...")

    try:
        if await init_database():
            logger.info("Task database initialized")
        else:
            logger.warning("Task database not configured or failed to initialize")
    except Exception as e:
        logger.warning(f"Database init failed: {e}")

    yield

    logger.info("Shutting down...")
    try:
        await close_database()
    except Exception as e:
        logger.warning(f"Failed to close database during shutdown: {e}")

    logger.info("Shutdown complete")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Chat webhook that manages a per-user task list",
    version=__version__,
    lifespan=lifespan
)


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": __version__
    }


@app.get("/health")
async def health_check():
    """Detailed health check endpoint."""
    db_health = {"status": "not_configured"}
    try:
        db = get_database()
        db_health = await db.health_check()
    except Exception as e:
        db_health = {"status": "error", "error": str(e)}

    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "services": {
            "database": db_health.get("status", "unknown"),
            "response_mode": settings.response_mode,
        }
    }


@app.post("/chat", response_model=ChatResponse, response_model_exclude_none=True)
async def chat_webhook(payload: ChatRequest):
    """
    Chat webhook endpoint.

    Handles typed commands, and button clicks when the platform routes
    them here with an action attached.
    """
    logger.debug(f"Received chat event (action={payload.action is not None})")
    handler = get_chat_handler()
    return await handler.handle(payload)


@app.post("/card-action", response_model=ChatResponse, response_model_exclude_none=True)
async def card_action_webhook(payload: ChatRequest):
    """Card button click endpoint."""
    logger.debug("Received card action")
    handler = get_chat_handler()
    return await handler.handle_action(payload)


@app.exception_handler(DatabaseError)
async def database_exception_handler(request: Request, exc: DatabaseError):
    """Storage failures surface as a hard error to the chat platform."""
    logger.error(f"Storage failure on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Storage failure", "detail": str(exc)}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "detail": str(exc)}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "taskbot.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
