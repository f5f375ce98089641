"""
FastAPI Application Factory (webhook mode).

Creates the FastAPI app that receives Telegram updates by webhook. The
lifespan builds the DI container and the Telegram Application, registers the
webhook with Telegram on startup, and tears both down on shutdown.

Run with:
    TELEGRAM_MODE=webhook python run_bot.py
Or with uvicorn directly:
    uvicorn voiceflow_bot.fastapi_app:app --host 0.0.0.0 --port 8080
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from telegram import Update
from telegram.ext import ApplicationBuilder

from voiceflow_bot.bot_app import attach_adapter
from voiceflow_bot.config.logging_config import setup_logging
from voiceflow_bot.config.settings import Config, validate_config
from voiceflow_bot.presentation.api import telegram_router
from voiceflow_bot.presentation.api.telegram_routes import set_application
from voiceflow_bot.setup.ioc.container import create_container

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: set up logging, validate settings, build container + Telegram
      Application, start its update processor and set the webhook
    - Shutdown: stop the Application and close the DI container
    """
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)
    validate_config()

    container = create_container()
    application = (
        ApplicationBuilder()
        .token(Config.BOT_TOKEN)
        .updater(None)
        .concurrent_updates(Config.CONCURRENT_UPDATES)
        .build()
    )
    await attach_adapter(application, container, Config.TEXT_PATTERN)
    await application.initialize()
    # Updates are fed through update_queue so CONCURRENT_UPDATES applies
    await application.start()
    await application.bot.set_webhook(
        url=Config.TELEGRAM_WEBHOOK_URL,
        secret_token=Config.TELEGRAM_WEBHOOK_SECRET or None,
        allowed_updates=[Update.MESSAGE],
    )
    set_application(application)
    logger.info("Webhook registered at %s", Config.TELEGRAM_WEBHOOK_URL)
    try:
        yield
    finally:
        set_application(None)
        await application.stop()
        await application.shutdown()
        await container.close()
        logger.info("Webhook application shut down, DI container closed")


def create_fastapi_app(use_lifespan: bool = True) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Voiceflow Telegram Bot",
        description="Telegram webhook relay to the Voiceflow dialogue engine",
        version="1.0.0",
        lifespan=lifespan if use_lifespan else None,
    )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("[GLOBAL ERROR] %s: %s", type(exc).__name__, exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "Voiceflow Telegram bot is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(telegram_router)  # POST /telegram/webhook

    return app


# Create the app instance
app = create_fastapi_app()
