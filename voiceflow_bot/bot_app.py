"""
Telegram Application Factory.

Builds the python-telegram-bot Application, wires the adapter from the DI
container and runs it in long polling mode.

Usage:
    python run_bot.py
    voiceflow-bot
"""

import logging
import signal

from dishka import AsyncContainer
from telegram.ext import Application, ApplicationBuilder

from voiceflow_bot.adapters.telegram.telegram_adapter import TelegramBotAdapter
from voiceflow_bot.application.commands.chat import ProcessInteractionHandler
from voiceflow_bot.config.logging_config import setup_logging
from voiceflow_bot.config.settings import Config, validate_config
from voiceflow_bot.setup.ioc.container import create_container

logger = logging.getLogger(__name__)


async def attach_adapter(
    application: Application, container: AsyncContainer, text_pattern: str
) -> TelegramBotAdapter:
    """Resolve the interaction handler and register the Telegram handlers."""
    handler = await container.get(ProcessInteractionHandler)
    adapter = TelegramBotAdapter(handler)
    adapter.register(application, text_pattern)
    return adapter


def create_bot_application(
    container: AsyncContainer,
    token: str | None = None,
    concurrent_updates: bool | None = None,
) -> Application:
    """
    Application factory for polling mode.

    Handlers are attached in post_init (the container is async) and the
    container is closed in post_shutdown.
    """

    async def _post_init(application: Application) -> None:
        await attach_adapter(application, container, Config.TEXT_PATTERN)
        logger.info("Telegram application initialized")

    async def _post_shutdown(application: Application) -> None:
        await container.close()
        logger.info("Telegram application shut down, DI container closed")

    return (
        ApplicationBuilder()
        .token(token or Config.BOT_TOKEN)
        .concurrent_updates(
            Config.CONCURRENT_UPDATES if concurrent_updates is None else concurrent_updates
        )
        .post_init(_post_init)
        .post_shutdown(_post_shutdown)
        .build()
    )


def run_webhook_server() -> None:
    import uvicorn

    logger.info("Starting webhook server on http://%s:%s", Config.HOST, Config.PORT)
    uvicorn.run(
        "voiceflow_bot.fastapi_app:app",
        host=Config.HOST,
        port=Config.PORT,
        log_level=Config.LOG_LEVEL.lower(),
    )


def main() -> None:
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)
    validate_config()

    if Config.TELEGRAM_MODE == "webhook":
        run_webhook_server()
        return

    application = create_bot_application(create_container())
    logger.info("Starting Telegram bot in polling mode")
    # Stop gracefully on SIGINT/SIGTERM; in-flight cycles are not awaited
    application.run_polling(
        allowed_updates=["message"],
        stop_signals=(signal.SIGINT, signal.SIGTERM),
    )


if __name__ == "__main__":
    main()
