from voiceflow_bot.presentation.api.telegram_routes import router as telegram_router

__all__ = ["telegram_router"]
