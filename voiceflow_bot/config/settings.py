"""Application configuration settings"""

import os
from dotenv import load_dotenv

from voiceflow_bot.domain.exceptions import ConfigurationError

load_dotenv()


class Config:
    # Telegram settings
    BOT_TOKEN = os.getenv("BOT_TOKEN", "")
    TEXT_PATTERN = os.getenv("TEXT_PATTERN", "(.+)")
    # "polling" (long polling, default) or "webhook" (FastAPI endpoint)
    TELEGRAM_MODE = os.getenv("TELEGRAM_MODE", "polling").lower()
    TELEGRAM_WEBHOOK_URL = os.getenv("TELEGRAM_WEBHOOK_URL", "")
    TELEGRAM_WEBHOOK_SECRET = os.getenv("TELEGRAM_WEBHOOK_SECRET", "")
    CONCURRENT_UPDATES = os.getenv("CONCURRENT_UPDATES", "false").lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    # Webhook server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8080"))

    # Voiceflow
    VOICEFLOW_API_KEY = os.getenv("VOICEFLOW_API_KEY", "")
    VOICEFLOW_PROJECT_ID = os.getenv("VOICEFLOW_PROJECT_ID", "")
    VOICEFLOW_VERSION_ID = os.getenv("VOICEFLOW_VERSION_ID", "")
    VOICEFLOW_RUNTIME_URL = os.getenv(
        "VOICEFLOW_RUNTIME_URL", "https://general-runtime.voiceflow.com"
    ).rstrip("/")
    VOICEFLOW_API_URL = os.getenv(
        "VOICEFLOW_API_URL", "https://api.voiceflow.com"
    ).rstrip("/")
    VOICEFLOW_TIMEOUT = float(os.getenv("VOICEFLOW_TIMEOUT", "30"))

    # Link keyword table (URL -> label), JSON object
    LINK_KEYWORDS_FILE = os.getenv("LINK_KEYWORDS_FILE", "link_keywords.json")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )


REQUIRED_SETTINGS = ("BOT_TOKEN", "VOICEFLOW_API_KEY", "VOICEFLOW_PROJECT_ID")


def validate_config(cfg=Config) -> None:
    """Raise ConfigurationError if any required setting is empty."""
    missing = [name for name in REQUIRED_SETTINGS if not getattr(cfg, name, "")]
    if missing:
        raise ConfigurationError(
            f"Missing required settings: {', '.join(missing)}"
        )
    if cfg.TELEGRAM_MODE not in {"polling", "webhook"}:
        raise ConfigurationError(
            f"TELEGRAM_MODE must be 'polling' or 'webhook', got {cfg.TELEGRAM_MODE!r}"
        )
    if cfg.TELEGRAM_MODE == "webhook" and not cfg.TELEGRAM_WEBHOOK_URL:
        raise ConfigurationError("TELEGRAM_WEBHOOK_URL is required in webhook mode")
