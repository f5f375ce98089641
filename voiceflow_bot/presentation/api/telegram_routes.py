"""
Telegram Routes (Webhook Endpoint)
==================================

FastAPI route receiving Telegram updates in webhook mode and forwarding them
to the python-telegram-bot Application.

ENDPOINTS:
----------
POST /telegram/webhook - Receives all Telegram updates

SECURITY:
---------
Telegram echoes the secret_token given to setWebhook in the
X-Telegram-Bot-Api-Secret-Token header. Requests without the matching value
are rejected.

QUEUED PROCESSING:
------------------
Updates are put on the Application's update_queue and we return 200 OK
immediately, so a slow Voiceflow call never makes Telegram redeliver the
update. The Application's update processor honours CONCURRENT_UPDATES.
"""

import hmac
import json
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Request, Response
from telegram import Update
from telegram.ext import Application

from voiceflow_bot.config.settings import Config

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/telegram", tags=["telegram"])

# Set by the FastAPI lifespan once the Application is started
_application: Optional[Application] = None


def set_application(application: Optional[Application]) -> None:
    global _application
    _application = application


def _get_application() -> Application:
    if _application is None:
        raise HTTPException(status_code=503, detail="Telegram application not ready")
    return _application


def _verify_secret_token(received: str, secret: str) -> bool:
    """Compare the webhook secret header against the configured secret."""
    if not secret:
        logger.warning("TELEGRAM_WEBHOOK_SECRET not configured, skipping verification")
        return True  # Skip verification if not configured (dev mode)

    return hmac.compare_digest(received.encode("utf-8"), secret.encode("utf-8"))


@router.post("/webhook")
async def telegram_webhook(request: Request):
    """Handle a Telegram update delivered by webhook."""
    received = request.headers.get("X-Telegram-Bot-Api-Secret-Token", "")
    if not _verify_secret_token(received, Config.TELEGRAM_WEBHOOK_SECRET):
        logger.warning("Invalid Telegram secret token, rejecting request")
        raise HTTPException(status_code=401, detail="Invalid secret token")

    application = _get_application()

    body = await request.body()
    try:
        data = json.loads(body)
    except json.JSONDecodeError:
        raise HTTPException(status_code=400, detail="Invalid JSON")

    if not isinstance(data, dict) or "update_id" not in data:
        raise HTTPException(status_code=400, detail="Not a Telegram update")

    logger.debug(
        "[TELEGRAM] Raw update: %s", json.dumps(data, default=str, ensure_ascii=False)
    )

    update = Update.de_json(data, application.bot)
    await application.update_queue.put(update)

    return Response(status_code=200)
