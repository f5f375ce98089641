"""
Main entry point for the Telegram bot.

Usage:
    python run_bot.py

TELEGRAM_MODE=polling (default) runs long polling; TELEGRAM_MODE=webhook
serves voiceflow_bot.fastapi_app:app with uvicorn.
"""

import os
import sys
import io

# Set UTF-8 encoding for stdout/stderr to handle Unicode characters on Windows
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(
        sys.stdout.buffer, encoding="utf-8", errors="replace", line_buffering=True
    )
    sys.stderr = io.TextIOWrapper(
        sys.stderr.buffer, encoding="utf-8", errors="replace", line_buffering=True
    )

os.environ["PYTHONIOENCODING"] = "utf-8"

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from voiceflow_bot.bot_app import main

if __name__ == "__main__":
    main()
