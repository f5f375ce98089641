"""Telegram relay for the Voiceflow dialogue engine."""

__version__ = "1.0.0"
