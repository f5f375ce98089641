"""
Bot Adapters Module
===================

Adapters are translation layers between a chat platform and the
interaction cycle. They:
1. Receive updates from the platform (Telegram)
2. Normalise them into a chat id, a request and an optional user text
3. Hand them to ProcessInteractionHandler with a ChatClient bound to the chat

Available Adapters:
- telegram: python-telegram-bot adapter (see adapters/telegram/)
"""
