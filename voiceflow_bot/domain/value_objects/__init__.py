from voiceflow_bot.domain.value_objects.chat_id import ChatId

__all__ = ["ChatId"]
