from voiceflow_bot.infrastructure.voiceflow.voiceflow_client import VoiceflowClient

__all__ = ["VoiceflowClient"]
