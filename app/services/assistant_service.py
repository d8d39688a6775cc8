from app.core.logging import console_logger
from app.core.utils.enums import UsageTypeEnum
from app.repositories.base import DataStore
from app.schemas.assistant import ChatResponse, VoiceCommandResponse
from app.services.responder import MockResponder, chat_responder, voice_responder
from app.services.usage_service import UsageService


class AssistantService:
    """Canned "AI" chat and voice commands with their usage bookkeeping."""

    def __init__(
        self,
        store: DataStore,
        usage: UsageService,
        chat: MockResponder = chat_responder,
        voice: MockResponder = voice_responder,
    ):
        self.store = store
        self.usage = usage
        self.chat_responder = chat
        self.voice_responder = voice

    async def chat(self, user_id: str, message: str | None) -> ChatResponse:
        await self.usage.ensure_within_limit(user_id)
        reply = self.chat_responder.respond(message)
        await self.usage.record(user_id, UsageTypeEnum.AI_CHAT.value)
        return ChatResponse(reply=reply.message)

    async def voice_command(self, user_id: str, transcript: str | None) -> VoiceCommandResponse:
        await self.usage.ensure_within_limit(user_id)
        matched = self.voice_responder.match(transcript)
        entry = matched or self.voice_responder.fallback

        await self.store.voice_commands.create({
            "transcript": transcript,
            "action": entry.action,
            "success": matched is not None,
        })
        await self.usage.record(user_id, UsageTypeEnum.VOICE_COMMAND.value)
        console_logger.info("Voice command handled", action=entry.action, success=matched is not None)

        return VoiceCommandResponse(
            success=matched is not None,
            message=entry.message,
            action=entry.action,
            speak=entry.speak,
        )
