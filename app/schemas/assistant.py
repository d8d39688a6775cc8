from typing import Optional
from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    message: Optional[str] = Field(None, description="Free text typed by the user")


class ChatResponse(BaseModel):
    reply: str


class VoiceCommandRequest(BaseModel):
    transcript: Optional[str] = Field(None, description="Text recognized by the browser")


class VoiceCommandResponse(BaseModel):
    success: bool
    message: str
    action: Optional[str] = None
    speak: Optional[str] = None
