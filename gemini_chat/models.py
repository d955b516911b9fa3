from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    message: str


class Reply(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    message: Message
    conversation_id: str = Field(alias="conversationId")
