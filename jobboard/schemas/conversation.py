"""
schemas/conversation.py
-----------------------
Pydantic models for the applicant ↔ company message thread.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class MessageCreate(BaseModel):
    application_id: str
    body: str = Field(..., min_length=1, max_length=8000)

    @field_validator("body")
    @classmethod
    def strip_body(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("body is required")
        return v


class ConversationRead(BaseModel):
    id: str
    application_id: str
    organization_id: str
    applicant_user_id: str

    model_config = {"from_attributes": True}


class MessageRead(BaseModel):
    id: str
    conversation_id: str
    sender_type: str
    sender_user_id: str
    body: str
    created_at: datetime

    model_config = {"from_attributes": True}


class ThreadResponse(BaseModel):
    conversation: ConversationRead
    messages: list[MessageRead]
