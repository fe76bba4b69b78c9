"""
schemas/team.py
---------------
Organization member management.
"""

from datetime import datetime

from pydantic import BaseModel, field_validator

from jobboard.models.membership import MemberRole


class MemberUpsert(BaseModel):
    user_id: str
    role: MemberRole

    @field_validator("role", mode="before")
    @classmethod
    def accept_short_roles(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            if v in ("admin", "staff"):
                return f"tenant_{v}"
        return v


class MemberRead(BaseModel):
    id: str
    organization_id: str
    user_id: str
    role: str
    created_at: datetime

    model_config = {"from_attributes": True}
