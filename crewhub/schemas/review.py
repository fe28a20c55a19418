# crewhub/schemas/review.py
from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from crewhub.schemas.common import APIModel


class ReviewCreate(APIModel):
    """
    Customer review of a completed appointment.

    worker_id / user_id are taken from the appointment, not the payload.
    """

    model_config = ConfigDict(extra="forbid")

    appointment_id: int
    rating: int = Field(ge=1, le=5)
    comment: str | None = None

    @field_validator("comment")
    @classmethod
    def normalize_comment(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        return v or None


class ReviewRead(APIModel):
    id: int
    appointment_id: int
    worker_id: int
    user_id: int
    rating: int
    comment: str | None
    created_at: datetime
