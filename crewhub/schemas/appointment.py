# crewhub/schemas/appointment.py
from datetime import datetime, timezone
from typing import Literal

from pydantic import ConfigDict, field_validator

from crewhub.schemas.common import APIModel
from crewhub.schemas.user import UserRead

AppointmentStatus = Literal["pending", "accepted", "rejected", "completed"]
# Statuses a worker can move an appointment into
TargetStatus = Literal["accepted", "rejected", "completed"]


class AppointmentCreate(APIModel):
    """
    Payload for booking a worker.

    Backend derives:
      - user_id from the session
      - status = 'pending', visit_time = None
    """

    model_config = ConfigDict(extra="forbid")

    worker_id: int
    issue_description: str
    address: str

    @field_validator("issue_description", "address")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class AppointmentStatusUpdate(APIModel):
    """
    Worker payload to move an appointment forward.

    `visitTime` is required when status='accepted' (checked by the service).
    """

    model_config = ConfigDict(extra="forbid")

    status: TargetStatus
    visit_time: datetime | None = None

    @field_validator("visit_time")
    @classmethod
    def to_utc(cls, v: datetime | None) -> datetime | None:
        # Offset-less times are taken as UTC
        if v is None:
            return v
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)


class AppointmentRead(APIModel):
    id: int
    user_id: int
    worker_id: int
    issue_description: str
    address: str
    status: AppointmentStatus
    visit_time: datetime | None
    created_at: datetime


class AppointmentWithPartiesRead(AppointmentRead):
    """
    Listing view: the appointment plus both participants' public profiles.
    """

    customer: UserRead | None = None
    worker: UserRead | None = None
