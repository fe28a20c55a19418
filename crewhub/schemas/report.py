# crewhub/schemas/report.py
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict, field_validator

from crewhub.schemas.common import APIModel
from crewhub.schemas.user import UserRead

ReportStatus = Literal["pending", "resolved"]


class ReportCreate(APIModel):
    model_config = ConfigDict(extra="forbid")

    reported_worker_id: int
    reason: str

    @field_validator("reason")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("reason cannot be empty")
        return v


class ReportStatusUpdate(APIModel):
    """Admin payload; only 'resolved' is reachable."""

    model_config = ConfigDict(extra="forbid")

    status: Literal["resolved"]


class ReportRead(APIModel):
    id: int
    reporter_id: int
    reported_worker_id: int
    reason: str
    status: ReportStatus
    created_at: datetime


class ReportWithPartiesRead(ReportRead):
    reporter: UserRead | None = None
    reported_worker: UserRead | None = None
