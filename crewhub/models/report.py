# crewhub/models/report.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Report(SQLModel, table=True):
    """
    Abuse report filed by an identity against a worker.
    """

    __tablename__ = "reports"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    reporter_id: int = Field(
        foreign_key="users.id",
        index=True,
    )

    reported_worker_id: int = Field(
        foreign_key="users.id",
        index=True,
    )

    reason: str

    # pending | resolved
    status: str = Field(
        default="pending",
        index=True,
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
