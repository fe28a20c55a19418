# crewhub/models/appointment.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Appointment(SQLModel, table=True):
    """
    Booking request from a customer to a worker.

    Invariant:
      - visit_time is NULL while pending/rejected and set once the
        worker accepts (kept through completion).
    """

    __tablename__ = "appointments"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    user_id: int = Field(
        foreign_key="users.id",
        index=True,
        description="Customer who requested the visit",
    )

    worker_id: int = Field(
        foreign_key="users.id",
        index=True,
        description="Worker the request is addressed to",
    )

    issue_description: str
    address: str = Field(
        description="Service address (independent of the customer's profile)",
    )

    status: str = Field(
        default="pending",
        index=True,
        description="Appointment status lifecycle",
    )

    visit_time: datetime | None = Field(
        default=None,
        description="Scheduled visit, set on acceptance",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        index=True,
        description="Creation timestamp (UTC)",
    )
