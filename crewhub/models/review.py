# crewhub/models/review.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Review(SQLModel, table=True):
    """
    Customer rating of a worker, attached to one appointment.

    At most one review per appointment (unique appointment_id).
    """

    __tablename__ = "reviews"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    appointment_id: int = Field(
        foreign_key="appointments.id",
        unique=True,
        index=True,
    )

    worker_id: int = Field(
        foreign_key="users.id",
        index=True,
    )

    user_id: int = Field(
        foreign_key="users.id",
        index=True,
    )

    rating: int = Field(
        ge=1,
        le=5,
        description="Star rating 1..5",
    )

    comment: str | None = None

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
