# crewhub/models/user.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    Identity record for customers, workers and the admin.

    Role:
      - "customer" | "worker" | "admin"

    Worker-only columns (worker_type, visiting_charge, is_available) are
    nullable and are only written for role="worker". API responses never
    read them for other roles; see `schemas.user.UserRead.from_user`.

    `password_hash` is a passlib hash string (salt embedded) and is never
    serialized.
    """

    __tablename__ = "users"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    username: str = Field(
        unique=True,
        index=True,
        description="Login handle (usually an email)",
    )

    password_hash: str = Field(
        description="pbkdf2_sha256 hash with embedded salt",
    )

    full_name: str
    mobile: str
    address: str
    pincode: str = Field(index=True)

    role: str = Field(
        default="customer",
        index=True,
        description="Application role: customer | worker | admin",
    )

    # ---- Worker-only attributes ----
    worker_type: str | None = Field(
        default=None,
        index=True,
        description="Service category (workers only)",
    )
    visiting_charge: int | None = Field(
        default=None,
        description="Flat visiting charge, non-negative (workers only)",
    )
    is_available: bool | None = Field(
        default=None,
        description="Availability flag (workers only)",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
