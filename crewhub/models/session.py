# crewhub/models/session.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class UserSession(SQLModel, table=True):
    """
    Server-side record of a login.

    The signed token handed to the client references this row by `id`
    (the `sid` claim); deleting the row logs the client out.
    """

    __tablename__ = "user_sessions"

    id: str = Field(
        primary_key=True,
        description="Random session id (token 'sid' claim)",
    )

    user_id: int = Field(
        foreign_key="users.id",
        index=True,
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    expires_at: datetime = Field(
        index=True,
        description="Matches the token 'exp' claim; stale rows are pruned at login",
    )
