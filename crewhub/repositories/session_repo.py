# crewhub/repositories/session_repo.py
from datetime import datetime

from sqlalchemy import delete
from sqlmodel import Session

from crewhub.models.session import UserSession


class SessionRepository:
    """
    Data access for login sessions (server-side half of the session token).
    """

    def get(self, session: Session, session_id: str) -> UserSession | None:
        return session.get(UserSession, session_id)

    def create(self, session: Session, user_session: UserSession) -> UserSession:
        session.add(user_session)
        session.commit()
        session.refresh(user_session)
        return user_session

    def delete(self, session: Session, user_session: UserSession) -> None:
        session.delete(user_session)
        session.commit()

    def delete_expired(self, session: Session, now: datetime) -> int:
        """Drop sessions whose token has expired. Returns the number removed."""
        result = session.execute(delete(UserSession).where(UserSession.expires_at <= now))
        session.commit()
        return result.rowcount
