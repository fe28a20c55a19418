# crewhub/repositories/stats_repo.py
from sqlalchemy import func
from sqlmodel import Session, select

from crewhub.models.appointment import Appointment
from crewhub.models.user import User


class StatsRepository:
    """
    Read-only aggregated queries for admin dashboard.
    """

    def count_by_role(self, session: Session, role: str) -> int:
        stmt = select(func.count()).select_from(User).where(User.role == role)
        # SQLModel's Session.exec() -> ScalarResult -> use .one()
        value = session.exec(stmt).one()
        return int(value or 0)

    def count_appointments(self, session: Session, status: str) -> int:
        stmt = (
            select(func.count())
            .select_from(Appointment)
            .where(Appointment.status == status)
        )
        value = session.exec(stmt).one()
        return int(value or 0)
