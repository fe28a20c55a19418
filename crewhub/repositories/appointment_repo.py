# crewhub/repositories/appointment_repo.py
from datetime import datetime

from sqlalchemy import update
from sqlmodel import Session, select

from crewhub.models.appointment import Appointment


class AppointmentRepository:
    """
    Data access layer for appointments.

    Status changes go through `transition()`, a single conditional UPDATE,
    never through read-modify-write on the ORM object.
    """

    def get_by_id(self, session: Session, appointment_id: int) -> Appointment | None:
        return session.get(Appointment, appointment_id)

    def create(self, session: Session, appointment: Appointment) -> Appointment:
        session.add(appointment)
        session.commit()
        session.refresh(appointment)
        return appointment

    def list_for_customer(self, session: Session, user_id: int) -> list[Appointment]:
        stmt = (
            select(Appointment)
            .where(Appointment.user_id == user_id)
            .order_by(Appointment.created_at.desc(), Appointment.id.desc())
        )
        return list(session.exec(stmt).all())

    def list_for_worker(self, session: Session, worker_id: int) -> list[Appointment]:
        stmt = (
            select(Appointment)
            .where(Appointment.worker_id == worker_id)
            .order_by(Appointment.created_at.desc(), Appointment.id.desc())
        )
        return list(session.exec(stmt).all())

    def transition(
        self,
        session: Session,
        appointment_id: int,
        expected_status: str,
        new_status: str,
        visit_time: datetime | None = None,
    ) -> bool:
        """
        Compare-and-set the status.

        The row is updated only if its current status is still
        `expected_status`. `visit_time` is written only when given.

        Returns:
            True if the row was updated, False if the status had moved
            (or the row vanished) in the meantime.
        """
        values: dict = {"status": new_status}
        if visit_time is not None:
            values["visit_time"] = visit_time

        stmt = (
            update(Appointment)
            .where(
                Appointment.id == appointment_id,
                Appointment.status == expected_status,
            )
            .values(**values)
        )
        result = session.execute(stmt)
        session.commit()
        return result.rowcount == 1
