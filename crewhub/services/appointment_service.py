# crewhub/services/appointment_service.py
import logging
from datetime import datetime

from sqlmodel import Session

from crewhub.core.errors import (
    InvalidStateTransition,
    NotFoundError,
    ValidationError,
)
from crewhub.core.permissions import (
    appointment_scope,
    ensure_can_book,
    ensure_can_transition,
)
from crewhub.models.appointment import Appointment
from crewhub.models.user import User
from crewhub.repositories.appointment_repo import AppointmentRepository
from crewhub.repositories.user_repo import UserRepository
from crewhub.schemas.appointment import (
    AppointmentCreate,
    AppointmentRead,
    AppointmentStatusUpdate,
    AppointmentWithPartiesRead,
)
from crewhub.schemas.user import UserRead

logger = logging.getLogger(__name__)

# Legal moves of the appointment state machine:
#
#   pending  -> accepted, rejected
#   accepted -> completed
#   rejected -> (terminal)
#   completed -> (terminal)
ALLOWED_TRANSITIONS: dict[str, frozenset[str]] = {
    "pending": frozenset({"accepted", "rejected"}),
    "accepted": frozenset({"completed"}),
    "rejected": frozenset(),
    "completed": frozenset(),
}


def check_transition(current: str, new: str) -> None:
    """
    Raise InvalidStateTransition unless `current -> new` is a legal move.
    """
    if new not in ALLOWED_TRANSITIONS.get(current, frozenset()):
        raise InvalidStateTransition(current, new)


class AppointmentService:
    """
    Business logic for appointments.

    Responsibilities:
      - Create booking requests (customer -> worker)
      - List appointments within the caller's visibility scope
      - Drive the status state machine (assigned worker only), with each
        transition applied as one compare-and-set UPDATE
    """

    def __init__(
        self,
        appointment_repo: AppointmentRepository,
        user_repo: UserRepository,
    ):
        self.appointment_repo = appointment_repo
        self.user_repo = user_repo

    def create(
        self,
        session: Session,
        current_user: User,
        payload: AppointmentCreate,
    ) -> AppointmentRead:
        """
        Book a worker.

        The worker's availability flag is not checked: a booking is a
        proposal the worker may reject.

        Raises:
            ForbiddenError: caller is not a customer.
            ValidationError: worker_id is not a worker.
        """
        ensure_can_book(current_user)

        worker = self.user_repo.get_worker(session, payload.worker_id)
        if worker is None:
            raise ValidationError("Selected worker does not exist", field="workerId")

        appointment = Appointment(
            user_id=current_user.id,
            worker_id=worker.id,
            issue_description=payload.issue_description,
            address=payload.address,
            status="pending",
        )
        appointment = self.appointment_repo.create(session, appointment)
        logger.info(
            "Appointment id=%s created customer=%s worker=%s",
            appointment.id,
            current_user.id,
            worker.id,
        )
        return AppointmentRead.model_validate(appointment)

    def list_for(
        self,
        session: Session,
        current_user: User,
    ) -> list[AppointmentWithPartiesRead]:
        """
        Appointments visible to the caller, newest first, each with the
        public profiles of its customer and worker.
        """
        scope = appointment_scope(current_user)
        if scope == "customer":
            appointments = self.appointment_repo.list_for_customer(session, current_user.id)
        elif scope == "worker":
            appointments = self.appointment_repo.list_for_worker(session, current_user.id)
        else:
            return []

        users: dict[int, UserRead | None] = {}

        def _party(user_id: int) -> UserRead | None:
            if user_id not in users:
                user = self.user_repo.get_by_id(session, user_id)
                users[user_id] = UserRead.from_user(user) if user else None
            return users[user_id]

        result: list[AppointmentWithPartiesRead] = []
        for appt in appointments:
            dto = AppointmentWithPartiesRead.model_validate(appt)
            dto.customer = _party(appt.user_id)
            dto.worker = _party(appt.worker_id)
            result.append(dto)
        return result

    def update_status(
        self,
        session: Session,
        current_user: User,
        appointment_id: int,
        payload: AppointmentStatusUpdate,
    ) -> AppointmentRead:
        """
        Worker moves an appointment along the state machine.

          pending  -> accepted (visit_time required), rejected
          accepted -> completed

        Raises:
            NotFoundError: unknown appointment.
            ForbiddenError: caller is not the assigned worker.
            ValidationError: accepting without visit_time.
            InvalidStateTransition: illegal move, including a concurrent
                transition that won the race.
        """
        appointment = self.appointment_repo.get_by_id(session, appointment_id)
        if appointment is None:
            raise NotFoundError("Appointment not found")

        ensure_can_transition(current_user, appointment)

        new = payload.status
        visit_time: datetime | None = None
        if new == "accepted":
            if payload.visit_time is None:
                raise ValidationError("visitTime is required to accept", field="visitTime")
            visit_time = payload.visit_time

        current = appointment.status
        check_transition(current, new)

        applied = self.appointment_repo.transition(
            session,
            appointment_id,
            expected_status=current,
            new_status=new,
            visit_time=visit_time,
        )
        if not applied:
            latest = self.appointment_repo.get_by_id(session, appointment_id)
            if latest is None:
                raise NotFoundError("Appointment not found")
            raise InvalidStateTransition(latest.status, new)

        session.refresh(appointment)
        logger.info(
            "Appointment id=%s %s -> %s by worker=%s",
            appointment_id,
            current,
            new,
            current_user.id,
        )
        return AppointmentRead.model_validate(appointment)
