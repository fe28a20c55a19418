# crewhub/routers/appointments.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from crewhub.core.auth import require_auth
from crewhub.database import get_session
from crewhub.models.user import User
from crewhub.repositories.appointment_repo import AppointmentRepository
from crewhub.repositories.user_repo import UserRepository
from crewhub.schemas.appointment import (
    AppointmentCreate,
    AppointmentRead,
    AppointmentStatusUpdate,
    AppointmentWithPartiesRead,
)
from crewhub.services.appointment_service import AppointmentService

router = APIRouter(prefix="/appointments", tags=["Appointments"])

service = AppointmentService(AppointmentRepository(), UserRepository())


@router.post(
    "",
    response_model=AppointmentRead,
    status_code=status.HTTP_201_CREATED,
)
def create_appointment(
    payload: AppointmentCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Book a worker (customers only). Starts in 'pending'.
    """
    return service.create(session, current_user, payload)


@router.get("", response_model=list[AppointmentWithPartiesRead])
def list_appointments(
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Appointments in the caller's scope, newest first.

      - customer: their bookings
      - worker:   bookings assigned to them
      - admin:    empty list
    """
    return service.list_for(session, current_user)


@router.patch("/{appointment_id}/status", response_model=AppointmentRead)
def update_appointment_status(
    appointment_id: int,
    payload: AppointmentStatusUpdate,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Move an appointment along its lifecycle (assigned worker only).

      pending  -> accepted (needs visitTime), rejected

      accepted -> completed

    Illegal moves return 409.
    """
    return service.update_status(session, current_user, appointment_id, payload)
