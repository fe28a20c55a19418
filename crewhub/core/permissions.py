# crewhub/core/permissions.py
"""
Role-scoped authorization rules.

Pure functions of (caller, operation, target): no DB access, no request
state. Each `ensure_*` raises ForbiddenError on violation; `*_scope`
helpers tell the caller which slice of the data it may read.
"""
from typing import Literal

from crewhub.core.errors import ForbiddenError
from crewhub.models.appointment import Appointment
from crewhub.models.user import User

AppointmentScope = Literal["customer", "worker", "none"]


def ensure_role(caller: User, *roles: str) -> None:
    if caller.role not in roles:
        raise ForbiddenError(f"{' or '.join(r.capitalize() for r in roles)} access required")


def appointment_scope(caller: User) -> AppointmentScope:
    """
    Which appointments `caller` may list.

      - customer: those where they are the customer
      - worker:   those assigned to them
      - admin:    none (admins read stats and reports, not bookings)
    """
    if caller.role == "customer":
        return "customer"
    if caller.role == "worker":
        return "worker"
    return "none"


def can_view_appointment(caller: User, appointment: Appointment) -> bool:
    scope = appointment_scope(caller)
    if scope == "customer":
        return appointment.user_id == caller.id
    if scope == "worker":
        return appointment.worker_id == caller.id
    return False


def ensure_can_book(caller: User) -> None:
    ensure_role(caller, "customer")


def ensure_can_transition(caller: User, appointment: Appointment) -> None:
    """Only the worker assigned to the appointment may change its status."""
    if caller.role != "worker" or appointment.worker_id != caller.id:
        raise ForbiddenError("Only the assigned worker can update this appointment")


def ensure_can_review(caller: User, appointment: Appointment) -> None:
    """Only the customer of the appointment may review it."""
    if caller.role != "customer" or appointment.user_id != caller.id:
        raise ForbiddenError("You can only review your own appointments")


def ensure_can_report(caller: User) -> None:
    ensure_role(caller, "customer")


def ensure_can_toggle_availability(caller: User) -> None:
    ensure_role(caller, "worker")


def ensure_admin(caller: User) -> None:
    ensure_role(caller, "admin")
