from datetime import datetime, timezone

import pytest

from crewhub.core.errors import InvalidStateTransition
from crewhub.models.appointment import Appointment
from crewhub.models.user import User
from crewhub.repositories.appointment_repo import AppointmentRepository
from crewhub.services.appointment_service import ALLOWED_TRANSITIONS, check_transition

LEGAL = [
    ("pending", "accepted"),
    ("pending", "rejected"),
    ("accepted", "completed"),
]


@pytest.mark.parametrize("current,new", LEGAL)
def test_legal_transitions(current, new):
    check_transition(current, new)


@pytest.mark.parametrize(
    "current,new",
    [
        ("pending", "completed"),
        ("accepted", "rejected"),
        ("accepted", "accepted"),
        ("rejected", "accepted"),
        ("rejected", "completed"),
        ("completed", "rejected"),
        ("completed", "accepted"),
    ],
)
def test_illegal_transitions(current, new):
    with pytest.raises(InvalidStateTransition) as exc_info:
        check_transition(current, new)
    assert exc_info.value.status_code == 409
    assert exc_info.value.current == current
    assert exc_info.value.requested == new


def test_terminal_states_have_no_exits():
    assert ALLOWED_TRANSITIONS["rejected"] == frozenset()
    assert ALLOWED_TRANSITIONS["completed"] == frozenset()


def _seed_pending(db_session) -> int:
    customer = User(
        username="c", password_hash="x", full_name="C", mobile="1",
        address="a", pincode="1", role="customer",
    )
    worker = User(
        username="w", password_hash="x", full_name="W", mobile="2",
        address="b", pincode="2", role="worker",
        worker_type="Plumber", visiting_charge=10, is_available=True,
    )
    db_session.add(customer)
    db_session.add(worker)
    db_session.commit()
    appt = Appointment(
        user_id=customer.id, worker_id=worker.id,
        issue_description="i", address="a",
    )
    db_session.add(appt)
    db_session.commit()
    return appt.id


class TestCompareAndSet:
    def test_transition_applies_when_status_matches(self, db_session):
        repo = AppointmentRepository()
        appt_id = _seed_pending(db_session)
        visit = datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc)

        assert repo.transition(db_session, appt_id, "pending", "accepted", visit) is True
        appt = repo.get_by_id(db_session, appt_id)
        assert appt.status == "accepted"
        assert appt.visit_time is not None

    def test_stale_expected_status_is_a_no_op(self, db_session):
        repo = AppointmentRepository()
        appt_id = _seed_pending(db_session)
        first = datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc)
        second = datetime(2025, 2, 2, 9, 0, tzinfo=timezone.utc)

        # Two workers' requests both read 'pending'; only the first write lands
        assert repo.transition(db_session, appt_id, "pending", "accepted", first) is True
        assert repo.transition(db_session, appt_id, "pending", "accepted", second) is False

        appt = repo.get_by_id(db_session, appt_id)
        assert appt.visit_time.replace(tzinfo=None) == first.replace(tzinfo=None)
