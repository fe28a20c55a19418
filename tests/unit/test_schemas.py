import pytest
from pydantic import ValidationError

from crewhub.models.user import User
from crewhub.schemas.appointment import AppointmentStatusUpdate
from crewhub.schemas.user import UserRead, UserRegister, WorkerProfile


def base(**overrides):
    data = {
        "username": "alice",
        "password": "pw",
        "fullName": "Alice",
        "mobile": "1",
        "address": "a",
        "pincode": "10001",
    }
    data.update(overrides)
    return data


def test_register_defaults_to_customer():
    payload = UserRegister.model_validate(base())
    assert payload.role == "customer"
    assert payload.worker_type is None


def test_worker_needs_charge():
    with pytest.raises(ValidationError):
        UserRegister.model_validate(base(role="worker", workerType="Painter"))


def test_unknown_fields_forbidden():
    with pytest.raises(ValidationError):
        UserRegister.model_validate(base(isAdmin=True))


def test_status_update_parses_iso_visit_time():
    update = AppointmentStatusUpdate.model_validate(
        {"status": "accepted", "visitTime": "2025-01-01T10:00:00Z"}
    )
    assert update.visit_time.year == 2025
    assert update.visit_time.utcoffset().total_seconds() == 0


def test_status_update_reads_offsetless_visit_time_as_utc():
    update = AppointmentStatusUpdate.model_validate(
        {"status": "accepted", "visitTime": "2025-01-01T10:00"}
    )
    assert update.visit_time.tzinfo is not None
    assert update.visit_time.utcoffset().total_seconds() == 0
    assert update.visit_time.hour == 10


def test_status_update_converts_offsets_to_utc():
    update = AppointmentStatusUpdate.model_validate(
        {"status": "accepted", "visitTime": "2025-01-01T10:00:00+05:00"}
    )
    assert update.visit_time.utcoffset().total_seconds() == 0
    assert update.visit_time.hour == 5


def test_user_read_builds_variant_from_role():
    worker = User(
        id=1, username="w", password_hash="x", full_name="W", mobile="1",
        address="a", pincode="1", role="worker",
        worker_type="Cleaner", visiting_charge=25, is_available=False,
    )
    read = UserRead.from_user(worker)
    assert isinstance(read.profile, WorkerProfile)
    assert read.profile.visiting_charge == 25

    dumped = read.model_dump(by_alias=True)
    assert dumped["profile"]["workerType"] == "Cleaner"
    assert "passwordHash" not in dumped


def test_customer_row_with_stray_worker_columns_reads_as_customer():
    customer = User(
        id=2, username="c", password_hash="x", full_name="C", mobile="1",
        address="a", pincode="1", role="customer",
        worker_type="Cleaner", visiting_charge=25,
    )
    dumped = UserRead.from_user(customer).model_dump(by_alias=True)
    assert dumped["profile"] == {"role": "customer"}
