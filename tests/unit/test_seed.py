from sqlmodel import select

from crewhub.core.config import Settings
from crewhub.core.security import verify_password
from crewhub.models.appointment import Appointment
from crewhub.models.user import User
from crewhub.repositories.appointment_repo import AppointmentRepository
from crewhub.repositories.user_repo import UserRepository
from crewhub.services.seed_service import SeedService


def _service() -> SeedService:
    return SeedService(UserRepository(), AppointmentRepository())


def test_seed_admin_only(db_session):
    settings = Settings(SEED_DEMO_DATA=False, ADMIN_PASSWORD="s3cret")
    assert _service().seed(db_session, settings) is True

    users = db_session.exec(select(User)).all()
    assert [u.role for u in users] == ["admin"]
    assert verify_password("s3cret", users[0].password_hash)


def test_seed_demo_data(db_session):
    settings = Settings(SEED_DEMO_DATA=True)
    _service().seed(db_session, settings)

    roles = sorted(u.role for u in db_session.exec(select(User)).all())
    assert roles == ["admin", "customer", "worker", "worker"]
    appts = db_session.exec(select(Appointment)).all()
    assert len(appts) == 1 and appts[0].status == "pending"


def test_seed_runs_once(db_session):
    settings = Settings(SEED_DEMO_DATA=True)
    assert _service().seed(db_session, settings) is True
    assert _service().seed(db_session, settings) is False
    assert len(db_session.exec(select(User)).all()) == 4
