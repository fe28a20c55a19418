# crewhub/services/seed_service.py
import logging

from sqlmodel import Session

from crewhub.core.config import Settings
from crewhub.core.security import get_password_hash
from crewhub.models.appointment import Appointment
from crewhub.models.user import User
from crewhub.repositories.appointment_repo import AppointmentRepository
from crewhub.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"


class SeedService:
    """
    First-run data.

    Runs only while the users table is empty, so restarting the app never
    duplicates rows or overwrites edited ones.
    """

    def __init__(self, user_repo: UserRepository, appointment_repo: AppointmentRepository):
        self.user_repo = user_repo
        self.appointment_repo = appointment_repo

    def seed(self, session: Session, settings: Settings) -> bool:
        """
        Create the admin identity and, if SEED_DEMO_DATA is on, a small
        demo marketplace. Returns True when anything was written.
        """
        if self.user_repo.exists_any(session):
            return False

        logger.info("Seeding database...")
        self.user_repo.create(
            session,
            User(
                username=settings.ADMIN_USERNAME,
                password_hash=get_password_hash(settings.ADMIN_PASSWORD),
                full_name="Admin User",
                mobile="9999999999",
                address="Admin HQ",
                pincode="000000",
                role="admin",
            ),
        )

        if settings.SEED_DEMO_DATA:
            self._seed_demo(session)

        logger.info("Seeding complete")
        return True

    def _seed_demo(self, session: Session) -> None:
        password_hash = get_password_hash(DEMO_PASSWORD)

        customer = self.user_repo.create(
            session,
            User(
                username="user@example.com",
                password_hash=password_hash,
                full_name="John Doe",
                mobile="1234567890",
                address="123 Maple St",
                pincode="10001",
                role="customer",
            ),
        )
        electrician = self.user_repo.create(
            session,
            User(
                username="electrician@example.com",
                password_hash=password_hash,
                full_name="Mike Spark",
                mobile="9876543210",
                address="456 Oak Ave",
                pincode="10001",
                role="worker",
                worker_type="Electrician",
                visiting_charge=50,
                is_available=True,
            ),
        )
        self.user_repo.create(
            session,
            User(
                username="plumber@example.com",
                password_hash=password_hash,
                full_name="Bob Pipes",
                mobile="5555555555",
                address="789 Pine Rd",
                pincode="10002",
                role="worker",
                worker_type="Plumber",
                visiting_charge=40,
                is_available=True,
            ),
        )
        self.appointment_repo.create(
            session,
            Appointment(
                user_id=customer.id,
                worker_id=electrician.id,
                issue_description="Sparking outlet in kitchen",
                address="123 Maple St",
                status="pending",
            ),
        )
