# crewhub/services/auth_service.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from crewhub.core.errors import UnauthorizedError, ValidationError
from crewhub.core.security import get_password_hash, verify_password
from crewhub.models.session import UserSession
from crewhub.models.user import User
from crewhub.repositories.session_repo import SessionRepository
from crewhub.repositories.user_repo import UserRepository
from crewhub.schemas.user import LoginRequest, UserRegister

logger = logging.getLogger(__name__)


class AuthService:
    """
    Registration, credential checks and logout.

    Session issuing (token + cookie) lives in `core.auth`; this service
    only decides *who* gets a session.
    """

    def __init__(self, user_repo: UserRepository, session_repo: SessionRepository):
        self.user_repo = user_repo
        self.session_repo = session_repo

    def register(self, session: Session, payload: UserRegister) -> User:
        """
        Create a customer or worker identity.

        Rules:
          - username must be unused (400 otherwise, existing row untouched)
          - worker fields are stored only for role='worker'
        """
        if self.user_repo.get_by_username(session, payload.username):
            raise ValidationError("Username already exists", field="username")

        user = User(
            username=payload.username,
            password_hash=get_password_hash(payload.password),
            full_name=payload.full_name,
            mobile=payload.mobile,
            address=payload.address,
            pincode=payload.pincode,
            role=payload.role,
        )
        if payload.role == "worker":
            user.worker_type = payload.worker_type
            user.visiting_charge = payload.visiting_charge
            user.is_available = payload.is_available

        try:
            user = self.user_repo.create(session, user)
        except IntegrityError:
            # Lost a race with a concurrent registration of the same handle
            session.rollback()
            raise ValidationError("Username already exists", field="username")

        logger.info("Registered %s id=%s", user.role, user.id)
        return user

    def authenticate(self, session: Session, payload: LoginRequest) -> User:
        """
        Check credentials.

        Unknown username and wrong password raise the same
        UnauthorizedError, after the same amount of hashing work.
        """
        user = self.user_repo.get_by_username(session, payload.username)
        hashed = user.password_hash if user else None

        if not verify_password(payload.password, hashed) or user is None:
            logger.info("Failed login attempt")
            raise UnauthorizedError("Invalid credentials")

        return user

    def logout(self, session: Session, user_session: UserSession) -> None:
        self.session_repo.delete(session, user_session)
        logger.info("Session closed for user id=%s", user_session.user_id)
