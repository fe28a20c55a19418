# crewhub/repositories/user_repo.py
from sqlmodel import Session, select

from crewhub.models.user import User


class UserRepository:
    """
    Data access layer for User.

    Responsibilities:
      - Pure DB operations (CRUD + queries)
      - No FastAPI, no HTTP, no business logic
    """

    # ----- Basic CRUD -----

    def get_by_id(self, session: Session, user_id: int) -> User | None:
        """Return a User by primary key, or None if not found."""
        return session.get(User, user_id)

    def get_by_username(self, session: Session, username: str) -> User | None:
        """Return a User by unique username, or None if not found."""
        stmt = select(User).where(User.username == username)
        return session.exec(stmt).first()

    def exists_any(self, session: Session) -> bool:
        """True once at least one identity has been stored."""
        return session.exec(select(User.id).limit(1)).first() is not None

    def create(self, session: Session, user: User) -> User:
        """Insert a new User and return the persisted row."""
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    def update(self, session: Session, user: User) -> User:
        """Persist changes to an existing User."""
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    # ----- Workers -----

    def get_worker(self, session: Session, worker_id: int) -> User | None:
        """Return the identity only if it exists AND has role='worker'."""
        stmt = select(User).where(User.id == worker_id, User.role == "worker")
        return session.exec(stmt).first()

    def list_workers(
        self,
        session: Session,
        pincode: str | None = None,
        worker_type: str | None = None,
    ) -> list[User]:
        """
        Workers, optionally filtered.

        Args:
            pincode: substring match against the worker's pincode
            worker_type: exact match against the service category
        """
        stmt = select(User).where(User.role == "worker")
        if worker_type:
            stmt = stmt.where(User.worker_type == worker_type)
        if pincode:
            stmt = stmt.where(User.pincode.contains(pincode, autoescape=True))
        stmt = stmt.order_by(User.id)
        return list(session.exec(stmt).all())
