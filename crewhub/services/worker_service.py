# crewhub/services/worker_service.py
import logging

from sqlmodel import Session

from crewhub.core.errors import NotFoundError
from crewhub.core.permissions import ensure_can_toggle_availability
from crewhub.models.user import User
from crewhub.repositories.review_repo import ReviewRepository
from crewhub.repositories.user_repo import UserRepository
from crewhub.schemas.review import ReviewRead
from crewhub.schemas.user import UserRead, WorkerDetailRead

logger = logging.getLogger(__name__)


class WorkerService:
    """
    Worker discovery, worker profile and availability.
    """

    def __init__(self, user_repo: UserRepository, review_repo: ReviewRepository):
        self.user_repo = user_repo
        self.review_repo = review_repo

    def list_workers(
        self,
        session: Session,
        pincode: str | None = None,
        worker_type: str | None = None,
    ) -> list[UserRead]:
        """
        Public worker listing.

        - pincode: substring match ("100" matches "10001")
        - worker_type: exact category match
        """
        workers = self.user_repo.list_workers(
            session, pincode=pincode, worker_type=worker_type
        )
        return [UserRead.from_user(w) for w in workers]

    def get_worker(self, session: Session, worker_id: int) -> WorkerDetailRead:
        """
        Worker profile plus average rating (recomputed on every read).

        Raises:
            NotFoundError: unknown id or identity is not a worker.
        """
        worker = self._get_worker_or_404(session, worker_id)
        detail = WorkerDetailRead.from_user(worker)
        detail.average_rating = self.review_repo.average_rating(session, worker.id)
        return detail

    def list_reviews(self, session: Session, worker_id: int) -> list[ReviewRead]:
        worker = self._get_worker_or_404(session, worker_id)
        reviews = self.review_repo.list_for_worker(session, worker.id)
        return [ReviewRead.model_validate(r) for r in reviews]

    def set_availability(
        self,
        session: Session,
        current_user: User,
        is_available: bool,
    ) -> UserRead:
        """A worker flips their own availability flag."""
        ensure_can_toggle_availability(current_user)
        current_user.is_available = is_available
        user = self.user_repo.update(session, current_user)
        logger.info("Worker id=%s availability=%s", user.id, is_available)
        return UserRead.from_user(user)

    def _get_worker_or_404(self, session: Session, worker_id: int) -> User:
        worker = self.user_repo.get_worker(session, worker_id)
        if worker is None:
            raise NotFoundError("Worker not found")
        return worker
