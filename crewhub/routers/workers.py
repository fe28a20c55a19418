# crewhub/routers/workers.py
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from crewhub.core.auth import require_worker
from crewhub.database import get_session
from crewhub.models.user import User
from crewhub.repositories.review_repo import ReviewRepository
from crewhub.repositories.user_repo import UserRepository
from crewhub.schemas.review import ReviewRead
from crewhub.schemas.user import (
    AvailabilityUpdate,
    UserRead,
    WorkerDetailRead,
    WorkerType,
)
from crewhub.services.worker_service import WorkerService

router = APIRouter(prefix="/workers", tags=["Workers"])

service = WorkerService(UserRepository(), ReviewRepository())


# -------- Public endpoints --------


@router.get("", response_model=list[UserRead])
def list_workers(
    session: Session = Depends(get_session),
    pincode: str | None = None,
    worker_type: WorkerType | None = Query(default=None, alias="workerType"),
):
    """
    List workers.

    - `pincode`: substring match on the worker's pincode.
    - `workerType`: exact service category.
    """
    return service.list_workers(session, pincode=pincode, worker_type=worker_type)


@router.patch("/availability", response_model=UserRead)
def set_availability(
    payload: AvailabilityUpdate,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_worker),
):
    """
    Worker toggles their own availability.
    """
    return service.set_availability(session, current_user, payload.is_available)


@router.get("/{worker_id}", response_model=WorkerDetailRead)
def get_worker(
    worker_id: int,
    session: Session = Depends(get_session),
):
    """
    Worker profile with average rating (0 when unreviewed).
    """
    return service.get_worker(session, worker_id)


@router.get("/{worker_id}/reviews", response_model=list[ReviewRead])
def list_worker_reviews(
    worker_id: int,
    session: Session = Depends(get_session),
):
    """
    Reviews received by a worker, newest first.
    """
    return service.list_reviews(session, worker_id)
