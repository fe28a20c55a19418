# crewhub/routers/reviews.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from crewhub.core.auth import require_auth
from crewhub.database import get_session
from crewhub.models.user import User
from crewhub.repositories.appointment_repo import AppointmentRepository
from crewhub.repositories.review_repo import ReviewRepository
from crewhub.schemas.review import ReviewCreate, ReviewRead
from crewhub.services.review_service import ReviewService

router = APIRouter(prefix="/reviews", tags=["Reviews"])

service = ReviewService(ReviewRepository(), AppointmentRepository())


@router.post(
    "",
    response_model=ReviewRead,
    status_code=status.HTTP_201_CREATED,
)
def create_review(
    payload: ReviewCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Rate the worker of one of your completed appointments.
    """
    return service.create(session, current_user, payload)
