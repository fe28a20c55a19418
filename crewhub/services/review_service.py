# crewhub/services/review_service.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from crewhub.core.errors import NotFoundError, ValidationError
from crewhub.core.permissions import ensure_can_review
from crewhub.models.review import Review
from crewhub.models.user import User
from crewhub.repositories.appointment_repo import AppointmentRepository
from crewhub.repositories.review_repo import ReviewRepository
from crewhub.schemas.review import ReviewCreate, ReviewRead

logger = logging.getLogger(__name__)


class ReviewService:
    """
    Review ledger.

    Rules:
      - only the appointment's customer may review it
      - the appointment must be completed
      - one review per appointment
    """

    def __init__(
        self,
        review_repo: ReviewRepository,
        appointment_repo: AppointmentRepository,
    ):
        self.review_repo = review_repo
        self.appointment_repo = appointment_repo

    def create(
        self,
        session: Session,
        current_user: User,
        payload: ReviewCreate,
    ) -> ReviewRead:
        appointment = self.appointment_repo.get_by_id(session, payload.appointment_id)
        if appointment is None:
            raise NotFoundError("Appointment not found")

        ensure_can_review(current_user, appointment)

        if appointment.status != "completed":
            raise ValidationError(
                "Only completed appointments can be reviewed",
                field="appointmentId",
            )

        if self.review_repo.get_for_appointment(session, appointment.id):
            raise ValidationError(
                "This appointment has already been reviewed",
                field="appointmentId",
            )

        review = Review(
            appointment_id=appointment.id,
            worker_id=appointment.worker_id,
            user_id=appointment.user_id,
            rating=payload.rating,
            comment=payload.comment,
        )
        try:
            review = self.review_repo.create(session, review)
        except IntegrityError:
            session.rollback()
            raise ValidationError(
                "This appointment has already been reviewed",
                field="appointmentId",
            )

        logger.info(
            "Review id=%s rating=%s for worker=%s",
            review.id,
            review.rating,
            review.worker_id,
        )
        return ReviewRead.model_validate(review)
