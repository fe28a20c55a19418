# crewhub/repositories/review_repo.py
from sqlalchemy import func
from sqlmodel import Session, select

from crewhub.models.review import Review


class ReviewRepository:
    """
    Data access layer for reviews.
    """

    def create(self, session: Session, review: Review) -> Review:
        session.add(review)
        session.commit()
        session.refresh(review)
        return review

    def get_for_appointment(self, session: Session, appointment_id: int) -> Review | None:
        stmt = select(Review).where(Review.appointment_id == appointment_id)
        return session.exec(stmt).first()

    def list_for_worker(self, session: Session, worker_id: int) -> list[Review]:
        stmt = (
            select(Review)
            .where(Review.worker_id == worker_id)
            .order_by(Review.created_at.desc(), Review.id.desc())
        )
        return list(session.exec(stmt).all())

    def average_rating(self, session: Session, worker_id: int) -> float:
        """
        Mean rating over all reviews of a worker; 0.0 when there are none.
        """
        stmt = select(func.avg(Review.rating)).where(Review.worker_id == worker_id)
        value = session.exec(stmt).one()
        return float(value or 0.0)
