# crewhub/services/report_service.py
import logging

from sqlmodel import Session

from crewhub.core.errors import InvalidStateTransition, NotFoundError
from crewhub.core.permissions import ensure_can_report
from crewhub.models.report import Report
from crewhub.models.user import User
from crewhub.repositories.report_repo import ReportRepository
from crewhub.repositories.user_repo import UserRepository
from crewhub.schemas.report import (
    ReportCreate,
    ReportRead,
    ReportStatusUpdate,
    ReportWithPartiesRead,
)
from crewhub.schemas.user import UserRead

logger = logging.getLogger(__name__)


class ReportService:
    """
    Abuse report ledger: customers file, admins read and resolve.
    """

    def __init__(self, report_repo: ReportRepository, user_repo: UserRepository):
        self.report_repo = report_repo
        self.user_repo = user_repo

    def create(
        self,
        session: Session,
        current_user: User,
        payload: ReportCreate,
    ) -> ReportRead:
        """
        File a report against any existing worker.

        Raises:
            ForbiddenError: caller is not a customer.
            NotFoundError: reported id is not a worker.
        """
        ensure_can_report(current_user)

        worker = self.user_repo.get_worker(session, payload.reported_worker_id)
        if worker is None:
            raise NotFoundError("Worker not found")

        report = Report(
            reporter_id=current_user.id,
            reported_worker_id=worker.id,
            reason=payload.reason,
        )
        report = self.report_repo.create(session, report)
        logger.info(
            "Report id=%s filed by user=%s against worker=%s",
            report.id,
            current_user.id,
            worker.id,
        )
        return ReportRead.model_validate(report)

    # -------- Admin operations --------

    def list_all(self, session: Session) -> list[ReportWithPartiesRead]:
        """Full ledger, newest first, with reporter and reported worker."""
        result: list[ReportWithPartiesRead] = []
        for report in self.report_repo.list_all(session):
            dto = ReportWithPartiesRead.model_validate(report)
            reporter = self.user_repo.get_by_id(session, report.reporter_id)
            worker = self.user_repo.get_by_id(session, report.reported_worker_id)
            dto.reporter = UserRead.from_user(reporter) if reporter else None
            dto.reported_worker = UserRead.from_user(worker) if worker else None
            result.append(dto)
        return result

    def update_status(
        self,
        session: Session,
        report_id: int,
        payload: ReportStatusUpdate,
    ) -> ReportRead:
        """
        Resolve a pending report.

          pending  -> resolved
          resolved -> (terminal)
        """
        report = self.report_repo.get_by_id(session, report_id)
        if report is None:
            raise NotFoundError("Report not found")

        current = report.status
        if current != "pending":
            raise InvalidStateTransition(current, payload.status)

        if not self.report_repo.set_status(session, report_id, current, payload.status):
            session.refresh(report)
            raise InvalidStateTransition(report.status, payload.status)

        session.refresh(report)
        logger.info("Report id=%s %s -> %s", report_id, current, report.status)
        return ReportRead.model_validate(report)
