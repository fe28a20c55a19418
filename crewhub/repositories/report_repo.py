# crewhub/repositories/report_repo.py
from sqlalchemy import update
from sqlmodel import Session, select

from crewhub.models.report import Report


class ReportRepository:
    """
    Data access layer for abuse reports.
    """

    def get_by_id(self, session: Session, report_id: int) -> Report | None:
        return session.get(Report, report_id)

    def create(self, session: Session, report: Report) -> Report:
        session.add(report)
        session.commit()
        session.refresh(report)
        return report

    def list_all(self, session: Session) -> list[Report]:
        stmt = select(Report).order_by(Report.created_at.desc(), Report.id.desc())
        return list(session.exec(stmt).all())

    def set_status(
        self,
        session: Session,
        report_id: int,
        expected_status: str,
        new_status: str,
    ) -> bool:
        """Conditional status update; False if the status had already moved."""
        stmt = (
            update(Report)
            .where(Report.id == report_id, Report.status == expected_status)
            .values(status=new_status)
        )
        result = session.execute(stmt)
        session.commit()
        return result.rowcount == 1
