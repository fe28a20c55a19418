# crewhub/routers/admin.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from crewhub.core.auth import require_admin
from crewhub.database import get_session
from crewhub.repositories.report_repo import ReportRepository
from crewhub.repositories.stats_repo import StatsRepository
from crewhub.repositories.user_repo import UserRepository
from crewhub.schemas.report import (
    ReportRead,
    ReportStatusUpdate,
    ReportWithPartiesRead,
)
from crewhub.schemas.stats import AdminStats
from crewhub.services.report_service import ReportService
from crewhub.services.stats_service import StatsService

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(require_admin)],
)

stats_service = StatsService(StatsRepository())
report_service = ReportService(ReportRepository(), UserRepository())


@router.get("/stats", response_model=AdminStats)
def get_admin_stats(session: Session = Depends(get_session)):
    """
    Customer / worker counts and number of pending appointments.
    """
    return stats_service.get_admin_stats(session)


@router.get("/reports", response_model=list[ReportWithPartiesRead])
def list_reports(session: Session = Depends(get_session)):
    """
    Full report ledger, newest first.
    """
    return report_service.list_all(session)


@router.patch("/reports/{report_id}", response_model=ReportRead)
def update_report_status(
    report_id: int,
    payload: ReportStatusUpdate,
    session: Session = Depends(get_session),
):
    """
    Resolve a pending report.
    """
    return report_service.update_status(session, report_id, payload)
