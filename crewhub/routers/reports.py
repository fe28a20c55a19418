# crewhub/routers/reports.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from crewhub.core.auth import require_auth
from crewhub.database import get_session
from crewhub.models.user import User
from crewhub.repositories.report_repo import ReportRepository
from crewhub.repositories.user_repo import UserRepository
from crewhub.schemas.report import ReportCreate, ReportRead
from crewhub.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["Reports"])

service = ReportService(ReportRepository(), UserRepository())


@router.post(
    "",
    response_model=ReportRead,
    status_code=status.HTTP_201_CREATED,
)
def create_report(
    payload: ReportCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Report a worker (customers only).
    """
    return service.create(session, current_user, payload)
