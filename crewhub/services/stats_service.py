# crewhub/services/stats_service.py
from sqlmodel import Session

from crewhub.repositories.stats_repo import StatsRepository
from crewhub.schemas.stats import AdminStats


class StatsService:
    """
    Orchestrates aggregated admin dashboard statistics.
    """

    def __init__(self, repo: StatsRepository):
        self.repo = repo

    def get_admin_stats(self, session: Session) -> AdminStats:
        return AdminStats(
            total_users=self.repo.count_by_role(session, "customer"),
            total_workers=self.repo.count_by_role(session, "worker"),
            active_appointments=self.repo.count_appointments(session, "pending"),
        )
