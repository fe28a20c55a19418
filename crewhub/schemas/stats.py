# crewhub/schemas/stats.py
from pydantic import ConfigDict

from crewhub.schemas.common import APIModel


class AdminStats(APIModel):
    """
    Aggregate counts for the admin dashboard.

      - total_users: customer identities
      - total_workers: worker identities
      - active_appointments: appointments still pending
    """

    model_config = ConfigDict(extra="forbid")

    total_users: int
    total_workers: int
    active_appointments: int
