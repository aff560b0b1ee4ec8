import logging
from datetime import datetime, timedelta, timezone
from typing import List

from ..core.errors import PersistenceFailure
from ..schemas.feedback import FeedbackRecord
from ..schemas.health import HealthResponse, OutageReport, OutageReportMetadata, Status
from .store import FeedbackStore

logger = logging.getLogger(__name__)

DATABASE_STATUS_NAME = "database"
DATABASE_STATUS_DESCRIPTION = "postgres backend"
OUTAGE_STATUS_NAME = "user_outage_reports"
OUTAGE_STATUS_DESCRIPTION = "outage reports directly from users"


class HealthService:
    def __init__(self, store: FeedbackStore, lookback_hours: int = 48):
        self.store = store
        self.lookback = timedelta(hours=lookback_hours)

    def check(self) -> HealthResponse:
        """
        Collects the database and user outage report statuses.

        A failed connectivity test or outage query collapses the whole
        answer to a single unhealthy database status. Unsilenced outage
        reports inside the lookback window mark the outage status
        unhealthy and are listed in its metadata.
        """
        try:
            self.store.test_connection()
            outages = self.store.get_recent_outages(datetime.now(timezone.utc) - self.lookback)
        except PersistenceFailure as e:
            logger.error(e.message, extra={"error_code": e.error_code, "details": e.details})
            return HealthResponse(statuses=[_database_status(healthy=False)])

        return HealthResponse(statuses=[
            _database_status(healthy=True),
            _outage_status(outages),
        ])


def _database_status(healthy: bool) -> Status:
    return Status(
        name=DATABASE_STATUS_NAME,
        description=DATABASE_STATUS_DESCRIPTION,
        healthy=healthy,
    )


def _outage_status(outages: List[FeedbackRecord]) -> Status:
    status = Status(
        name=OUTAGE_STATUS_NAME,
        description=OUTAGE_STATUS_DESCRIPTION,
        healthy=not outages,
    )
    if outages:
        status.metadata = OutageReportMetadata(outages=[
            OutageReport(id=str(outage.id), message=outage.message, received_at=outage.received_at)
            for outage in outages
        ])
    return status
