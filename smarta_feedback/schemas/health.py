from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class OutageReport(BaseModel):
    id: str
    message: Optional[str] = None
    received_at: datetime


class OutageReportMetadata(BaseModel):
    outages: List[OutageReport]


class Status(BaseModel):
    name: str
    description: str
    healthy: bool
    metadata: Optional[OutageReportMetadata] = None


class HealthResponse(BaseModel):
    statuses: List[Status]
