from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class MetricPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    tags: dict[str, str] = Field(default_factory=dict)
    value: float
    # None lets the database assign the write time
    timestamp: Optional[datetime] = None


class CycleOutcome(BaseModel):
    success: bool
    points_written: int = 0
    error: Optional[str] = None
    started_at: datetime
    finished_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def duration_seconds(self) -> float:
        return (self.finished_at - self.started_at).total_seconds()
