from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, ConfigDict

from .binning import Histogram
from .numeric import sum_of


class BaseEntity(BaseModel):
    model_config = ConfigDict(frozen=True)

    ecs_id: UUID = Field(default_factory=uuid4)
    version: int = Field(ge=0, default=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class HistogramSummaryEntity(BaseEntity):
    """Serializable snapshot of a built histogram."""

    mode: str
    is_integer: bool
    bucket_count: int = Field(ge=0)
    sample_count: int = Field(ge=0)
    low: Optional[Union[int, float]] = None
    high: Optional[Union[int, float]] = None
    edges: List[Union[int, float]] = Field(default_factory=list)
    counts: List[int] = Field(default_factory=list)


def summarize(histogram: Histogram) -> HistogramSummaryEntity:
    assert histogram is not None, "histogram required"
    edges = histogram.edges()
    counts = histogram.counts()
    return HistogramSummaryEntity(
        mode=histogram.mode,
        is_integer=histogram.is_integer,
        bucket_count=len(histogram),
        sample_count=sum_of(counts),
        low=edges[0] if edges else None,
        high=edges[-1] if edges else None,
        edges=edges,
        counts=counts,
    )
