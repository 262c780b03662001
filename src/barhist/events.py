from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union
from uuid import uuid4

from pydantic import BaseModel, Field, ConfigDict

from .entities import HistogramSummaryEntity


class BaseEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    subject_id: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    process_name: Optional[str] = None

    @property
    def name(self) -> str:
        return self.__class__.__name__


class HistogramBuiltEvent(BaseEvent):
    mode: str
    bucket_count: int = Field(ge=0)
    sample_count: int = Field(ge=0)
    edges: List[Union[int, float]] = Field(default_factory=list)
    counts: List[int] = Field(default_factory=list)

    @classmethod
    def from_summary(cls, summary: HistogramSummaryEntity, *, process_name: Optional[str] = None) -> "HistogramBuiltEvent":
        return cls(
            subject_id=str(summary.ecs_id),
            process_name=process_name,
            mode=summary.mode,
            bucket_count=summary.bucket_count,
            sample_count=summary.sample_count,
            edges=summary.edges,
            counts=summary.counts,
        )


class HistogramRenderedEvent(BaseEvent):
    width: int = Field(ge=1)
    lines: int = Field(ge=0)
    sum_track: bool = Field(default=False)


def emit_event(event: BaseEvent, *, sink_path: Optional[Path] = None, echo: bool = True) -> None:
    """Append ``event`` as one JSON line to the sink (logs/events.jsonl by default).

    The line is echoed to stdout unless ``echo`` is off; the CLI turns it off
    so stdout carries only the chart.
    """
    assert event is not None, "event required"
    sink = sink_path or Path("logs") / "events.jsonl"
    sink.parent.mkdir(parents=True, exist_ok=True)

    line = json.dumps({"name": event.name, **event.model_dump(mode="json")})
    with open(sink, "a", encoding="utf-8") as f:
        f.write(line + "\n")

    if echo:
        print(line)
