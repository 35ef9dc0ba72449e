"""Domain models for road records, scored segments and truck allocation plans."""

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class RecordTable:
    """Rows read from a header-delimited source, keyed by column name."""

    columns: List[str]
    rows: List[dict[str, str]]
    consumed: int = 0


@dataclass(slots=True, frozen=True)
class ScoredSegment:
    """Road segment scored from its latest condition record."""

    road_id: str
    road_type: str
    risk: float
    urgency: float
    density: float
    utilization: float
    effective_speed: float
    capacity_tph: float
    travel_minutes: float
    cost: float


@dataclass(slots=True)
class RouteAllocation:
    """Trucks assigned to a segment, with presentation-rounded metrics."""

    road_id: str
    road_type: str
    trucks: int
    est_travel_minutes: float
    effective_speed_kmh: float
    risk_score: float
    cost: float
    density: float
    urgency: float


@dataclass(slots=True)
class PlanSummary:
    total_trucks: int
    capacity: float
    note: str
    maintenance_watch: List[str] = field(default_factory=list)


@dataclass(slots=True)
class RoutePlan:
    routes: List[RouteAllocation]
    summary: PlanSummary
