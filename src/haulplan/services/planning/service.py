"""High-level orchestration for truck route plans."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from ...config import settings
from ...data.roads_repository import pick_latest_by_key, read_records
from ...models.domain import PlanSummary, RouteAllocation, RoutePlan, ScoredSegment
from .allocator import allocate_trucks, round_half_up, total_capacity
from .scoring import parse_number, score_segments
from .watchlist import select_maintenance_watch

logger = logging.getLogger(__name__)

PLAN_NOTE = "Allocation weighted by travel cost (travel time + risk) and road capacity from {source}"
EMPTY_SOURCE_NOTE = "No road records available in {source}"
ZERO_CAPACITY_NOTE = "Road capacity is zero"


def resolve_total_trucks(value: Any, default: Optional[int] = None) -> int:
    """Turn a caller-supplied fleet size into a non-negative truck count.

    A missing value falls back to ``default``; negative or non-numeric
    values count as zero and fractions are truncated.
    """

    if value is None:
        return settings.default_total_trucks if default is None else default
    return max(0, int(parse_number(value, 0)))


def assemble_plan(
    routes: Sequence[RouteAllocation],
    segments: Sequence[ScoredSegment],
    total_trucks: int,
    note: str,
) -> RoutePlan:
    return RoutePlan(
        routes=list(routes),
        summary=PlanSummary(
            total_trucks=total_trucks,
            capacity=round_half_up(total_capacity(segments), 1),
            note=note,
            maintenance_watch=select_maintenance_watch(routes),
        ),
    )


def plan_from_records(
    records: Sequence[Mapping[str, str]],
    total_trucks: int,
    *,
    source_name: str = "roads_processed.csv",
) -> RoutePlan:
    """Deduplicate, score and allocate already-loaded road records."""

    latest = pick_latest_by_key(records, "road_id")
    logger.debug("Kept %d latest records out of %d", len(latest), len(records))
    if not latest:
        logger.warning("No usable road records in %s", source_name)
        return assemble_plan([], [], total_trucks, EMPTY_SOURCE_NOTE.format(source=source_name))

    segments = score_segments(latest)
    if total_capacity(segments) == 0:
        logger.warning("Total road capacity is zero for %d segments", len(segments))
        return assemble_plan([], segments, total_trucks, ZERO_CAPACITY_NOTE)

    routes = allocate_trucks(segments, total_trucks)
    plan = assemble_plan(routes, segments, total_trucks, PLAN_NOTE.format(source=source_name))
    logger.info(
        "Allocated %d trucks across %d segments (watch: %s)",
        total_trucks,
        len(routes),
        ", ".join(plan.summary.maintenance_watch) or "none",
    )
    return plan


async def build_route_plan(
    ml_payloads: Optional[Mapping[str, Any]] = None,
    *,
    source: Optional[Path] = None,
    max_rows: Optional[int] = None,
    timeout: Optional[float] = None,
) -> RoutePlan:
    """Read the roads dataset and compute a truck allocation plan.

    The fleet size comes from ``ml_payloads["route_optimization"]["traffic_volume_trucks"]``.
    Raises ``RecordNotFoundError``/``RecordParseError`` when the source cannot be read.
    """

    payload = (ml_payloads or {}).get("route_optimization")
    if not isinstance(payload, Mapping):
        payload = {}
    total_trucks = resolve_total_trucks(payload.get("traffic_volume_trucks"))

    path = Path(source) if source is not None else settings.roads_path
    table = await read_records(
        path,
        max_rows if max_rows is not None else settings.route_plan_max_rows,
        timeout=timeout if timeout is not None else settings.read_timeout_seconds,
    )
    return plan_from_records(table.rows, total_trucks, source_name=path.name)
