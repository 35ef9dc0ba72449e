"""Risk, cost and capacity scoring for road segments."""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping

from ...models.domain import ScoredSegment

DEFAULT_SPEED_KMH = 25.0
DEFAULT_LENGTH_KM = 3.0
MIN_LENGTH_KM = 0.1
DEFAULT_RATIO = 0.5
DEFAULT_CAPACITY = 150.0
MIN_EFFECTIVE_SPEED_KMH = 5.0


def parse_number(value: Any, fallback: float = 0.0) -> float:
    """Coerce ``value`` to a float, returning ``fallback`` instead of raising."""

    if value is None or isinstance(value, bool):
        return fallback
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return fallback
    try:
        number = float(value)
    except (TypeError, ValueError):
        return fallback
    if not math.isfinite(number):
        return fallback
    return number


def normalize01(value: Any, fallback: float = 0.0) -> float:
    """Map a ratio or a percentage onto [0, 1].

    Values up to 1 are already ratios and only clamped; anything larger is
    read as a percentage. A raw ``1`` therefore means 100%, not 1%.
    """

    number = parse_number(value, fallback)
    if number <= 1:
        return max(0.0, min(1.0, number))
    return max(0.0, min(1.0, number / 100))


def score_segment(record: Mapping[str, Any]) -> ScoredSegment:
    speed = parse_number(record.get("average_speed_kmh"), DEFAULT_SPEED_KMH)
    length = max(MIN_LENGTH_KM, parse_number(record.get("length_km"), DEFAULT_LENGTH_KM))
    density = normalize01(record.get("traffic_density"), DEFAULT_RATIO)
    urgency = normalize01(record.get("maintenance_urgency"), DEFAULT_RATIO)
    capacity = parse_number(record.get("road_capacity"), DEFAULT_CAPACITY)
    utilization = normalize01(record.get("capacity_utilization"), DEFAULT_RATIO)

    risk = 0.5 * urgency + 0.3 * density + 0.2 * utilization
    effective_speed = max(MIN_EFFECTIVE_SPEED_KMH, speed * (1 - 0.4 * risk))
    capacity_tph = capacity * (1 - 0.25 * risk)
    travel_minutes = (length / max(0.1, effective_speed)) * 60
    cost = travel_minutes * (1 + 0.5 * risk) + (1 - capacity_tph / max(capacity, 1)) * 10

    return ScoredSegment(
        road_id=record.get("road_id") or record.get("road_type") or "Road",
        road_type=record.get("road_type") or "",
        risk=risk,
        urgency=urgency,
        density=density,
        utilization=utilization,
        effective_speed=effective_speed,
        capacity_tph=max(0.0, capacity_tph),
        travel_minutes=travel_minutes,
        cost=cost,
    )


def score_segments(records: Iterable[Mapping[str, Any]]) -> list[ScoredSegment]:
    return [score_segment(record) for record in records]
