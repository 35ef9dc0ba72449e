"""Inverse-cost truck allocation across scored segments."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import List, Sequence

from ...models.domain import RouteAllocation, ScoredSegment

MIN_WEIGHT_COST = 0.1


def round_half_up(value: float, places: int) -> float:
    """Round the exact binary value of ``value`` half away from zero."""

    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-places)
    # quantize needs enough precision for every integer digit plus the decimals
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def total_capacity(segments: Sequence[ScoredSegment]) -> float:
    return sum(max(0.0, segment.capacity_tph) for segment in segments)


def _inverse_cost(segment: ScoredSegment) -> float:
    return 1 / max(segment.cost, MIN_WEIGHT_COST)


def _to_allocation(segment: ScoredSegment, trucks: int) -> RouteAllocation:
    return RouteAllocation(
        road_id=segment.road_id,
        road_type=segment.road_type,
        trucks=trucks,
        est_travel_minutes=round_half_up(segment.travel_minutes, 1),
        effective_speed_kmh=round_half_up(segment.effective_speed, 1),
        risk_score=round_half_up(segment.risk, 2),
        cost=round_half_up(segment.cost, 2),
        density=round_half_up(segment.density, 2),
        urgency=round_half_up(segment.urgency, 2),
    )


def allocate_trucks(segments: Sequence[ScoredSegment], total_trucks: int) -> List[RouteAllocation]:
    """Split ``total_trucks`` across segments in inverse proportion to cost.

    Segments are ordered cheapest first. Every segment but the last gets
    ``round(weight * total_trucks)`` clamped to what is still unassigned;
    the last (most expensive) segment takes the remainder, so the returned
    truck counts always sum to ``total_trucks``. Returns an empty list when
    there are no segments or no usable capacity.
    """

    if not segments or total_capacity(segments) == 0:
        return []

    ordered = sorted(segments, key=lambda segment: segment.cost)
    weight_sum = sum(_inverse_cost(segment) for segment in ordered)

    allocations: list[RouteAllocation] = []
    remaining = total_trucks
    last_index = len(ordered) - 1
    for index, segment in enumerate(ordered):
        if index == last_index:
            share = remaining
        else:
            weight = _inverse_cost(segment) / weight_sum
            share = math.floor(weight * total_trucks + 0.5)
        share = max(0, min(remaining, share))
        remaining -= share
        allocations.append(_to_allocation(segment, share))
    return allocations
