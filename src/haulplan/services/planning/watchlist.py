"""Maintenance watchlist selection."""

from __future__ import annotations

from typing import List, Sequence

from ...models.domain import RouteAllocation

WATCH_THRESHOLD = 0.6
WATCH_LIMIT = 3


def select_maintenance_watch(
    allocations: Sequence[RouteAllocation],
    *,
    threshold: float = WATCH_THRESHOLD,
    limit: int = WATCH_LIMIT,
) -> List[str]:
    """Return up to ``limit`` road ids with high urgency or risk, most urgent first."""

    flagged = [item for item in allocations if item.urgency >= threshold or item.risk_score >= threshold]
    flagged.sort(key=lambda item: item.urgency, reverse=True)
    return [item.road_id for item in flagged[:limit]]
