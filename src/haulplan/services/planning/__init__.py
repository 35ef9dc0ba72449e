"""Truck allocation planning services."""

from .allocator import allocate_trucks, round_half_up, total_capacity
from .scoring import normalize01, parse_number, score_segment, score_segments
from .service import assemble_plan, build_route_plan, plan_from_records, resolve_total_trucks
from .watchlist import select_maintenance_watch

__all__ = [
    "allocate_trucks",
    "assemble_plan",
    "build_route_plan",
    "normalize01",
    "parse_number",
    "plan_from_records",
    "resolve_total_trucks",
    "round_half_up",
    "score_segment",
    "score_segments",
    "select_maintenance_watch",
    "total_capacity",
]
