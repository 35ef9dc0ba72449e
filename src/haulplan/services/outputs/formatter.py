"""Utilities to serialize route plans into API/JSON payloads."""

from __future__ import annotations

from ...models.domain import RouteAllocation, RoutePlan
from ...schemas.route_plan import RouteModel, RoutePlanResponse, RoutePlanSummaryModel


def _route_model(route: RouteAllocation) -> RouteModel:
    return RouteModel(
        roadId=route.road_id,
        type=route.road_type,
        trucks=route.trucks,
        estTravelMinutes=route.est_travel_minutes,
        effectiveSpeedKmh=route.effective_speed_kmh,
        riskScore=route.risk_score,
        cost=route.cost,
        density=route.density,
        urgency=route.urgency,
    )


def route_plan_to_response(plan: RoutePlan) -> RoutePlanResponse:
    summary = plan.summary
    return RoutePlanResponse(
        routes=[_route_model(route) for route in plan.routes],
        summary=RoutePlanSummaryModel(
            totalTrucks=summary.total_trucks,
            capacity=summary.capacity,
            note=summary.note,
            maintenanceWatch=list(summary.maintenance_watch),
        ),
    )


def route_plan_to_json(plan: RoutePlan) -> dict:
    """Plan as a plain dict with ``routes`` and ``summary`` keys."""
    return route_plan_to_response(plan).model_dump(exclude={"status"})
