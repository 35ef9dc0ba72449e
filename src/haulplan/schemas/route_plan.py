"""Route plan request/response schemas."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class RoutePlanRequest(BaseModel):
    mlPayloads: Dict[str, Any] = Field(
        default_factory=dict,
        description="Per-task payloads; route_optimization.traffic_volume_trucks sets the fleet size.",
    )


class RouteModel(BaseModel):
    roadId: str
    type: str
    trucks: int
    estTravelMinutes: float
    effectiveSpeedKmh: float
    riskScore: float
    cost: float
    density: float
    urgency: float


class RoutePlanSummaryModel(BaseModel):
    totalTrucks: int
    capacity: float
    note: str
    maintenanceWatch: List[str] = Field(default_factory=list, max_length=3)


class RoutePlanResponse(BaseModel):
    status: str = "success"
    routes: List[RouteModel]
    summary: RoutePlanSummaryModel
