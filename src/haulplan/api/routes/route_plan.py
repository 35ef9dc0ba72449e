"""Route plan (truck allocation) endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...data.errors import RecordSourceError
from ...schemas.route_plan import RoutePlanRequest, RoutePlanResponse
from ...services.outputs.formatter import route_plan_to_response
from ...services.planning import build_route_plan

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ml", tags=["route-plan"])


@router.post("/route-plan", response_model=RoutePlanResponse, status_code=status.HTTP_200_OK)
async def route_plan(payload: RoutePlanRequest | None = None) -> RoutePlanResponse:
    ml_payloads = payload.mlPayloads if payload else {}
    try:
        plan = await build_route_plan(ml_payloads)
    except RecordSourceError as exc:
        logger.exception("Route plan error: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to compute route plan.",
        ) from exc
    return route_plan_to_response(plan)
