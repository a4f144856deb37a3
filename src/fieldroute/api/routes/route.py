"""Route optimization endpoints."""

from __future__ import annotations

import json
import logging
from typing import Literal

from fastapi import APIRouter, HTTPException, Query, Response, status

from ...schemas.routing import OptimizedRouteResponse, RouteOptimizeRequest
from ...services.outputs.routing_formatter import itinerary_to_csv, itinerary_to_json
from ...services.routing.errors import ProviderUnavailable, TooManyLocations
from ...services.routing.models import Itinerary
from ...services.routing.service import optimize_route

router = APIRouter(prefix="/route", tags=["route"])

logger = logging.getLogger(__name__)

OPTIMIZE_FAILED = "Failed to optimize route"


def _run(payload: RouteOptimizeRequest) -> Itinerary:
    try:
        return optimize_route(payload.to_domain())
    except TooManyLocations as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ProviderUnavailable as exc:
        logger.error("Route optimization error: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=OPTIMIZE_FAILED,
        ) from exc
    except Exception as exc:
        logger.exception("Route optimization error: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=OPTIMIZE_FAILED,
        ) from exc


@router.post("/optimize", response_model=OptimizedRouteResponse, status_code=status.HTTP_200_OK)
def optimize(payload: RouteOptimizeRequest) -> OptimizedRouteResponse:
    return OptimizedRouteResponse.from_itinerary(_run(payload))


@router.post("/optimize/export", status_code=status.HTTP_200_OK)
def export_optimized_route(
    payload: RouteOptimizeRequest,
    format: Literal["csv", "json"] = Query(default="csv", description="Download format."),
) -> Response:
    """Optimize and return the day sheet as a downloadable file."""
    itinerary = _run(payload)
    if format == "json":
        return Response(
            content=json.dumps(itinerary_to_json(itinerary), ensure_ascii=False, indent=2),
            media_type="application/json",
            headers={"Content-Disposition": 'attachment; filename="route.json"'},
        )
    return Response(
        content=itinerary_to_csv(itinerary),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="route.csv"'},
    )
