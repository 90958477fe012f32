"""
Estimation Routes

Endpoints for GuidePace route time estimates.
"""

import logging
import math
from typing import List

from fastapi import APIRouter, HTTPException

from guidepace.features.estimation import (
    EstimationService,
    demo_route,
    describe_adjustment,
    describe_factors,
    get_safety_recommendations,
    get_safety_recommendations_for_location,
)
from guidepace.features.estimation.calculators import method_descriptions
from guidepace.features.estimation.schemas import (
    EstimateRequest,
    FactorLabelSchema,
    MethodDescription,
    PaceFactorDefaultsResponse,
    PaceFactorDescription,
    PaceFactorRange,
    PaceFactorsSchema,
    RouteEstimateResponse,
    SafetyRecommendationsSchema,
    SafetyRequest,
)
from guidepace.shared.calculator_types import PACE_FACTOR_RANGES

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/analyze", response_model=RouteEstimateResponse)
async def analyze_route(request: EstimateRequest):
    """
    Estimate time for a route.

    Classifies the terrain (technical climbing, scrambling or hiking),
    splits the route into segments and returns realistic times with
    optimistic/conservative bands and daylight safety recommendations.
    """
    service = EstimationService.from_settings()

    try:
        estimate = service.estimate(
            request.route.to_route_data(),
            request.pace_factors.to_pace_factors(),
            start_lat=request.start_lat,
            start_lon=request.start_lon,
            trip_date=request.trip_date,
        )
    except ValueError as e:
        logger.warning(f"Rejected estimate request: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    if not math.isfinite(estimate.total_hours):
        logger.warning("Rejected estimate request: total time overflows")
        raise HTTPException(status_code=400, detail="Route is too long to estimate")

    return RouteEstimateResponse.from_estimate(estimate)


@router.post("/safety", response_model=SafetyRecommendationsSchema)
async def safety_recommendations(request: SafetyRequest):
    """
    Start time, turnaround and daylight warnings for a planned total.

    Uses the seasonal daylight table, or actual sunrise/sunset when
    coordinates are given.
    """
    service = EstimationService.from_settings()
    season = request.season or service.default_season

    if request.lat is not None and request.lon is not None:
        safety = get_safety_recommendations_for_location(
            request.total_hours, request.lat, request.lon, request.trip_date,
            fallback_season=season,
        )
    else:
        safety = get_safety_recommendations(request.total_hours, season)

    return SafetyRecommendationsSchema.from_recommendations(safety)


@router.get("/pace-factors", response_model=PaceFactorDefaultsResponse)
async def pace_factor_defaults():
    """Neutral pace factors and the documented range of each."""
    return PaceFactorDefaultsResponse(
        defaults=PaceFactorsSchema(),
        ranges={
            name: PaceFactorRange(min=low, max=high)
            for name, (low, high) in PACE_FACTOR_RANGES.items()
        },
    )


@router.post("/pace-factors/describe", response_model=PaceFactorDescription)
async def describe_pace_factors(request: PaceFactorsSchema):
    """Labels for each factor and the combined adjustment."""
    try:
        factors = request.to_pace_factors()
    except ValueError as e:
        logger.warning(f"Rejected pace factors: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    labels = describe_factors(factors)

    return PaceFactorDescription(
        labels={
            name: FactorLabelSchema(label=label.label, variant=label.variant)
            for name, label in labels.items()
        },
        total_multiplier=factors.total_multiplier,
        summary=describe_adjustment(factors),
    )


@router.get("/methods", response_model=List[MethodDescription])
async def guide_methods():
    """The guide methods and the terrain each one covers."""
    return [
        MethodDescription(name=name, description=description)
        for name, description in method_descriptions().items()
    ]


@router.get("/demo", response_model=RouteEstimateResponse)
async def demo_estimate():
    """Estimate for the built-in multi-pitch demo route."""
    service = EstimationService.from_settings()
    estimate = service.estimate(demo_route())
    return RouteEstimateResponse.from_estimate(estimate)
