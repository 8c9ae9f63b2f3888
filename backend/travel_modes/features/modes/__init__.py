"""
Travel mode estimates.

Usage:
    from travel_modes.features.modes import estimate_modes
    from travel_modes.features.modes.calculators import TransitCalculator

Available components:
- ModeEstimateService: Runs all four calculators for a route
- estimate_modes: Functional shortcut returning the estimate list
- ModeEstimateRequest, ModeEstimateResponse: API schemas
"""
from .service import ModeEstimateService, ModeEstimateResult, estimate_modes
from .schemas import (
    ModeEstimateRequest,
    RouteSummaryRequest,
    ModeEstimateSchema,
    ModeEstimateResponse,
)

__all__ = [
    "ModeEstimateService",
    "ModeEstimateResult",
    "estimate_modes",
    # Schemas
    "ModeEstimateRequest",
    "RouteSummaryRequest",
    "ModeEstimateSchema",
    "ModeEstimateResponse",
]
