"""Listing and report models consumed by the calculation engines."""

from estate_metrics.models.base import Score
from estate_metrics.models.enums import (
    AvailabilityStatus,
    CivilMepRecommendation,
    Confidence,
    Intent,
    MarketRecommendation,
    PropertyStatus,
    PropertyType,
    RiskLevel,
    ValuationRecommendation,
    Zone,
)
from estate_metrics.models.property import Property, PropertyConfiguration
from estate_metrics.models.reports import (
    CivilMepReport,
    CostBreakdown,
    CostComponents,
    FinancialAnalysis,
    HiddenCost,
    LoanEligibility,
    MarketAnalysis,
    PropertyValuationReport,
    RiskAssessment,
    RoiAnalysis,
)

__all__ = [
    "AvailabilityStatus",
    "CivilMepRecommendation",
    "CivilMepReport",
    "Confidence",
    "CostBreakdown",
    "CostComponents",
    "FinancialAnalysis",
    "HiddenCost",
    "Intent",
    "LoanEligibility",
    "MarketAnalysis",
    "MarketRecommendation",
    "Property",
    "PropertyConfiguration",
    "PropertyStatus",
    "PropertyType",
    "PropertyValuationReport",
    "RiskAssessment",
    "RiskLevel",
    "RoiAnalysis",
    "Score",
    "ValuationRecommendation",
    "Zone",
]
