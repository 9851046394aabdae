"""Pricing, financial, scoring and similarity derivations for property listings."""

from estate_metrics.finance import (
    amortized_emi,
    annual_rental_income,
    emi,
    five_year_appreciation,
    gross_rental_yield,
    total_cost_breakdown,
)
from estate_metrics.formatting import format_currency, format_price, format_price_range
from estate_metrics.pricing import (
    PriceFallback,
    PriceRange,
    ResolvedPrice,
    estimate_price_range,
    resolve_config_price,
    resolve_price_range,
)
from estate_metrics.scoring import investment_score, lifestyle_score, property_score
from estate_metrics.similarity import rank_similar

__version__ = "0.1.0"

__all__ = [
    "PriceFallback",
    "PriceRange",
    "ResolvedPrice",
    "amortized_emi",
    "annual_rental_income",
    "emi",
    "estimate_price_range",
    "five_year_appreciation",
    "format_currency",
    "format_price",
    "format_price_range",
    "gross_rental_yield",
    "investment_score",
    "lifestyle_score",
    "property_score",
    "rank_similar",
    "resolve_config_price",
    "resolve_price_range",
    "total_cost_breakdown",
]
