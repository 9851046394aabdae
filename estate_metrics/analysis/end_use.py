"""End-use view: unit price and lifestyle score for home buyers."""

from dataclasses import dataclass
from typing import Any

from estate_metrics.config import MetricsConfig
from estate_metrics.finance import emi
from estate_metrics.formatting import format_currency, format_price
from estate_metrics.models import Property, PropertyValuationReport, Score
from estate_metrics.pricing import PriceFallback, ResolvedPrice, resolve_config_price
from estate_metrics.scoring import as_score, lifestyle_score
from estate_metrics.serialization import to_dict


@dataclass(frozen=True)
class EndUseAnalysis:
    property_id: str
    configuration: str | None
    price: ResolvedPrice
    price_display: str
    rate_display: str
    lifestyle_score: Score
    monthly_emi: int

    def as_dict(self) -> dict[str, Any]:
        """JSON-ready form for an end-use view response."""
        return to_dict(self)


def analyze_end_use(
    prop: Property,
    valuation_report: PropertyValuationReport | None = None,
    config: MetricsConfig | None = None,
) -> EndUseAnalysis:
    """Derive the end-use view for one listing.

    The headline unit is the first configuration, resolved with the
    configured default rate and area standing in for missing inputs.
    Without configurations the valuation report's market value is used,
    spread over the market (or zone) rate; failing that, the default rate
    over the default area.
    """
    config = config or MetricsConfig()
    pricing = config.pricing

    if prop.configurations:
        first = prop.configurations[0]
        price = resolve_config_price(first, PriceFallback.from_defaults(pricing))
        label: str | None = first.configuration or None
    elif valuation_report is not None and valuation_report.estimated_market_value:
        value = valuation_report.estimated_market_value
        rate = valuation_report.market_analysis.average_price_per_sqft or pricing.rate_for_zone(prop.zone)
        price = ResolvedPrice(total_price=value, price_per_sqft=rate, area=round(value / rate))
        label = valuation_report.configuration
    else:
        rate = pricing.default_price_per_sqft
        area = pricing.default_area_sqft
        price = ResolvedPrice(total_price=rate * area, price_per_sqft=rate, area=area)
        label = None

    lifestyle = lifestyle_score(
        prop.location_score,
        prop.amenities_score,
        default=config.scoring.missing_score,
    )

    return EndUseAnalysis(
        property_id=prop.property_id,
        configuration=label,
        price=price,
        price_display=format_price(
            price.total_price, config.formatting.precision, config.formatting.trim_zeros
        ),
        rate_display=format_currency(price.price_per_sqft),
        lifestyle_score=as_score(lifestyle, config.scoring.lifestyle_scale),
        monthly_emi=emi(
            price.total_price,
            config.finance.down_payment_fraction,
            config.finance.loan_term_years,
        ),
    )
