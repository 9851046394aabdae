"""Investment view: price range, investment score and return projections."""

import logging
from dataclasses import dataclass
from typing import Any

from estate_metrics.config import MetricsConfig
from estate_metrics.finance import emi, five_year_appreciation, project_financials
from estate_metrics.formatting import format_price_range
from estate_metrics.models import CivilMepReport, FinancialAnalysis, Property, PropertyValuationReport, Score
from estate_metrics.pricing import PriceRange, estimate_price_range
from estate_metrics.scoring import as_score, investment_score
from estate_metrics.serialization import to_dict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvestmentAnalysis:
    """Figures shown on a listing's investment analysis page."""

    property_id: str
    price_range: PriceRange
    price_display: str
    investment_score: Score
    monthly_emi: int
    five_year_value: float
    financials: FinancialAnalysis | None = None

    def as_dict(self) -> dict[str, Any]:
        """JSON-ready form for an investment view response."""
        return to_dict(self)


def analyze_investment(
    prop: Property,
    civil_report: CivilMepReport | None = None,
    valuation_report: PropertyValuationReport | None = None,
    config: MetricsConfig | None = None,
) -> InvestmentAnalysis:
    """Derive the investment view for one listing.

    Parameters
    ----------
    prop : Property
        Listing, with its configurations.
    civil_report : CivilMepReport | None
        Engineering report for the listing, if published.
    valuation_report : PropertyValuationReport | None
        Valuation report for the listing, if published.
    config : MetricsConfig | None
        Defaults for fallbacks, loan terms and display.

    Returns
    -------
    InvestmentAnalysis
        Price range, investment score on the /10 scale, EMI on the entry
        price, five-year value and, when the valuation report carries an
        expected rent, a full financial projection.
    """
    config = config or MetricsConfig()

    price_range = estimate_price_range(prop, valuation_report, config.pricing)
    score = investment_score(
        valuation_report.yield_score if valuation_report else None,
        civil_report.overall_score if civil_report else None,
        prop.overall_score,
        default=config.scoring.investment_score,
    )

    financials = None
    if valuation_report is not None:
        monthly_rent = valuation_report.financial_analysis.monthly_rental_income
        if monthly_rent is not None:
            valuation = (
                valuation_report.financial_analysis.current_valuation
                or valuation_report.estimated_market_value
                or price_range.min
            )
            financials = project_financials(valuation, monthly_rent, config.finance)

    analysis = InvestmentAnalysis(
        property_id=prop.property_id,
        price_range=price_range,
        price_display=format_price_range(
            price_range, config.formatting.precision, config.formatting.trim_zeros
        ),
        investment_score=as_score(score, config.scoring.investment_scale),
        monthly_emi=emi(
            price_range.min,
            config.finance.down_payment_fraction,
            config.finance.loan_term_years,
        ),
        five_year_value=five_year_appreciation(price_range.min, config.finance.five_year_appreciation),
        financials=financials,
    )
    logger.debug(
        "Investment analysis for %s: score %s",
        prop.property_id,
        analysis.investment_score.display(),
        extra={"property_id": prop.property_id},
    )
    return analysis
