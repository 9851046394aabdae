"""Engineering and valuation report models."""

import logging
import math
from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from estate_metrics.models.base import coerce_enum, parse_number, pick
from estate_metrics.models.enums import (
    CivilMepRecommendation,
    MarketRecommendation,
    RiskLevel,
    ValuationRecommendation,
)

logger = logging.getLogger(__name__)


@dataclass
class CivilMepReport:
    """Civil, structural and MEP inspection report for a property."""

    report_id: str
    property_id: str
    overall_score: float | None = None  # 0-10
    investment_recommendation: CivilMepRecommendation | str | None = None
    executive_summary: str = ""
    structural_analysis: str = ""
    mep_analysis: str = ""

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "CivilMepReport":
        """Build from a deserialized API record."""
        return cls(
            report_id=str(pick(data, "id", "report_id") or ""),
            property_id=str(pick(data, "propertyId", "property_id") or ""),
            overall_score=parse_number(pick(data, "overallScore", "overall_score")),
            investment_recommendation=coerce_enum(
                CivilMepRecommendation,
                pick(data, "investmentRecommendation", "investment_recommendation"),
            ),
            executive_summary=str(pick(data, "executiveSummary", "executive_summary") or ""),
            structural_analysis=str(pick(data, "structuralAnalysis", "structural_analysis") or ""),
            mep_analysis=str(pick(data, "mepAnalysis", "mep_analysis") or ""),
        )


@dataclass
class CostComponents:
    """The ten fixed line items of a valuation cost breakdown."""

    land_value: float = 0.0
    construction_cost: float = 0.0
    development_charges: float = 0.0
    registration_stamp_duty: float = 0.0
    gst_on_construction: float = 0.0
    parking_charges: float = 0.0
    clubhouse_maintenance: float = 0.0
    interior_fittings: float = 0.0
    moving_costs: float = 0.0
    legal_charges: float = 0.0

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in self.field_names()}


_COMPONENT_API_KEYS = {
    "land_value": "landValue",
    "construction_cost": "constructionCost",
    "development_charges": "developmentCharges",
    "registration_stamp_duty": "registrationStampDuty",
    "gst_on_construction": "gstOnConstruction",
    "parking_charges": "parkingCharges",
    "clubhouse_maintenance": "clubhouseMaintenance",
    "interior_fittings": "interiorFittings",
    "moving_costs": "movingCosts",
    "legal_charges": "legalCharges",
}


@dataclass
class HiddenCost:
    """A variable, report-specific cost line."""

    item: str
    amount: float
    description: str = ""
    category: str = ""


@dataclass
class CostBreakdown:
    """Fixed components plus variable hidden costs.

    ``total_estimated_cost`` is derived on every access and never stored.
    """

    SERIALIZED_PROPERTIES = ("total_estimated_cost",)

    components: CostComponents = field(default_factory=CostComponents)
    hidden_costs: list[HiddenCost] = field(default_factory=list)
    built_up_area_sqft: float | None = None
    land_area_sqft: float | None = None

    @property
    def total_estimated_cost(self) -> float:
        from estate_metrics.finance import total_cost_breakdown

        return total_cost_breakdown(self.components, self.hidden_costs)

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "CostBreakdown":
        """Build from a deserialized ``costBreakdown`` object.

        Absent fixed components read as zero, as the admin form saves them.
        A stored ``totalEstimatedCost`` is ignored in favour of the derived
        total.
        """
        components = CostComponents(
            **{
                name: parse_number(pick(data, api_key, name)) or 0.0
                for name, api_key in _COMPONENT_API_KEYS.items()
            }
        )
        hidden_costs = [
            HiddenCost(
                item=str(pick(item, "item") or ""),
                amount=parse_number(pick(item, "amount")) or 0.0,
                description=str(pick(item, "description") or ""),
                category=str(pick(item, "category") or ""),
            )
            for item in (pick(data, "hiddenCosts", "hidden_costs") or [])
        ]
        breakdown = cls(
            components=components,
            hidden_costs=hidden_costs,
            built_up_area_sqft=parse_number(pick(data, "builtUpAreaSqft", "built_up_area_sqft")),
            land_area_sqft=parse_number(pick(data, "landAreaSqft", "land_area_sqft")),
        )

        stored_total = parse_number(pick(data, "totalEstimatedCost", "total_estimated_cost"))
        if stored_total is not None:
            derived = breakdown.total_estimated_cost
            if not math.isclose(stored_total, derived, abs_tol=1e-6):
                logger.warning(
                    "Stored totalEstimatedCost %.2f differs from derived total %.2f; using derived",
                    stored_total,
                    derived,
                )
        return breakdown


@dataclass
class MarketAnalysis:
    average_price_per_sqft: float | None = None
    market_trend: str = ""
    demand_supply_ratio: str = ""
    price_appreciation: float | None = None
    competitor_analysis: str = ""
    recommendation: MarketRecommendation | str | None = None


@dataclass
class RoiAnalysis:
    break_even_period: float | None = None  # Years
    total_roi_5_years: float | None = None  # Ratio
    total_roi_10_years: float | None = None


@dataclass
class LoanEligibility:
    max_loan_amount: float
    suggested_down_payment: float
    emi_estimate: int


@dataclass
class FinancialAnalysis:
    current_valuation: float | None = None
    rental_yield: float | None = None  # Ratio
    monthly_rental_income: float | None = None
    roi_analysis: RoiAnalysis = field(default_factory=RoiAnalysis)
    loan_eligibility: LoanEligibility | None = None


@dataclass
class RiskAssessment:
    overall_risk: RiskLevel | str | None = None
    risk_factors: list[str] = field(default_factory=list)
    mitigation_strategies: list[str] = field(default_factory=list)


@dataclass
class PropertyValuationReport:
    """Valuation report with cost, market, financial and risk sections."""

    report_id: str
    property_id: str
    cost_breakdown: CostBreakdown = field(default_factory=CostBreakdown)
    market_analysis: MarketAnalysis = field(default_factory=MarketAnalysis)
    financial_analysis: FinancialAnalysis = field(default_factory=FinancialAnalysis)
    risk_assessment: RiskAssessment = field(default_factory=RiskAssessment)
    investment_recommendation: ValuationRecommendation | str | None = None
    yield_score: float | None = None
    estimated_market_value: float | None = None
    configuration: str | None = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "PropertyValuationReport":
        """Build from a deserialized API record."""
        market = pick(data, "marketAnalysis", "market_analysis") or {}
        financial = pick(data, "financialAnalysis", "financial_analysis") or {}
        roi = pick(financial, "roiAnalysis", "roi_analysis") or {}
        loan = pick(financial, "loanEligibility", "loan_eligibility")
        risk = pick(data, "riskAssessment", "risk_assessment") or {}

        loan_eligibility = None
        if loan:
            loan_eligibility = LoanEligibility(
                max_loan_amount=parse_number(pick(loan, "maxLoanAmount", "max_loan_amount")) or 0.0,
                suggested_down_payment=parse_number(
                    pick(loan, "suggestedDownPayment", "suggested_down_payment")
                )
                or 0.0,
                emi_estimate=int(parse_number(pick(loan, "emiEstimate", "emi_estimate")) or 0),
            )

        return cls(
            report_id=str(pick(data, "id", "report_id") or ""),
            property_id=str(pick(data, "propertyId", "property_id") or ""),
            cost_breakdown=CostBreakdown.from_api(pick(data, "costBreakdown", "cost_breakdown") or {}),
            market_analysis=MarketAnalysis(
                average_price_per_sqft=parse_number(
                    pick(market, "averagePricePerSqft", "average_price_per_sqft")
                ),
                market_trend=str(pick(market, "marketTrend", "market_trend") or ""),
                demand_supply_ratio=str(pick(market, "demandSupplyRatio", "demand_supply_ratio") or ""),
                price_appreciation=parse_number(pick(market, "priceAppreciation", "price_appreciation")),
                competitor_analysis=str(pick(market, "competitorAnalysis", "competitor_analysis") or ""),
                recommendation=coerce_enum(MarketRecommendation, pick(market, "recommendation")),
            ),
            financial_analysis=FinancialAnalysis(
                current_valuation=parse_number(pick(financial, "currentValuation", "current_valuation")),
                rental_yield=parse_number(pick(financial, "rentalYield", "rental_yield")),
                monthly_rental_income=parse_number(
                    pick(financial, "monthlyRentalIncome", "monthly_rental_income")
                ),
                roi_analysis=RoiAnalysis(
                    break_even_period=parse_number(pick(roi, "breakEvenPeriod", "break_even_period")),
                    total_roi_5_years=parse_number(pick(roi, "totalRoi5Years", "total_roi_5_years")),
                    total_roi_10_years=parse_number(pick(roi, "totalRoi10Years", "total_roi_10_years")),
                ),
                loan_eligibility=loan_eligibility,
            ),
            risk_assessment=RiskAssessment(
                overall_risk=coerce_enum(RiskLevel, pick(risk, "overallRisk", "overall_risk")),
                risk_factors=[str(r) for r in (pick(risk, "riskFactors", "risk_factors") or [])],
                mitigation_strategies=[
                    str(m) for m in (pick(risk, "mitigationStrategies", "mitigation_strategies") or [])
                ],
            ),
            investment_recommendation=coerce_enum(
                ValuationRecommendation,
                pick(data, "investmentRecommendation", "investment_recommendation"),
            ),
            yield_score=parse_number(pick(data, "yieldScore", "yield_score")),
            estimated_market_value=parse_number(
                pick(data, "estimatedMarketValue", "estimated_market_value")
            ),
            configuration=pick(data, "configuration"),
        )
