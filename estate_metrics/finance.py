"""Financial derivations for listing and valuation displays.

Every function is pure and raises ``InvalidFinancialInputError`` when a
formula is undefined for its inputs (negative, NaN, infinite or a zero
denominator). Money values are plain floats in rupees.
"""

import math
from typing import Any, Iterable, Mapping

from estate_metrics.config import FinanceDefaults
from estate_metrics.exceptions import InvalidFinancialInputError
from estate_metrics.formatting import NUMBER_TYPES, round_half_up
from estate_metrics.models import CostBreakdown, CostComponents, FinancialAnalysis, HiddenCost
from estate_metrics.models.reports import LoanEligibility, RoiAnalysis

DEFAULT_FIVE_YEAR_APPRECIATION = FinanceDefaults().five_year_appreciation
DEFAULT_ANNUAL_INTEREST_RATE = FinanceDefaults().annual_interest_rate

_CAMEL_COMPONENT_KEYS = {
    "landValue": "land_value",
    "constructionCost": "construction_cost",
    "developmentCharges": "development_charges",
    "registrationStampDuty": "registration_stamp_duty",
    "gstOnConstruction": "gst_on_construction",
    "parkingCharges": "parking_charges",
    "clubhouseMaintenance": "clubhouse_maintenance",
    "interiorFittings": "interior_fittings",
    "movingCosts": "moving_costs",
    "legalCharges": "legal_charges",
}


def emi(principal: float, down_payment_fraction: float, term_years: float) -> int:
    """Monthly instalment estimate in whole rupees.

    This is the linear approximation the listing pages have always shown:
    the financed amount divided evenly over the term, with no interest.
    It is not an amortized EMI; see ``amortized_emi`` for that.

    ``emi(28_000_000, 0.15, 25) == 79_333``

    Parameters
    ----------
    principal : float
        Property price in rupees.
    down_payment_fraction : float
        Share paid upfront, between 0 and 1.
    term_years : float
        Loan term in years, greater than zero.

    Returns
    -------
    int
        Monthly payment rounded half-up to the rupee.
    """
    principal = _non_negative("principal", principal)
    fraction = _fraction("down_payment_fraction", down_payment_fraction)
    term_years = _positive("term_years", term_years)

    monthly = (principal * (1 - fraction)) / (term_years * 12)
    return int(round_half_up(monthly, 0))


def amortized_emi(
    loan_amount: float,
    term_years: float,
    annual_rate: float = DEFAULT_ANNUAL_INTEREST_RATE,
) -> float:
    """Standard annuity EMI, rounded to paise.

    Opt-in only; nothing in this package substitutes it for ``emi``.
    """
    loan_amount = _non_negative("loan_amount", loan_amount)
    annual_rate = _non_negative("annual_rate", annual_rate)
    term_years = _positive("term_years", term_years)

    months = term_years * 12
    monthly_rate = annual_rate / 12
    if monthly_rate == 0:
        return float(round_half_up(loan_amount / months, 2))
    growth = (1 + monthly_rate) ** months
    payment = loan_amount * monthly_rate * growth / (growth - 1)
    return float(round_half_up(payment, 2))


def annual_rental_income(monthly_rent: float) -> float:
    """Twelve months of rent."""
    return _non_negative("monthly_rent", monthly_rent) * 12


def gross_rental_yield(annual_rental_income: float, property_value: float) -> float:
    """Annual rent over property value, as a ratio."""
    income = _non_negative("annual_rental_income", annual_rental_income)
    value = _positive("property_value", property_value)
    return income / value


def total_cost_breakdown(
    components: CostComponents | Mapping[str, Any],
    hidden_costs: Iterable[HiddenCost | Mapping[str, Any]] = (),
) -> float:
    """Sum of the ten fixed cost components and every hidden cost amount.

    Parameters
    ----------
    components : CostComponents | Mapping[str, Any]
        Fixed components. A mapping must carry all ten keys, in snake_case
        or the API's camelCase.
    hidden_costs : Iterable[HiddenCost | Mapping[str, Any]]
        Variable cost lines; only ``amount`` is used.

    Returns
    -------
    float
        Total estimated cost.
    """
    values = _component_values(components)
    amounts = [
        _non_negative(f"hidden cost {_hidden_item(cost)!r}", _hidden_amount(cost))
        for cost in hidden_costs
    ]
    return math.fsum(values + amounts)


def five_year_appreciation(
    current_price: float,
    rate_fraction: float = DEFAULT_FIVE_YEAR_APPRECIATION,
) -> float:
    """Projected value after five years at a cumulative appreciation rate.

    The default 0.65 is the 1.65x multiplier the detail pages used.
    """
    price = _non_negative("current_price", current_price)
    rate = _finite("rate_fraction", rate_fraction)
    if rate < -1:
        raise InvalidFinancialInputError(f"rate_fraction must be at least -1, got {rate_fraction!r}")
    return price * (1 + rate)


def cost_shares(breakdown: CostBreakdown) -> dict[str, float]:
    """Each fixed component, plus hidden costs combined, as a share of the total."""
    total = breakdown.total_estimated_cost
    if total <= 0:
        raise InvalidFinancialInputError("Cost shares are undefined for a zero total")
    shares = {name: value / total for name, value in breakdown.components.as_dict().items()}
    shares["hidden_costs"] = math.fsum(cost.amount for cost in breakdown.hidden_costs) / total
    return shares


def roi(initial_value: float, final_value: float, income: float = 0.0) -> float:
    """Return on investment as a ratio: gain plus income over the initial value."""
    initial = _positive("initial_value", initial_value)
    final = _non_negative("final_value", final_value)
    earned = _non_negative("income", income)
    return (final - initial + earned) / initial


def break_even_years(property_value: float, annual_rental_income: float) -> float:
    """Years of rent needed to recover the property value."""
    value = _non_negative("property_value", property_value)
    income = _positive("annual_rental_income", annual_rental_income)
    return value / income


def loan_eligibility(
    property_value: float,
    down_payment_fraction: float,
    term_years: float,
) -> LoanEligibility:
    """Loan amount, down payment and simplified EMI for a purchase."""
    value = _non_negative("property_value", property_value)
    fraction = _fraction("down_payment_fraction", down_payment_fraction)
    down_payment = value * fraction
    return LoanEligibility(
        max_loan_amount=value - down_payment,
        suggested_down_payment=down_payment,
        emi_estimate=emi(value, fraction, term_years),
    )


def project_financials(
    property_value: float,
    monthly_rent: float,
    defaults: FinanceDefaults | None = None,
) -> FinancialAnalysis:
    """Assemble a financial analysis from a valuation and expected rent.

    Appreciation compounds per five-year period; ROI adds cumulative rent
    over the horizon. Break-even is left unset when there is no rent.
    """
    defaults = defaults or FinanceDefaults()
    value = _positive("property_value", property_value)
    annual_rent = annual_rental_income(monthly_rent)

    five_year_value = five_year_appreciation(value, defaults.five_year_appreciation)
    ten_year_value = five_year_appreciation(five_year_value, defaults.five_year_appreciation)

    return FinancialAnalysis(
        current_valuation=value,
        rental_yield=gross_rental_yield(annual_rent, value),
        monthly_rental_income=float(monthly_rent),
        roi_analysis=RoiAnalysis(
            break_even_period=break_even_years(value, annual_rent) if annual_rent > 0 else None,
            total_roi_5_years=roi(value, five_year_value, annual_rent * 5),
            total_roi_10_years=roi(value, ten_year_value, annual_rent * 10),
        ),
        loan_eligibility=loan_eligibility(
            value, defaults.down_payment_fraction, defaults.loan_term_years
        ),
    )


def _component_values(components: CostComponents | Mapping[str, Any]) -> list[float]:
    if isinstance(components, CostComponents):
        raw = components.as_dict()
    else:
        raw = {_CAMEL_COMPONENT_KEYS.get(key, key): value for key, value in components.items()}
        missing = [name for name in CostComponents.field_names() if name not in raw]
        if missing:
            raise InvalidFinancialInputError(f"Cost components missing: {', '.join(missing)}")
    return [_non_negative(name, raw[name]) for name in CostComponents.field_names()]


def _hidden_amount(cost: HiddenCost | Mapping[str, Any]) -> Any:
    if isinstance(cost, HiddenCost):
        return cost.amount
    return cost.get("amount")


def _hidden_item(cost: HiddenCost | Mapping[str, Any]) -> Any:
    if isinstance(cost, HiddenCost):
        return cost.item
    return cost.get("item", "")


def _finite(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, NUMBER_TYPES):
        raise InvalidFinancialInputError(f"{name} must be a number, got {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise InvalidFinancialInputError(f"{name} must be finite, got {value!r}")
    return number


def _non_negative(name: str, value: Any) -> float:
    number = _finite(name, value)
    if number < 0:
        raise InvalidFinancialInputError(f"{name} must be non-negative, got {value!r}")
    return number


def _positive(name: str, value: Any) -> float:
    number = _finite(name, value)
    if number <= 0:
        raise InvalidFinancialInputError(f"{name} must be positive, got {value!r}")
    return number


def _fraction(name: str, value: Any) -> float:
    number = _finite(name, value)
    if not 0 <= number <= 1:
        raise InvalidFinancialInputError(f"{name} must be between 0 and 1, got {value!r}")
    return number
