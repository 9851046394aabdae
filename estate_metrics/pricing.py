"""Configuration price resolution and listing price ranges."""

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from estate_metrics.config import PricingDefaults
from estate_metrics.exceptions import (
    IncompleteConfigurationError,
    InvalidFinancialInputError,
    NoConfigurationsError,
)
from estate_metrics.formatting import NUMBER_TYPES
from estate_metrics.models import Property, PropertyConfiguration, PropertyValuationReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedPrice:
    """Total unit price derived from its rate and built-up area."""

    total_price: float
    price_per_sqft: float
    area: float


@dataclass(frozen=True)
class PriceRange:
    min: float
    max: float

    @property
    def is_single(self) -> bool:
        """True when the range collapses to one price."""
        return self.min == self.max


@dataclass(frozen=True)
class PriceFallback:
    """Caller-chosen stand-in values for a configuration missing its inputs."""

    price_per_sqft: float
    area: float

    @classmethod
    def from_defaults(cls, defaults: PricingDefaults) -> "PriceFallback":
        return cls(price_per_sqft=defaults.default_price_per_sqft, area=defaults.default_area_sqft)


def resolve_config_price(
    config: PropertyConfiguration,
    fallback: PriceFallback | None = None,
) -> ResolvedPrice:
    """Resolve a configuration's total price as rate times built-up area.

    A stored ``price`` is never trusted over the derivation.

    Parameters
    ----------
    config : PropertyConfiguration
        Unit configuration.
    fallback : PriceFallback | None
        Values substituted only for missing or non-positive inputs. Without
        it such a configuration is rejected.

    Returns
    -------
    ResolvedPrice
        Total price, rate and area used.

    Raises
    ------
    IncompleteConfigurationError
        If the rate or area is missing or non-positive and no fallback
        covers it.
    """
    rate = config.price_per_sqft
    area = config.built_up_area

    if not _is_positive(rate):
        if fallback is None:
            raise IncompleteConfigurationError(
                f"Configuration {config.configuration!r} has no positive price per sqft: {rate!r}"
            )
        rate = fallback.price_per_sqft
    if not _is_positive(area):
        if fallback is None:
            raise IncompleteConfigurationError(
                f"Configuration {config.configuration!r} has no positive built-up area: {area!r}"
            )
        area = fallback.area
    if not (_is_positive(rate) and _is_positive(area)):
        raise IncompleteConfigurationError(f"Fallback values must be positive, got {fallback!r}")

    total = float(rate) * float(area)
    if config.price is not None and not math.isclose(config.price, total, rel_tol=1e-9):
        logger.debug(
            "Stored price %s for %r ignored; derived %s",
            config.price,
            config.configuration,
            total,
            extra={"property_id": config.property_id, "configuration": config.configuration},
        )
    return ResolvedPrice(total_price=total, price_per_sqft=float(rate), area=float(area))


def resolve_price_range(configs: Sequence[PropertyConfiguration]) -> PriceRange:
    """Min and max resolved total price across configurations.

    Raises
    ------
    NoConfigurationsError
        If ``configs`` is empty.
    IncompleteConfigurationError
        If any configuration cannot be resolved.
    """
    if not configs:
        raise NoConfigurationsError("Price range requested over no configurations")
    prices = [resolve_config_price(config).total_price for config in configs]
    return PriceRange(min=min(prices), max=max(prices))


def estimate_price_range(
    prop: Property,
    valuation_report: PropertyValuationReport | None = None,
    defaults: PricingDefaults | None = None,
) -> PriceRange:
    """Price range for a listing, falling back when it has no configurations.

    Order: configurations, then the valuation report's estimated market
    value as a single price, then the zone's default rate over the default
    area with the max widened by ``fallback_range_multiplier``.
    """
    defaults = defaults or PricingDefaults()

    if prop.configurations:
        return resolve_price_range(prop.configurations)

    if valuation_report is not None and _is_positive(valuation_report.estimated_market_value):
        value = float(valuation_report.estimated_market_value)  # type: ignore[arg-type]
        return PriceRange(min=value, max=value)

    rate = defaults.rate_for_zone(prop.zone)
    estimate = rate * defaults.default_area_sqft
    logger.debug(
        "No pricing data for %s; using zone estimate %.0f",
        prop.property_id,
        estimate,
        extra={"property_id": prop.property_id},
    )
    return PriceRange(min=estimate, max=estimate * defaults.fallback_range_multiplier)


def rate_per_sqft(total: float, area: float) -> float:
    """Rate per square foot for a total cost over a built-up area."""
    if not _is_finite_number(total) or total < 0:
        raise InvalidFinancialInputError(f"total must be a non-negative number, got {total!r}")
    if not _is_positive(area):
        raise InvalidFinancialInputError(f"area must be positive, got {area!r}")
    return float(total) / float(area)


def _is_finite_number(value: object) -> bool:
    return (
        isinstance(value, NUMBER_TYPES)
        and not isinstance(value, bool)
        and math.isfinite(value)  # type: ignore[arg-type]
    )


def _is_positive(value: object) -> bool:
    return _is_finite_number(value) and value > 0  # type: ignore[operator]
