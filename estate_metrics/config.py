"""Configuration management for estate-metrics.

Every fallback constant the listing and detail pages used to embed lives
here as a named default. Core functions take these values as explicit
arguments; nothing reads the environment except ``MetricsConfig.from_env``.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from estate_metrics.exceptions import ConfigurationError

DEFAULT_ZONE_RATES: dict[str, float] = {
    "north": 12000.0,
    "south": 15000.0,
    "east": 10000.0,
    "west": 11000.0,
    "central": 18000.0,
}


@dataclass(frozen=True)
class PricingDefaults:
    """Fallback pricing used when a listing has no configurations."""

    default_price_per_sqft: float = 12000.0
    default_area_sqft: float = 1200.0
    fallback_range_multiplier: float = 1.2
    # Read-only after construction; keys are lower-cased zone names
    zone_rates: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_ZONE_RATES)), hash=False
    )

    def __post_init__(self) -> None:
        rates = {_zone_key(zone): float(rate) for zone, rate in self.zone_rates.items()}
        object.__setattr__(self, "zone_rates", MappingProxyType(rates))

    def rate_for_zone(self, zone: Enum | str | None) -> float:
        """Get the per-sqft fallback rate for a zone."""
        if zone is None:
            return self.default_price_per_sqft
        return self.zone_rates.get(_zone_key(zone), self.default_price_per_sqft)


@dataclass(frozen=True)
class FinanceDefaults:
    """Loan and appreciation assumptions for illustrative projections."""

    down_payment_fraction: float = 0.15
    loan_term_years: int = 25
    # 1.65x over five years, roughly 10.5% CAGR
    five_year_appreciation: float = 0.65
    annual_interest_rate: float = 0.085


@dataclass(frozen=True)
class ScoringDefaults:
    """Score fallbacks and display scales."""

    investment_score: float = 7.5
    missing_score: float = 0.0
    lifestyle_scale: float = 5.0
    investment_scale: float = 10.0


@dataclass(frozen=True)
class FormatDefaults:
    """Price display settings."""

    precision: int = 2
    trim_zeros: bool = False


@dataclass(frozen=True)
class MetricsConfig:
    """Main configuration for estate-metrics."""

    pricing: PricingDefaults = field(default_factory=PricingDefaults)
    finance: FinanceDefaults = field(default_factory=FinanceDefaults)
    scoring: ScoringDefaults = field(default_factory=ScoringDefaults)
    formatting: FormatDefaults = field(default_factory=FormatDefaults)
    similar_listings: int = 3
    recommendation_limit: int = 6
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "MetricsConfig":
        """Create config from ``ESTATE_METRICS_*`` environment variables."""
        import json
        import os

        zone_rates_str = os.getenv("ESTATE_METRICS_ZONE_RATES")
        try:
            zone_rates = json.loads(zone_rates_str) if zone_rates_str else dict(DEFAULT_ZONE_RATES)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"ESTATE_METRICS_ZONE_RATES is not valid JSON: {exc}") from exc
        if not isinstance(zone_rates, dict):
            raise ConfigurationError("ESTATE_METRICS_ZONE_RATES must be a JSON object")

        pricing = PricingDefaults(
            default_price_per_sqft=_env_float("ESTATE_METRICS_DEFAULT_RATE", 12000.0),
            default_area_sqft=_env_float("ESTATE_METRICS_DEFAULT_AREA", 1200.0),
            fallback_range_multiplier=_env_float("ESTATE_METRICS_RANGE_MULTIPLIER", 1.2),
            zone_rates={str(k).lower(): _as_positive(f"zone rate {k}", v) for k, v in zone_rates.items()},
        )

        finance = FinanceDefaults(
            down_payment_fraction=_env_float("ESTATE_METRICS_DOWN_PAYMENT", 0.15),
            loan_term_years=int(_env_float("ESTATE_METRICS_LOAN_TERM_YEARS", 25)),
            five_year_appreciation=_env_float("ESTATE_METRICS_APPRECIATION", 0.65),
            annual_interest_rate=_env_float("ESTATE_METRICS_INTEREST_RATE", 0.085),
        )
        if not 0 <= finance.down_payment_fraction <= 1:
            raise ConfigurationError("ESTATE_METRICS_DOWN_PAYMENT must be between 0 and 1")

        scoring = ScoringDefaults(
            investment_score=_env_float("ESTATE_METRICS_INVESTMENT_SCORE", 7.5),
        )

        formatting = FormatDefaults(
            precision=int(_env_float("ESTATE_METRICS_PRECISION", 2)),
            trim_zeros=os.getenv("ESTATE_METRICS_TRIM_ZEROS", "false").lower() == "true",
        )

        return cls(
            pricing=pricing,
            finance=finance,
            scoring=scoring,
            formatting=formatting,
            similar_listings=int(_env_float("ESTATE_METRICS_SIMILAR_LISTINGS", 3)),
            recommendation_limit=int(_env_float("ESTATE_METRICS_RECOMMENDATION_LIMIT", 6)),
            log_level=os.getenv("ESTATE_METRICS_LOG_LEVEL", "INFO"),
        )


def _env_float(name: str, default: float) -> float:
    """Read a finite, non-negative number from the environment."""
    import os

    raw = os.getenv(name)
    if raw is None or raw == "":
        return float(default)
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
    if not math.isfinite(value) or value < 0:
        raise ConfigurationError(f"{name} must be a finite non-negative number, got {raw!r}")
    return value


def _as_positive(label: str, value: object) -> float:
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{label} must be a number, got {value!r}") from exc
    if not math.isfinite(number) or number <= 0:
        raise ConfigurationError(f"{label} must be positive, got {value!r}")
    return number


def _zone_key(zone: Enum | str) -> str:
    return str(zone.value if isinstance(zone, Enum) else zone).lower()
