"""Faker-backed generators for demo and test data."""

from estate_metrics.generators.listing import (
    ConfigurationGenerator,
    PropertyGenerator,
    ValuationReportGenerator,
)

__all__ = [
    "ConfigurationGenerator",
    "PropertyGenerator",
    "ValuationReportGenerator",
]
