"""Pytest configuration and fixtures."""

import pytest

from estate_metrics.models import (
    CostBreakdown,
    CostComponents,
    FinancialAnalysis,
    HiddenCost,
    Property,
    PropertyConfiguration,
    PropertyStatus,
    PropertyType,
    PropertyValuationReport,
    Zone,
)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_configurations() -> list[PropertyConfiguration]:
    """Three configurations priced at 1.02 Cr, 1.45 Cr and 2.8 Cr."""
    return [
        PropertyConfiguration(configuration="2 BHK", built_up_area=1200, price_per_sqft=8500),
        PropertyConfiguration(configuration="3 BHK", built_up_area=1450, price_per_sqft=10000),
        PropertyConfiguration(configuration="4 BHK", built_up_area=2800, price_per_sqft=10000),
    ]


@pytest.fixture
def sample_property(sample_configurations: list[PropertyConfiguration]) -> Property:
    """A north Bengaluru apartment listing with configurations."""
    return Property(
        property_id="prop-001",
        name="Sobha Meadows",
        property_type=PropertyType.APARTMENT,
        developer="Sobha",
        status=PropertyStatus.ACTIVE,
        area="Hebbal",
        zone=Zone.NORTH,
        tags=["rera-approved", "gym"],
        overall_score=4.2,
        location_score=4.5,
        amenities_score=3.5,
        value_score=4.0,
        configurations=sample_configurations,
    )


@pytest.fixture
def sample_valuation_report() -> PropertyValuationReport:
    """Valuation report for ``prop-001`` with one hidden cost."""
    return PropertyValuationReport(
        report_id="val-001",
        property_id="prop-001",
        cost_breakdown=CostBreakdown(
            components=CostComponents(land_value=1_000_000, construction_cost=500_000),
            hidden_costs=[HiddenCost(item="Corpus fund", amount=50_000)],
        ),
        financial_analysis=FinancialAnalysis(
            current_valuation=10_000_000,
            monthly_rental_income=30_000,
        ),
        yield_score=8.1,
        estimated_market_value=10_000_000,
    )
