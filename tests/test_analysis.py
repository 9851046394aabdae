"""Tests for the composed investment and end-use views."""

import pytest

from estate_metrics.analysis import analyze_end_use, analyze_investment
from estate_metrics.config import FormatDefaults, MetricsConfig, ScoringDefaults
from estate_metrics.exceptions import InvalidScoreError
from estate_metrics.models import (
    CivilMepReport,
    MarketAnalysis,
    Property,
    PropertyValuationReport,
    Score,
    Zone,
)
from estate_metrics.pricing import PriceRange


class TestAnalyzeInvestment:
    """Tests for analyze_investment."""

    def test_full_view(
        self,
        sample_property: Property,
        sample_valuation_report: PropertyValuationReport,
    ) -> None:
        result = analyze_investment(sample_property, valuation_report=sample_valuation_report)

        assert result.price_range == PriceRange(min=10_200_000, max=28_000_000)
        assert result.price_display == "₹1.02 Cr - ₹2.80 Cr"
        assert result.investment_score == Score(8.1, 10.0)
        assert result.monthly_emi == 28_900
        assert result.five_year_value == pytest.approx(16_830_000)
        assert result.financials is not None
        assert result.financials.current_valuation == 10_000_000
        assert result.financials.rental_yield == pytest.approx(0.036)

    def test_civil_score_when_no_valuation(self, sample_property: Property) -> None:
        civil = CivilMepReport(report_id="civ-1", property_id="prop-001", overall_score=6.4)

        result = analyze_investment(sample_property, civil_report=civil)

        assert result.investment_score.value == 6.4
        assert result.financials is None

    def test_default_score_and_zone_estimate(self) -> None:
        prop = Property(property_id="bare", zone=Zone.CENTRAL)

        result = analyze_investment(prop)

        assert result.investment_score == Score(7.5, 10.0)
        assert result.price_range.min == 18000 * 1200
        assert result.price_range.max == pytest.approx(18000 * 1200 * 1.2)

    def test_market_value_collapses_range(self) -> None:
        prop = Property(property_id="p")
        report = PropertyValuationReport(
            report_id="v", property_id="p", estimated_market_value=9_500_000
        )

        result = analyze_investment(prop, valuation_report=report)

        assert result.price_display == "₹95.00 L"

    def test_config_overrides(self, sample_property: Property) -> None:
        sample_property.overall_score = None
        config = MetricsConfig(
            scoring=ScoringDefaults(investment_score=0.0),
            formatting=FormatDefaults(precision=1, trim_zeros=True),
        )

        result = analyze_investment(sample_property, config=config)

        assert result.investment_score.value == 0
        assert result.price_display == "₹1 Cr - ₹2.8 Cr"

    def test_investment_rejects_nan_yield_score(self, sample_property: Property) -> None:
        report = PropertyValuationReport.from_api(
            {"id": "v", "propertyId": "prop-001", "yieldScore": "NaN"}
        )

        with pytest.raises(InvalidScoreError):
            analyze_investment(sample_property, valuation_report=report)


class TestAnalyzeEndUse:
    """Tests for analyze_end_use."""

    def test_first_configuration(self, sample_property: Property) -> None:
        result = analyze_end_use(sample_property)

        assert result.configuration == "2 BHK"
        assert result.price.total_price == 10_200_000
        assert result.price_display == "₹1.02 Cr"
        assert result.rate_display == "₹8,500"
        assert result.lifestyle_score == Score(4.0, 5.0)
        assert result.monthly_emi == 28_900

    def test_missing_area_uses_default(self, sample_property: Property) -> None:
        sample_property.configurations[0].built_up_area = None

        result = analyze_end_use(sample_property)

        assert result.price.area == 1200
        assert result.price.total_price == 10_200_000

    def test_valuation_spread_over_zone_rate(self) -> None:
        prop = Property(property_id="p", zone=Zone.NORTH)
        report = PropertyValuationReport(
            report_id="v", property_id="p", estimated_market_value=10_000_000
        )

        result = analyze_end_use(prop, report)

        assert result.price.price_per_sqft == 12000
        assert result.price.area == 833

    def test_valuation_spread_over_market_rate(self) -> None:
        prop = Property(property_id="p", zone=Zone.NORTH)
        report = PropertyValuationReport(
            report_id="v",
            property_id="p",
            estimated_market_value=10_000_000,
            market_analysis=MarketAnalysis(average_price_per_sqft=8000),
            configuration="3 BHK",
        )

        result = analyze_end_use(prop, report)

        assert result.configuration == "3 BHK"
        assert result.price.area == 1250
        assert result.rate_display == "₹8,000"

    def test_defaults_without_data(self) -> None:
        result = analyze_end_use(Property(property_id="p"))

        assert result.price.total_price == 14_400_000
        assert result.price_display == "₹1.44 Cr"
        assert result.lifestyle_score == Score(0.0, 5.0)
        assert result.configuration is None

    def test_non_numeric_api_score_rejected(self) -> None:
        prop = Property.from_api({"id": "p", "locationScore": "NaN", "amenitiesScore": 4})

        with pytest.raises(InvalidScoreError, match="location_score"):
            analyze_end_use(prop)
