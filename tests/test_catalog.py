"""Tests for the property catalog."""

import pytest

from estate_metrics.catalog import PropertyCatalog
from estate_metrics.config import MetricsConfig
from estate_metrics.exceptions import EntityNotFoundError, ReferentialIntegrityError
from estate_metrics.models import (
    CivilMepReport,
    Intent,
    Property,
    PropertyType,
    PropertyValuationReport,
    Zone,
)
from estate_metrics.recommendations import UserBehavior


@pytest.fixture
def catalog(sample_property: Property) -> PropertyCatalog:
    catalog = PropertyCatalog()
    catalog.add_property(sample_property)
    return catalog


class TestPropertyCatalog:
    """Tests for PropertyCatalog."""

    def test_get_property(self, catalog: PropertyCatalog, sample_property: Property) -> None:
        assert catalog.get_property("prop-001") is sample_property

    def test_missing_property(self, catalog: PropertyCatalog) -> None:
        with pytest.raises(EntityNotFoundError):
            catalog.get_property("prop-404")

    def test_report_requires_property(self, catalog: PropertyCatalog) -> None:
        with pytest.raises(ReferentialIntegrityError):
            catalog.add_civil_report(CivilMepReport(report_id="civ-1", property_id="prop-404"))

        with pytest.raises(ReferentialIntegrityError):
            catalog.add_valuation_report(
                PropertyValuationReport(report_id="val-1", property_id="prop-404")
            )

    def test_reports_by_property(
        self,
        catalog: PropertyCatalog,
        sample_valuation_report: PropertyValuationReport,
    ) -> None:
        civil = CivilMepReport(report_id="civ-1", property_id="prop-001", overall_score=7.2)
        catalog.add_civil_report(civil)
        catalog.add_valuation_report(sample_valuation_report)

        assert catalog.get_civil_report("prop-001") is civil
        assert catalog.get_valuation_report("prop-001") is sample_valuation_report

    def test_no_reports(self, catalog: PropertyCatalog) -> None:
        assert catalog.get_civil_report("prop-001") is None
        assert catalog.get_valuation_report("prop-001") is None

    def test_latest_report_wins(self, catalog: PropertyCatalog) -> None:
        catalog.add_civil_report(CivilMepReport(report_id="civ-1", property_id="prop-001"))
        catalog.add_civil_report(CivilMepReport(report_id="civ-2", property_id="prop-001"))

        report = catalog.get_civil_report("prop-001")

        assert report is not None
        assert report.report_id == "civ-2"

    def test_similar_to(self, catalog: PropertyCatalog) -> None:
        near = Property(property_id="near", zone=Zone.NORTH, property_type=PropertyType.APARTMENT)
        far = Property(property_id="far", zone=Zone.SOUTH)
        catalog.add_property(far)
        catalog.add_property(near)

        assert catalog.similar_to("prop-001") == [near, far]

    def test_summary(
        self,
        catalog: PropertyCatalog,
        sample_valuation_report: PropertyValuationReport,
    ) -> None:
        catalog.add_valuation_report(sample_valuation_report)

        assert catalog.summary() == {
            "properties": 1,
            "configurations": 3,
            "civil_reports": 0,
            "valuation_reports": 1,
        }

    def test_similar_to_uses_configured_limit(self, sample_property: Property) -> None:
        catalog = PropertyCatalog(config=MetricsConfig(similar_listings=1))
        catalog.add_property(sample_property)
        for i in range(3):
            catalog.add_property(Property(property_id=f"p{i}"))

        assert len(catalog.similar_to("prop-001")) == 1

    def test_recommendations(self, catalog: PropertyCatalog) -> None:
        for i in range(10):
            catalog.add_property(Property(property_id=f"p{i}", overall_score=i))

        result = catalog.recommendations(Intent.NONE, UserBehavior(), current_id="p9")

        assert len(result) == 6
        assert "p9" not in [item.property.property_id for item in result]

    def test_recommendations_unknown_current(self, catalog: PropertyCatalog) -> None:
        with pytest.raises(EntityNotFoundError):
            catalog.recommendations(Intent.NONE, UserBehavior(), current_id="prop-404")
