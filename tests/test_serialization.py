"""Tests for serialization helpers."""

import json
import math
from decimal import Decimal

import pytest

from estate_metrics.analysis import analyze_end_use, analyze_investment
from estate_metrics.catalog import PropertyCatalog
from estate_metrics.models import Property, PropertyType, PropertyValuationReport, Zone
from estate_metrics.serialization import serialize_value, to_dict


class TestSerializeValue:
    """Tests for serialize_value."""

    def test_enum(self) -> None:
        assert serialize_value(Zone.NORTH) == "north"

    def test_decimal(self) -> None:
        assert serialize_value(Decimal("1.50")) == "1.50"

    def test_non_finite_float(self) -> None:
        assert serialize_value(math.nan) is None
        assert serialize_value(math.inf) is None

    def test_nested(self) -> None:
        assert serialize_value({"zones": (Zone.EAST, Zone.WEST)}) == {"zones": ["east", "west"]}


class TestToDict:
    """Tests for dataclass conversion."""

    def test_property(self, sample_property: Property) -> None:
        result = to_dict(sample_property)

        assert result["property_type"] == "apartment"
        assert result["zone"] == "north"
        assert result["configurations"][1]["configuration"] == "3 BHK"
        assert result["configurations"][0]["price_per_sqft"] == 8500
        json.dumps(result)

    def test_unknown_enum_value_kept(self) -> None:
        result = to_dict(Property(property_id="p", zone="airport-road", property_type=PropertyType.PLOT))

        assert result["zone"] == "airport-road"
        assert result["property_type"] == "plot"

    def test_cost_total_included(self, sample_valuation_report: PropertyValuationReport) -> None:
        result = to_dict(sample_valuation_report)

        breakdown = result["cost_breakdown"]
        assert breakdown["total_estimated_cost"] == pytest.approx(1_550_000)
        assert breakdown["hidden_costs"][0]["item"] == "Corpus fund"
        json.dumps(result)

    def test_private_fields_skipped(self, sample_property: Property) -> None:
        catalog = PropertyCatalog()
        catalog.add_property(sample_property)

        result = to_dict(catalog)

        assert "_property_civil_report" not in result
        assert result["config"]["pricing"]["zone_rates"]["central"] == 18000
        json.dumps(result)

    def test_mapping(self) -> None:
        assert to_dict({"zone": Zone.SOUTH}) == {"zone": "south"}

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError):
            to_dict(42)


class TestAnalysisAsDict:
    """Tests for the analysis response forms."""

    def test_investment(self, sample_property: Property) -> None:
        result = analyze_investment(sample_property).as_dict()

        assert result["price_range"] == {"min": 10_200_000, "max": 28_000_000}
        assert result["investment_score"] == {"value": 4.2, "scale_max": 10.0}
        assert result["financials"] is None
        json.dumps(result)

    def test_end_use(self, sample_property: Property) -> None:
        result = analyze_end_use(sample_property).as_dict()

        assert result["price"]["total_price"] == 10_200_000
        assert result["lifestyle_score"] == {"value": 4.0, "scale_max": 5.0}
        assert result["price_display"] == "₹1.02 Cr"
        json.dumps(result, ensure_ascii=False)
