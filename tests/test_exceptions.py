"""Tests for custom exception hierarchy."""

import pytest

from estate_metrics.exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    EstateMetricsError,
    IncompleteConfigurationError,
    InvalidAmountError,
    InvalidFinancialInputError,
    InvalidScoreError,
    NoConfigurationsError,
    ReferentialIntegrityError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_estate_metrics_error_is_exception(self) -> None:
        assert isinstance(EstateMetricsError("test"), Exception)

    @pytest.mark.parametrize(
        "error_cls",
        [
            InvalidAmountError,
            IncompleteConfigurationError,
            NoConfigurationsError,
            InvalidFinancialInputError,
            InvalidScoreError,
        ],
    )
    def test_calculation_errors_are_value_errors(self, error_cls: type) -> None:
        err = error_cls("test")
        assert isinstance(err, EstateMetricsError)
        assert isinstance(err, ValueError)

    def test_referential_integrity_is_entity_not_found(self) -> None:
        err = ReferentialIntegrityError("test")
        assert isinstance(err, EntityNotFoundError)
        assert isinstance(err, EstateMetricsError)

    def test_configuration_error_is_estate_metrics_error(self) -> None:
        assert isinstance(ConfigurationError("test"), EstateMetricsError)

    def test_calculation_errors_are_distinct(self) -> None:
        with pytest.raises(NoConfigurationsError):
            raise NoConfigurationsError("empty")
        assert not issubclass(NoConfigurationsError, IncompleteConfigurationError)
        assert not issubclass(InvalidAmountError, InvalidFinancialInputError)

    def test_exception_message(self) -> None:
        err = ReferentialIntegrityError("Property prop-001 not found")
        assert str(err) == "Property prop-001 not found"
