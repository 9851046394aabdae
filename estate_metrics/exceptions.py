"""Custom exception hierarchy for estate-metrics."""


class EstateMetricsError(Exception):
    """Base exception for all estate-metrics errors."""


class InvalidAmountError(EstateMetricsError, ValueError):
    """Raised when a currency amount cannot be formatted."""


class IncompleteConfigurationError(EstateMetricsError, ValueError):
    """Raised when a configuration lacks a positive rate or built-up area."""


class NoConfigurationsError(EstateMetricsError, ValueError):
    """Raised when a price range is requested over no configurations."""


class InvalidFinancialInputError(EstateMetricsError, ValueError):
    """Raised when a financial formula is undefined for its inputs."""


class InvalidScoreError(EstateMetricsError, ValueError):
    """Raised when a score or its scale is not a finite number."""


class EntityNotFoundError(EstateMetricsError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a report references an unknown property."""


class ConfigurationError(EstateMetricsError):
    """Raised when configuration is invalid or missing."""
