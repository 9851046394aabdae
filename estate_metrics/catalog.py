"""Per-request snapshot of listings and their reports with referential integrity."""

from dataclasses import dataclass, field

from estate_metrics.config import MetricsConfig
from estate_metrics.exceptions import EntityNotFoundError, ReferentialIntegrityError
from estate_metrics.models import CivilMepReport, Intent, Property, PropertyValuationReport
from estate_metrics.recommendations import Recommendation, UserBehavior, recommend
from estate_metrics.similarity import rank_similar


@dataclass
class PropertyCatalog:
    """In-memory index of fetched records for one derivation pass.

    Built by the caller from API responses and discarded afterwards.
    """

    config: MetricsConfig = field(default_factory=MetricsConfig)
    properties: dict[str, Property] = field(default_factory=dict)
    civil_reports: dict[str, CivilMepReport] = field(default_factory=dict)
    valuation_reports: dict[str, PropertyValuationReport] = field(default_factory=dict)

    # Relationship indexes
    _property_civil_report: dict[str, str] = field(default_factory=dict)
    _property_valuation_report: dict[str, str] = field(default_factory=dict)

    def add_property(self, prop: Property) -> None:
        """Add a listing to the catalog."""
        self.properties[prop.property_id] = prop

    def add_civil_report(self, report: CivilMepReport) -> None:
        """Add a civil/MEP report; its property must already be present."""
        if report.property_id not in self.properties:
            raise ReferentialIntegrityError(f"Property {report.property_id} not found")

        self.civil_reports[report.report_id] = report
        self._property_civil_report[report.property_id] = report.report_id

    def add_valuation_report(self, report: PropertyValuationReport) -> None:
        """Add a valuation report; its property must already be present."""
        if report.property_id not in self.properties:
            raise ReferentialIntegrityError(f"Property {report.property_id} not found")

        self.valuation_reports[report.report_id] = report
        self._property_valuation_report[report.property_id] = report.report_id

    # Query methods
    def get_property(self, property_id: str) -> Property:
        """Get a listing by id."""
        try:
            return self.properties[property_id]
        except KeyError:
            raise EntityNotFoundError(f"Property {property_id} not found") from None

    def get_civil_report(self, property_id: str) -> CivilMepReport | None:
        """Get the latest civil/MEP report added for a listing, if any."""
        self.get_property(property_id)
        report_id = self._property_civil_report.get(property_id)
        return self.civil_reports[report_id] if report_id else None

    def get_valuation_report(self, property_id: str) -> PropertyValuationReport | None:
        """Get the latest valuation report added for a listing, if any."""
        self.get_property(property_id)
        report_id = self._property_valuation_report.get(property_id)
        return self.valuation_reports[report_id] if report_id else None

    def similar_to(self, property_id: str, top_n: int | None = None) -> list[Property]:
        """Listings most similar to the given one, in insertion order on ties.

        ``top_n`` defaults to ``config.similar_listings``.
        """
        reference = self.get_property(property_id)
        if top_n is None:
            top_n = self.config.similar_listings
        return rank_similar(reference, list(self.properties.values()), top_n)

    def recommendations(
        self,
        intent: Intent,
        behavior: UserBehavior,
        current_id: str | None = None,
        budget: tuple[float, float] | None = None,
    ) -> list[Recommendation]:
        """Recommended listings for a visitor, up to ``config.recommendation_limit``."""
        current = self.get_property(current_id) if current_id is not None else None
        return recommend(
            list(self.properties.values()),
            intent,
            behavior,
            current=current,
            limit=self.config.recommendation_limit,
            budget=budget,
        )

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "properties": len(self.properties),
            "configurations": sum(len(p.configurations) for p in self.properties.values()),
            "civil_reports": len(self.civil_reports),
            "valuation_reports": len(self.valuation_reports),
        }
