"""Synthetic listings, configurations and valuation reports."""

from __future__ import annotations

import random
from typing import Iterator

from estate_metrics.generators.base import BaseGenerator
from estate_metrics.models import (
    AvailabilityStatus,
    CostBreakdown,
    CostComponents,
    FinancialAnalysis,
    HiddenCost,
    Property,
    PropertyConfiguration,
    PropertyStatus,
    PropertyType,
    PropertyValuationReport,
    ValuationRecommendation,
    Zone,
)


class ConfigurationGenerator(BaseGenerator):
    """Generate unit configurations with realistic Bengaluru rates."""

    # (label, built-up area range in sqft)
    LAYOUTS = [
        ("1 BHK", (550, 750)),
        ("2 BHK", (950, 1300)),
        ("3 BHK", (1400, 1900)),
        ("4 BHK", (2200, 3200)),
    ]

    # Rate per sqft range by zone
    ZONE_RATES = {
        Zone.NORTH: (7500, 13000),
        Zone.SOUTH: (9000, 16000),
        Zone.EAST: (7000, 12000),
        Zone.WEST: (7500, 12500),
        Zone.CENTRAL: (15000, 25000),
    }

    def generate(self, property_id: str, zone: Zone = Zone.NORTH) -> PropertyConfiguration:
        """Generate one configuration.

        Parameters
        ----------
        property_id : str
            Owning listing.
        zone : Zone
            Zone used to pick the rate band.

        Returns
        -------
        PropertyConfiguration
            Configuration whose stored price matches rate times area.
        """
        label, (low, high) = random.choice(self.LAYOUTS)
        area = float(random.randint(low, high))
        rate = self.rupees(*self.ZONE_RATES[zone], step=50)
        return PropertyConfiguration(
            configuration=label,
            built_up_area=area,
            price_per_sqft=rate,
            price=rate * area,
            availability_status=self.weighted(list(AvailabilityStatus), [0.7, 0.2, 0.1]),
            property_id=property_id,
            configuration_id=self.fake.uuid4(),
        )


class PropertyGenerator(BaseGenerator):
    """Generate synthetic listings with configurations."""

    TAGS = [
        "rera-approved",
        "gym",
        "swimming-pool",
        "metro-connectivity",
        "high-roi",
        "rental-income",
        "family-friendly",
        "school-nearby",
        "park",
        "children-play-area",
        "trending",
        "premium-developer",
    ]

    NAME_SUFFIXES = ["Residency", "Heights", "Enclave", "Gardens", "Towers", "Meadows"]

    def __init__(self, seed: int | None = None) -> None:
        super().__init__(seed)
        self._config_gen = ConfigurationGenerator(seed=seed)

    def generate(self, configurations: tuple[int, int] = (1, 4)) -> Property:
        """Generate a listing.

        Parameters
        ----------
        configurations : tuple[int, int]
            Min and max number of configurations.

        Returns
        -------
        Property
            Generated listing.
        """
        property_id = self.fake.uuid4()
        zone = random.choice(list(Zone))
        return Property(
            property_id=property_id,
            name=f"{self.fake.last_name()} {random.choice(self.NAME_SUFFIXES)}",
            property_type=self.weighted(list(PropertyType), [0.7, 0.2, 0.1]),
            developer=self.fake.company(),
            status=random.choice(list(PropertyStatus)),
            area=self.fake.street_name(),
            zone=zone,
            tags=random.sample(self.TAGS, k=random.randint(0, 6)),
            overall_score=round(random.uniform(2.5, 5.0), 1),
            location_score=round(random.uniform(2.5, 5.0), 1),
            amenities_score=round(random.uniform(2.5, 5.0), 1),
            value_score=round(random.uniform(2.5, 5.0), 1),
            rera_approved=random.random() < 0.8,
            images=[self.fake.image_url() for _ in range(random.randint(1, 4))],
            configurations=[
                self._config_gen.generate(property_id, zone)
                for _ in range(random.randint(*configurations))
            ],
        )

    def generate_batch(self, count: int) -> Iterator[Property]:
        """Generate multiple listings.

        Parameters
        ----------
        count : int
            Number of listings to generate.

        Yields
        ------
        Property
            Generated listings.
        """
        for _ in range(count):
            yield self.generate()


class ValuationReportGenerator(BaseGenerator):
    """Generate valuation reports with cost breakdowns and rental figures."""

    HIDDEN_COST_ITEMS = [
        ("Khata transfer", "legal"),
        ("Electricity deposit", "utilities"),
        ("Water connection", "utilities"),
        ("Maintenance deposit", "society"),
        ("Corpus fund", "society"),
    ]

    def generate(self, property_id: str, market_value: float) -> PropertyValuationReport:
        """Generate a valuation report for a listing.

        Parameters
        ----------
        property_id : str
            Listing the report belongs to.
        market_value : float
            Estimated market value in rupees.

        Returns
        -------
        PropertyValuationReport
            Generated report.
        """
        land = round(market_value * random.uniform(0.30, 0.45))
        construction = round(market_value * random.uniform(0.35, 0.45))
        components = CostComponents(
            land_value=land,
            construction_cost=construction,
            development_charges=round(market_value * 0.02),
            registration_stamp_duty=round(market_value * 0.066),
            gst_on_construction=round(construction * 0.05),
            parking_charges=random.choice([0, 300_000, 500_000]),
            clubhouse_maintenance=random.choice([150_000, 250_000]),
            interior_fittings=self.rupees(200_000, 1_500_000),
            moving_costs=random.choice([25_000, 50_000]),
            legal_charges=random.choice([25_000, 40_000, 75_000]),
        )
        hidden = [
            HiddenCost(
                item=item,
                amount=self.rupees(5_000, 100_000),
                description=self.fake.sentence(nb_words=6),
                category=category,
            )
            for item, category in random.sample(self.HIDDEN_COST_ITEMS, k=random.randint(0, 3))
        ]
        monthly_rent = round(market_value * random.uniform(0.0015, 0.0035) / 500) * 500

        return PropertyValuationReport(
            report_id=self.fake.uuid4(),
            property_id=property_id,
            cost_breakdown=CostBreakdown(components=components, hidden_costs=hidden),
            financial_analysis=FinancialAnalysis(
                current_valuation=market_value,
                monthly_rental_income=float(monthly_rent),
            ),
            investment_recommendation=random.choice(list(ValuationRecommendation)),
            yield_score=round(random.uniform(5.0, 9.5), 1),
            estimated_market_value=market_value,
        )
