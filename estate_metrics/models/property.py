"""Property listing and unit configuration models."""

from dataclasses import dataclass, field
from typing import Any, Mapping

from estate_metrics.models.base import coerce_enum, parse_number, pick, string_list
from estate_metrics.models.enums import AvailabilityStatus, PropertyStatus, PropertyType, Zone


@dataclass
class PropertyConfiguration:
    """A unit type offered within a property (e.g. "3 BHK")."""

    configuration: str
    built_up_area: float | None  # Square feet
    price_per_sqft: float | None
    price: float | None = None  # As stored upstream; derived price wins
    availability_status: AvailabilityStatus | str | None = None
    plot_size: float | None = None
    property_id: str | None = None
    configuration_id: str | None = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "PropertyConfiguration":
        """Build from a deserialized API record."""
        return cls(
            configuration=str(pick(data, "configuration") or ""),
            built_up_area=parse_number(pick(data, "builtUpArea", "built_up_area")),
            price_per_sqft=parse_number(pick(data, "pricePerSqft", "price_per_sqft")),
            price=parse_number(pick(data, "price")),
            availability_status=coerce_enum(
                AvailabilityStatus, pick(data, "availabilityStatus", "availability_status")
            ),
            plot_size=parse_number(pick(data, "plotSize", "plot_size")),
            property_id=pick(data, "propertyId", "property_id"),
            configuration_id=pick(data, "id", "configuration_id"),
        )


@dataclass
class Property:
    """Real estate listing as returned by the listings API."""

    property_id: str
    name: str = ""
    property_type: PropertyType | str | None = None
    developer: str | None = None
    status: PropertyStatus | str | None = None
    area: str | None = None  # Locality name, not square footage
    zone: Zone | str | None = None
    tags: list[str] = field(default_factory=list)
    overall_score: float | None = None
    location_score: float | None = None
    amenities_score: float | None = None
    value_score: float | None = None
    rera_approved: bool = False
    area_avg_price_min: float | None = None
    area_avg_price_max: float | None = None
    city_avg_price_min: float | None = None
    city_avg_price_max: float | None = None
    images: list[str] = field(default_factory=list)
    youtube_video_url: str | None = None
    configurations: list[PropertyConfiguration] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "Property":
        """Build from a deserialized API record, including nested configurations."""
        configurations = [
            PropertyConfiguration.from_api(item) for item in (pick(data, "configurations") or [])
        ]
        return cls(
            property_id=str(pick(data, "id", "property_id") or ""),
            name=str(pick(data, "name") or ""),
            property_type=coerce_enum(PropertyType, pick(data, "type", "property_type")),
            developer=pick(data, "developer"),
            status=coerce_enum(PropertyStatus, pick(data, "status")),
            area=pick(data, "area"),
            zone=coerce_enum(Zone, pick(data, "zone")),
            tags=string_list(pick(data, "tags")),
            overall_score=parse_number(pick(data, "overallScore", "overall_score")),
            location_score=parse_number(pick(data, "locationScore", "location_score")),
            amenities_score=parse_number(pick(data, "amenitiesScore", "amenities_score")),
            value_score=parse_number(pick(data, "valueScore", "value_score")),
            rera_approved=bool(pick(data, "reraApproved", "rera_approved")),
            area_avg_price_min=parse_number(pick(data, "areaAvgPriceMin", "area_avg_price_min")),
            area_avg_price_max=parse_number(pick(data, "areaAvgPriceMax", "area_avg_price_max")),
            city_avg_price_min=parse_number(pick(data, "cityAvgPriceMin", "city_avg_price_min")),
            city_avg_price_max=parse_number(pick(data, "cityAvgPriceMax", "city_avg_price_max")),
            images=[str(url) for url in (pick(data, "images") or [])],
            youtube_video_url=pick(data, "youtubeVideoUrl", "youtube_video_url"),
            configurations=configurations,
        )
