"""Enumeration types for listing and report entities."""

from enum import Enum


class PropertyType(str, Enum):
    APARTMENT = "apartment"
    VILLA = "villa"
    PLOT = "plot"


class PropertyStatus(str, Enum):
    PRE_LAUNCH = "pre-launch"
    ACTIVE = "active"
    UNDER_CONSTRUCTION = "under-construction"
    COMPLETED = "completed"
    SOLD_OUT = "sold-out"


class Zone(str, Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    CENTRAL = "central"


class AvailabilityStatus(str, Enum):
    AVAILABLE = "available"
    LIMITED = "limited"
    SOLD_OUT = "sold-out"


# Recommendation vocabularies differ per report type and are kept apart.


class MarketRecommendation(str, Enum):
    """Valuation report market call (market analysis form)."""

    BUY = "buy"
    HOLD = "hold"
    SELL = "sell"


class ValuationRecommendation(str, Enum):
    """Valuation report investment verdict (comprehensive form)."""

    EXCELLENT_BUY = "excellent-buy"
    GOOD_BUY = "good-buy"
    HOLD = "hold"
    AVOID = "avoid"


class CivilMepRecommendation(str, Enum):
    """Civil and MEP engineering report verdict."""

    HIGHLY_RECOMMENDED = "highly-recommended"
    RECOMMENDED = "recommended"
    CONDITIONAL = "conditional"
    NOT_RECOMMENDED = "not-recommended"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Intent(str, Enum):
    """Buyer intent driving recommendation weights."""

    INVESTMENT = "investment"
    END_USE = "end-use"
    NONE = ""


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
