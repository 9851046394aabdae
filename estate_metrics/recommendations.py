"""Intent-aware listing recommendations from browsing behaviour."""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Sequence

from estate_metrics.exceptions import IncompleteConfigurationError
from estate_metrics.formatting import round_half_up
from estate_metrics.models import Confidence, Intent, Property, PropertyStatus
from estate_metrics.pricing import resolve_config_price
from estate_metrics.scoring import check_score

logger = logging.getLogger(__name__)

INVESTMENT_ZONES = frozenset({"east", "north"})
RECENTLY_VIEWED_EXCLUDED = 3
DIVERSE_SLOTS = 3
MAX_REASONS = 3


@dataclass(frozen=True)
class UserBehavior:
    """Snapshot of what a visitor has looked at and chosen.

    ``track`` returns a new snapshot; the caller owns persistence.
    """

    viewed_properties: tuple[str, ...] = ()
    search_history: tuple[str, ...] = ()
    saved_properties: tuple[str, ...] = ()
    price_range_history: tuple[tuple[float, float], ...] = ()
    location_preferences: tuple[str, ...] = ()
    property_type_preferences: tuple[str, ...] = ()
    time_spent_on_properties: Mapping[str, float] = field(default_factory=dict)
    clicked_features: tuple[str, ...] = ()

    def track(self, action: str, **data: Any) -> "UserBehavior":
        """Record an action.

        Supported actions: ``view_property`` and ``save_property``
        (``property_id``), ``search`` (``search_term``, optional
        ``price_range``), ``time_spent`` (``property_id``, ``time_spent``)
        and ``click_feature`` (``feature``). Unknown actions are ignored.
        """
        if action == "view_property":
            return replace(self, viewed_properties=_append_unique(self.viewed_properties, data["property_id"]))
        if action == "save_property":
            return replace(self, saved_properties=_append_unique(self.saved_properties, data["property_id"]))
        if action == "search":
            updated = replace(self, search_history=self.search_history + (data["search_term"],))
            if data.get("price_range"):
                low, high = data["price_range"]
                updated = replace(
                    updated, price_range_history=updated.price_range_history + ((low, high),)
                )
            return updated
        if action == "time_spent":
            spent = dict(self.time_spent_on_properties)
            spent[data["property_id"]] = data["time_spent"]
            return replace(self, time_spent_on_properties=spent)
        if action == "click_feature":
            return replace(self, clicked_features=_append_unique(self.clicked_features, data["feature"]))
        logger.debug("Ignoring unknown behaviour action %r", action)
        return self

    @property
    def data_points(self) -> int:
        return (
            len(self.viewed_properties)
            + len(self.search_history)
            + len(self.saved_properties)
            + len(self.price_range_history)
            + len(self.location_preferences)
            + len(self.property_type_preferences)
            + len(self.time_spent_on_properties)
            + len(self.clicked_features)
        )


@dataclass(frozen=True)
class RecommendationScore:
    property_id: str
    score: int
    reasons: tuple[str, ...]
    confidence: Confidence


@dataclass(frozen=True)
class Recommendation:
    property: Property
    recommendation: RecommendationScore


@dataclass(frozen=True)
class RecommendationAnalytics:
    total_recommendations: int
    average_score: int
    confidence_distribution: dict[str, int]
    intent_optimized: bool
    behavior_data_points: int


def score_recommendation(
    prop: Property,
    intent: Intent,
    behavior: UserBehavior,
    catalog: Sequence[Property] = (),
    budget: tuple[float, float] | None = None,
) -> RecommendationScore:
    """Score one listing for a visitor.

    Parameters
    ----------
    prop : Property
        Listing to score.
    intent : Intent
        Investment, end-use or none.
    behavior : UserBehavior
        Visitor behaviour snapshot.
    catalog : Sequence[Property]
        Listings used to look up the visitor's viewed properties.
    budget : tuple[float, float] | None
        Inclusive rupee budget matched against derived configuration prices.

    Returns
    -------
    RecommendationScore
        Rounded score, up to three reasons and a confidence level.

    Raises
    ------
    InvalidScoreError
        If the listing's overall score is present but not finite.
    """
    score = 0.0 if prop.overall_score is None else check_score("overall_score", prop.overall_score)
    reasons: list[str] = []
    tags = set(prop.tags)

    def award(points: float, reason: str) -> None:
        nonlocal score
        score += points
        reasons.append(reason)

    if intent == Intent.INVESTMENT:
        if "high-roi" in tags:
            award(20, "High ROI potential")
        if "rental-income" in tags:
            award(15, "Strong rental income")
        if _value(prop.zone) in INVESTMENT_ZONES:
            award(10, "Investment-friendly location")
        if prop.status == PropertyStatus.PRE_LAUNCH:
            award(12, "Pre-launch pricing advantage")
        if "metro-connectivity" in tags:
            award(8, "Metro connectivity boosts value")
    elif intent == Intent.END_USE:
        if "family-friendly" in tags:
            award(20, "Perfect for families")
        if "school-nearby" in tags:
            award(15, "Good schools nearby")
        if "park" in tags or "children-play-area" in tags:
            award(12, "Great for children")
        if any("3 BHK" in config.configuration for config in prop.configurations):
            award(10, "Spacious family layout")

    type_matches = sum(
        1 for preferred in behavior.property_type_preferences if preferred == _value(prop.property_type)
    )
    if type_matches:
        award(type_matches * 5, "Matches your preferred property type")

    area = (prop.area or "").lower()
    location_matches = sum(
        1
        for location in behavior.location_preferences
        if (location and location.lower() in area) or location == _value(prop.zone)
    )
    if location_matches:
        award(location_matches * 3, "In your preferred area")

    if budget is not None and _in_budget(prop, budget):
        award(15, "Within your budget")

    matching_features = [
        tag
        for tag in prop.tags
        if any(feature.lower() in tag.lower() for feature in behavior.clicked_features)
    ]
    score += len(matching_features) * 2
    if matching_features:
        reasons.append("Has features you've shown interest in")

    if behavior.viewed_properties:
        viewed_ids = set(behavior.viewed_properties)
        viewed = [other for other in catalog if other.property_id in viewed_ids]
        if any(_resembles(other, prop) for other in viewed):
            award(8, "Similar to properties you've viewed")

    if prop.status == PropertyStatus.ACTIVE and "trending" in tags:
        award(5, "Trending property")

    if "premium-developer" in tags:
        award(7, "Reputed developer")

    if len(reasons) >= 4 and score >= 80:
        confidence = Confidence.HIGH
    elif len(reasons) >= 2 and score >= 60:
        confidence = Confidence.MEDIUM
    else:
        confidence = Confidence.LOW

    return RecommendationScore(
        property_id=prop.property_id,
        score=int(round_half_up(score, 0)),
        reasons=tuple(reasons[:MAX_REASONS]),
        confidence=confidence,
    )


def recommend(
    properties: Sequence[Property],
    intent: Intent,
    behavior: UserBehavior,
    current: Property | None = None,
    limit: int = 6,
    budget: tuple[float, float] | None = None,
) -> list[Recommendation]:
    """Best-scoring listings for a visitor, with variety in the first slots.

    The current listing and the three most recently viewed are excluded.
    Candidates are ranked by score (stable on ties) and the top ``2 *
    limit`` kept; each of the first three slots then takes the best
    remaining listing that adds an unseen type or zone, or the best
    remaining listing when none does.
    """
    if limit <= 0 or not properties:
        return []

    recently_viewed = set(behavior.viewed_properties[-RECENTLY_VIEWED_EXCLUDED:])
    candidates = [
        prop
        for prop in properties
        if not (current is not None and prop.property_id == current.property_id)
        and prop.property_id not in recently_viewed
    ]

    scored = [
        Recommendation(
            property=prop,
            recommendation=score_recommendation(prop, intent, behavior, properties, budget),
        )
        for prop in candidates
    ]
    pool = sorted(scored, key=lambda item: item.recommendation.score, reverse=True)[: limit * 2]

    chosen: list[Recommendation] = []
    used_types: set[Any] = set()
    used_zones: set[Any] = set()
    while pool and len(chosen) < min(DIVERSE_SLOTS, limit):
        index = next(
            (
                i
                for i, item in enumerate(pool)
                if _value(item.property.property_type) not in used_types
                or _value(item.property.zone) not in used_zones
            ),
            0,
        )
        item = pool.pop(index)
        chosen.append(item)
        used_types.add(_value(item.property.property_type))
        used_zones.add(_value(item.property.zone))

    chosen.extend(pool[: limit - len(chosen)])
    logger.debug("Recommended %d of %d candidates", len(chosen), len(candidates))
    return chosen


def recommendation_analytics(
    recommendations: Sequence[Recommendation],
    intent: Intent,
    behavior: UserBehavior,
) -> RecommendationAnalytics:
    """Summary figures for a recommendation set."""
    scores = [item.recommendation.score for item in recommendations]
    average = sum(scores) / len(scores) if scores else 0.0
    distribution = {level.value: 0 for level in Confidence}
    for item in recommendations:
        distribution[item.recommendation.confidence.value] += 1

    return RecommendationAnalytics(
        total_recommendations=len(recommendations),
        average_score=int(round_half_up(average, 0)),
        confidence_distribution=distribution,
        intent_optimized=intent != Intent.NONE,
        behavior_data_points=behavior.data_points,
    )


def _in_budget(prop: Property, budget: tuple[float, float]) -> bool:
    low, high = budget
    for config in prop.configurations:
        try:
            price = resolve_config_price(config).total_price
        except IncompleteConfigurationError:
            logger.debug("Skipping unpriced configuration %r in budget check", config.configuration)
            continue
        if low <= price <= high:
            return True
    return False


def _resembles(viewed: Property, prop: Property) -> bool:
    if viewed.zone is not None and viewed.zone == prop.zone:
        return True
    if viewed.property_type is not None and viewed.property_type == prop.property_type:
        return True
    return any(tag in prop.tags for tag in viewed.tags)


def _value(member: Any) -> Any:
    return getattr(member, "value", member)


def _append_unique(items: tuple[str, ...], item: str) -> tuple[str, ...]:
    return items if item in items else items + (item,)
