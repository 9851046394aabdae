"""Similar-listing ranking by weighted attribute overlap."""

import logging
from dataclasses import dataclass
from typing import Sequence

from estate_metrics.models import Property

logger = logging.getLogger(__name__)

ZONE_POINTS = 40
TYPE_POINTS = 30
DEVELOPER_POINTS = 20
STATUS_POINTS = 15
TAG_POINTS = 5
TAG_POINTS_CAP = 25
# Awarded again for a zone match when the reference has configurations. It
# stands in for a price-band comparison that was never built.
PRICE_PROXIMITY_POINTS = 10


@dataclass(frozen=True)
class SimilarityMatch:
    property: Property
    score: int


def score_similarity(reference: Property, candidate: Property) -> int:
    """Additive similarity score of ``candidate`` against ``reference``.

    Missing attributes on either side never match.
    """
    score = 0
    same_zone = _matches(reference.zone, candidate.zone)

    if same_zone:
        score += ZONE_POINTS
    if _matches(reference.property_type, candidate.property_type):
        score += TYPE_POINTS
    if _matches(reference.developer, candidate.developer):
        score += DEVELOPER_POINTS
    if _matches(reference.status, candidate.status):
        score += STATUS_POINTS

    reference_tags = set(reference.tags or ())
    common = [tag for tag in dict.fromkeys(candidate.tags or ()) if tag in reference_tags]
    score += min(len(common) * TAG_POINTS, TAG_POINTS_CAP)

    if reference.configurations and same_zone:
        score += PRICE_PROXIMITY_POINTS

    return score


def score_candidates(reference: Property, candidates: Sequence[Property]) -> list[SimilarityMatch]:
    """Score every candidate except the reference, best first.

    The sort is stable, so equal scores keep candidate order.
    """
    matches = [
        SimilarityMatch(property=candidate, score=score_similarity(reference, candidate))
        for candidate in candidates
        if not _is_reference(reference, candidate)
    ]
    return sorted(matches, key=lambda match: match.score, reverse=True)


def rank_similar(
    reference: Property,
    candidates: Sequence[Property],
    top_n: int = 3,
) -> list[Property]:
    """Top ``top_n`` candidates most similar to ``reference``.

    Returns fewer when fewer candidates exist and an empty list for an
    empty candidate list or a non-positive ``top_n``.
    """
    if top_n <= 0:
        return []
    ranked = score_candidates(reference, candidates)[:top_n]
    logger.debug(
        "Ranked %d candidates for %s; kept %d",
        len(candidates),
        reference.property_id,
        len(ranked),
        extra={"property_id": reference.property_id},
    )
    return [match.property for match in ranked]


def _matches(left: object, right: object) -> bool:
    if left is None or left == "":
        return False
    return left == right


def _is_reference(reference: Property, candidate: Property) -> bool:
    if candidate is reference:
        return True
    return bool(reference.property_id) and candidate.property_id == reference.property_id
