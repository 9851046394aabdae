"""Lifestyle, investment and overall property scores.

Scores are plain numbers on whatever scale the source data uses; nothing
here rescales them. Use ``as_score`` to attach the scale for display.
"""

import math
from typing import Any

from estate_metrics.config import ScoringDefaults
from estate_metrics.exceptions import InvalidScoreError
from estate_metrics.formatting import NUMBER_TYPES
from estate_metrics.models import Score

DEFAULT_INVESTMENT_SCORE = ScoringDefaults().investment_score


def lifestyle_score(
    location_score: float | None,
    amenities_score: float | None,
    *,
    default: float,
) -> float:
    """Mean of location and amenities scores.

    Missing inputs take ``default``, which the caller must choose.
    """
    return _mean({"location_score": location_score, "amenities_score": amenities_score}, default)


def investment_score(
    valuation_yield_score: float | None = None,
    civil_overall_score: float | None = None,
    property_overall_score: float | None = None,
    *,
    default: float = DEFAULT_INVESTMENT_SCORE,
) -> float:
    """First available score in precedence order, else ``default``.

    Precedence is the valuation report's yield score, then the civil/MEP
    report's overall score, then the listing's overall score. This is a
    fallback chain, not an average. ``0`` counts as present; a present
    score that is not a finite number is an error, not a reason to fall
    through.
    """
    chain = (
        ("valuation_yield_score", valuation_yield_score),
        ("civil_overall_score", civil_overall_score),
        ("property_overall_score", property_overall_score),
    )
    for name, candidate in chain:
        if candidate is not None:
            return check_score(name, candidate)
    return check_score("default", default)


def property_score(
    location_score: float | None,
    amenities_score: float | None,
    value_score: float | None,
    *,
    default: float,
) -> float:
    """Unweighted mean of location, amenities and value scores."""
    return _mean(
        {
            "location_score": location_score,
            "amenities_score": amenities_score,
            "value_score": value_score,
        },
        default,
    )


def as_score(value: float, scale_max: float) -> Score:
    """Tag a raw score with its scale."""
    return Score(check_score("value", value), check_score("scale_max", scale_max))


def check_score(name: str, value: Any) -> float:
    """Return a present score as float.

    Raises
    ------
    InvalidScoreError
        If ``value`` is not a finite number. API values such as ``"NaN"``
        parse to ``nan`` and stop here.
    """
    if isinstance(value, bool) or not isinstance(value, NUMBER_TYPES):
        raise InvalidScoreError(f"{name} must be a number, got {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise InvalidScoreError(f"{name} must be finite, got {value!r}")
    return number


def _mean(scores: dict[str, float | None], default: float) -> float:
    fallback = check_score("default", default)
    filled = [fallback if value is None else check_score(name, value) for name, value in scores.items()]
    return sum(filled) / len(filled)
