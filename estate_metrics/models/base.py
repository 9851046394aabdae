"""Base models and API coercion helpers shared across entities."""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, TypeVar

from estate_metrics.exceptions import InvalidScoreError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class Score:
    """A score tagged with the maximum of the scale it was recorded on.

    Listing scores live on /5, engineering scores on /10 and some report
    scores on /100. Carrying the scale makes every conversion explicit.
    """

    value: float
    scale_max: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.scale_max) or self.scale_max <= 0:
            raise InvalidScoreError(f"scale_max must be positive, got {self.scale_max!r}")
        if not math.isfinite(self.value):
            raise InvalidScoreError(f"score value must be finite, got {self.value!r}")

    def normalized(self) -> float:
        """Return the score as a fraction of its scale."""
        return self.value / self.scale_max

    def on_scale(self, scale_max: float) -> "Score":
        """Convert to another scale."""
        return Score(self.normalized() * scale_max, scale_max)

    def display(self, precision: int = 1) -> str:
        """Render as ``value/scale`` (e.g. ``4.2/5``)."""
        return f"{self.value:.{precision}f}/{self.scale_max:g}"


def parse_number(value: Any) -> float | None:
    """Coerce an API number to float.

    The API returns numerics as numbers, numeric strings, or display
    strings such as ``"₹45,000"`` and ``"3.2%"``. Empty values map to
    ``None``; unparseable ones are logged and also map to ``None`` so the
    consuming calculation raises its own typed error.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    for symbol in ("₹", ",", "%", " "):
        text = text.replace(symbol, "")
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        logger.warning("Ignoring non-numeric value %r", value)
        return None


def coerce_enum(enum_cls: type[E], value: Any) -> E | str | None:
    """Map a raw API string onto an enum member, keeping unknown values as-is."""
    if value is None or value == "":
        return None
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return str(value)


def string_list(value: Any) -> list[str]:
    """Normalize an optional JSON array of strings, preserving first occurrence order."""
    if not value:
        return []
    seen: dict[str, None] = {}
    for item in value:
        if item is not None:
            seen.setdefault(str(item), None)
    return list(seen)


def pick(data: Mapping[str, Any], *keys: str) -> Any:
    """Return the first present key, accepting camelCase and snake_case spellings."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None
