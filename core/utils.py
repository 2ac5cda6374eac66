import math
from typing import Any, Iterable, List, Optional


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up (2.5 -> 3, unlike round())."""
    return int(math.floor(value + 0.5))


def normalize_text(value: Optional[str]) -> str:
    """Lowercase and trim, treating None as empty."""
    if not value:
        return ""
    return str(value).strip().lower()


def as_list(value: Optional[Iterable[Any]]) -> List[Any]:
    """Coerce None or any iterable to a list; a bare string becomes one item."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)
