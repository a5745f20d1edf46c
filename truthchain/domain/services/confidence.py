"""Parsing and clamping of confidence scores."""

import re
from typing import Any

STRUCTURED_DEFAULT = 75
LEXICAL_DECISIVE = 85
LEXICAL_UNDECIDED = 70

MIN_CONFIDENCE = 0
MAX_CONFIDENCE = 100

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def clamp_confidence(value: int) -> int:
    """Clamp a confidence score into [0, 100]."""
    return max(MIN_CONFIDENCE, min(value, MAX_CONFIDENCE))


def resolve_confidence(value: Any, default: int = STRUCTURED_DEFAULT) -> int:
    """Resolve a reported confidence into an integer score.

    Accepts numbers and numeric-looking strings such as ``"92"`` or
    ``"85.5%"``. Only the leading integer of a string is read, so
    ``"85.5%"`` resolves to 85.

    Args:
        value: Confidence as reported by the model
        default: Score used when the value is absent or unparsable

    Returns:
        Integer score clamped into [0, 100]
    """
    if isinstance(value, bool):
        return clamp_confidence(default)
    if isinstance(value, int):
        return clamp_confidence(value)
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return clamp_confidence(default)
        return clamp_confidence(int(value))
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return clamp_confidence(int(match.group(1)))
    return clamp_confidence(default)
