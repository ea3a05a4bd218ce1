from __future__ import annotations

import logging
import math
import re
from typing import Any, Mapping, Sequence

from .vocabulary import DEFAULT_SUB_TYPE_KEYWORDS

logger = logging.getLogger(__name__)

PERSONALITY_AXES: Sequence[str] = (
    "minimal_rich",
    "playful_serious",
    "warm_cool",
    "light_bold",
    "classic_modern",
    "calm_dynamic",
)
NEUTRAL_AXIS_VALUE = 0.5
FALLBACK_BUSINESS_NAME = "My Business"

_NAME_PATTERNS: Sequence[re.Pattern[str]] = (
    re.compile(
        r"(?:called|named)\s+[\"']?([A-Z][A-Za-z\s&']+?)[\"']?"
        r"(?:\.|,|\s+(?:is|and|that|which|in)\b|$)"
    ),
    re.compile(
        r"\b(?i:my|our)\s+(?i:company|business|brand|studio|agency|shop|store)\s+[\"']?"
        r"([A-Z][A-Za-z&']*(?:\s+[A-Z][A-Za-z&']*)*)"
    ),
    re.compile(r"^I(?:'m| am)\s+(?:a\s+)?([A-Z][A-Za-z\s]+?)(?=\s+(?:based|in|from|who|that|and)\b)"),
)
_WORD_PUNCTUATION = re.compile(r"[^\w&'-]")
# Sentence openers that are never part of a name.
_PRONOUN_OPENERS = frozenset({"i", "i'm", "im", "i've", "we", "we're", "we've", "our", "my", "us"})


def extract_business_name(description: str) -> str:
    """Recover a business name from free text.

    Tries a "called/named X" phrase, then "my/our studio X", then "I'm X based in ...",
    and finally the leading capitalised words of the description.
    """
    text = (description or "").strip()
    for pattern in _NAME_PATTERNS:
        match = pattern.search(text)
        if match:
            name = match.group(1).strip()
            if name:
                return name

    words = [_WORD_PUNCTUATION.sub("", word) for word in text.split()[:2]]
    if words and words[0][:1].isupper() and words[0].lower() not in _PRONOUN_OPENERS:
        if len(words) > 1 and words[1][:1].isupper():
            return f"{words[0]} {words[1]}"
        return words[0]
    return FALLBACK_BUSINESS_NAME


def infer_sub_type(
    site_type: str,
    description: str,
    *,
    keywords: Mapping[str, Sequence[str]] = DEFAULT_SUB_TYPE_KEYWORDS,
) -> str:
    lowered = (description or "").lower()
    for sub_type, terms in keywords.items():
        if any(term in lowered for term in terms):
            return sub_type
    return site_type


def _coerce_axis(value: Any) -> tuple[float, bool]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return NEUTRAL_AXIS_VALUE, True
    try:
        number = float(value)
    except OverflowError:
        return (1.0 if value > 0 else 0.0), True
    if math.isnan(number):
        return NEUTRAL_AXIS_VALUE, True
    clamped = min(1.0, max(0.0, number))
    return clamped, clamped != number


def normalize_personality(vector: Sequence[Any] | None) -> list[float]:
    """Return exactly six axis values in [0, 1].

    Missing axes become 0.5, extra axes are dropped, non-numeric entries become 0.5
    and out-of-range values are clamped. One warning is logged when anything changed.
    """
    raw = list(vector or [])
    normalized: list[float] = []
    coerced = len(raw) != len(PERSONALITY_AXES)
    for value in raw[: len(PERSONALITY_AXES)]:
        axis, changed = _coerce_axis(value)
        normalized.append(axis)
        coerced = coerced or changed
    normalized.extend([NEUTRAL_AXIS_VALUE] * (len(PERSONALITY_AXES) - len(normalized)))

    if coerced:
        logger.warning(
            "Personality vector normalised",
            extra={"original_length": len(raw), "normalized": normalized},
        )
    return normalized


__all__ = [
    "PERSONALITY_AXES",
    "NEUTRAL_AXIS_VALUE",
    "FALLBACK_BUSINESS_NAME",
    "extract_business_name",
    "infer_sub_type",
    "normalize_personality",
]
