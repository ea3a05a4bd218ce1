from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Mapping, Sequence


@dataclass(frozen=True)
class ReplacementRule:
    pattern: re.Pattern[str]
    replacement: str
    rule: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(lambda _match: self.replacement, text)


@dataclass(frozen=True)
class GenericPhrase:
    phrase: str
    exempt_sub_types: frozenset[str] = frozenset()


def _rules(rule: str, *pairs: tuple[str, str]) -> tuple[ReplacementRule, ...]:
    return tuple(
        ReplacementRule(pattern=re.compile(rf"\b{pattern}\b", re.IGNORECASE), replacement=replacement, rule=rule)
        for pattern, replacement in pairs
    )


# Most specific sub-type first: the first table with a keyword hit wins.
DEFAULT_SUB_TYPE_KEYWORDS: Mapping[str, Sequence[str]] = {
    "restaurant": (
        "restaurant", "dining", "menu", "chef", "cuisine", "food", "bistro", "cafe",
        "eatery", "kitchen", "grill", "diner", "steakhouse", "sushi", "pizzeria",
        "trattoria", "brasserie", "gastropub", "fine dining", "brunch", "catering",
        "taqueria", "bakery", "patisserie",
    ),
    "spa": (
        "spa", "massage", "wellness", "treatment", "facial", "skincare", "relaxation",
        "aromatherapy", "body wrap", "hot stone", "reflexology", "detox", "sauna",
        "steam room", "hydrotherapy", "day spa", "med spa",
    ),
    "photography": (
        "photo", "photographer", "photography", "shoot", "portrait", "wedding photo",
        "headshot", "studio photo", "editorial photo", "newborn photo", "family photo",
        "event photo", "commercial photo",
    ),
}


DEFAULT_VOCAB_BLACKLIST: Mapping[str, Sequence[str]] = {
    "restaurant": (
        "appointment", "session", "treatment", "ceo", "creative director",
        "consultation", "therapist", "esthetician",
    ),
    "spa": (
        "reservation", "table for", "food menu", "entrée", "appetizer", "chef",
        "sous chef", "sommelier",
    ),
    "photography": (
        "appointment", "treatment", "therapist", "reservation", "table", "entrée",
        "esthetician",
    ),
}


DEFAULT_VOCAB_WHITELIST: Mapping[str, Sequence[str]] = {
    "restaurant": (
        "menu", "dine", "dining", "table", "reservation", "chef", "cuisine", "dish",
        "course", "plate", "kitchen", "flavor", "taste", "entrée", "appetizer", "dessert",
    ),
    "spa": (
        "treatment", "wellness", "relax", "rejuvenate", "massage", "facial", "therapy",
        "sanctuary", "soothe", "calm", "skin", "body",
    ),
    "photography": (
        "photo", "portrait", "shoot", "session", "capture", "lens", "frame", "gallery",
        "portfolio", "image", "moment",
    ),
}


DEFAULT_GENERIC_PHRASES: Sequence[GenericPhrase] = (
    GenericPhrase("building something remarkable together"),
    GenericPhrase("services & treatments", frozenset({"spa"})),
    GenericPhrase("schedule a consultation", frozenset({"business"})),
    GenericPhrase("welcome to our"),
    GenericPhrase("lorem ipsum"),
    GenericPhrase("your trusted partner"),
    GenericPhrase("we are committed to excellence"),
)


DEFAULT_HEADLINE_REPLACEMENTS: Mapping[str, Sequence[ReplacementRule]] = {
    "restaurant": _rules(
        "headline-swap",
        ("Services & Treatments", "Our Menu"),
        ("Our Services", "Our Menu"),
        ("Schedule a Consultation", "Reserve a Table"),
        ("Book an Appointment", "Reserve a Table"),
        ("Book Your Appointment", "Reserve Your Table"),
    ),
    "spa": _rules(
        "headline-swap",
        ("Our Menu", "Our Treatments"),
        ("Reserve a Table", "Book a Treatment"),
    ),
    "photography": _rules(
        "headline-swap",
        ("Services & Treatments", "Our Work"),
        ("Our Services", "Our Portfolio"),
        ("Schedule a Consultation", "Book a Session"),
        ("Book an Appointment", "Book a Session"),
    ),
}


DEFAULT_ROLE_REPLACEMENTS: Mapping[str, Sequence[ReplacementRule]] = {
    "restaurant": _rules(
        "role-swap",
        ("Founder & CEO", "Executive Chef"),
        ("CEO", "Executive Chef"),
        ("Creative Director", "Sous Chef"),
        ("CTO", "Head Sommelier"),
        ("COO", "Restaurant Manager"),
    ),
    "spa": _rules(
        "role-swap",
        ("Founder & CEO", "Lead Therapist"),
        ("CEO", "Wellness Director"),
        ("Creative Director", "Senior Esthetician"),
    ),
    "photography": _rules(
        "role-swap",
        ("Founder & CEO", "Lead Photographer"),
        ("CEO", "Lead Photographer"),
        ("Creative Director", "Studio Director"),
    ),
}


DEFAULT_VOCAB_REPLACEMENTS: Mapping[str, Sequence[ReplacementRule]] = {
    "restaurant": _rules(
        "vocab-swap",
        ("appointment", "reservation"),
        ("session", "dining experience"),
        ("treatment", "course"),
        ("consultation", "reservation"),
        ("therapist", "chef"),
        ("esthetician", "sommelier"),
    ),
    "spa": _rules(
        "vocab-swap",
        ("reservation", "appointment"),
        ("table for", "session for"),
        ("food menu", "treatment menu"),
        ("entrée", "treatment"),
        ("appetizer", "add-on"),
        ("sous chef", "lead therapist"),
        ("chef", "therapist"),
        ("sommelier", "wellness advisor"),
    ),
    "photography": _rules(
        "vocab-swap",
        ("appointment", "session"),
        ("treatment", "shoot"),
        ("therapist", "photographer"),
        ("reservation", "booking"),
        ("entrée", "package"),
        ("esthetician", "photo editor"),
    ),
}


@dataclass(frozen=True)
class VocabularyCatalog:
    sub_type_keywords: Mapping[str, Sequence[str]] = field(default_factory=lambda: DEFAULT_SUB_TYPE_KEYWORDS)
    blacklist: Mapping[str, Sequence[str]] = field(default_factory=lambda: DEFAULT_VOCAB_BLACKLIST)
    whitelist: Mapping[str, Sequence[str]] = field(default_factory=lambda: DEFAULT_VOCAB_WHITELIST)
    generic_phrases: Sequence[GenericPhrase] = DEFAULT_GENERIC_PHRASES
    headline_replacements: Mapping[str, Sequence[ReplacementRule]] = field(
        default_factory=lambda: DEFAULT_HEADLINE_REPLACEMENTS
    )
    role_replacements: Mapping[str, Sequence[ReplacementRule]] = field(
        default_factory=lambda: DEFAULT_ROLE_REPLACEMENTS
    )
    vocab_replacements: Mapping[str, Sequence[ReplacementRule]] = field(
        default_factory=lambda: DEFAULT_VOCAB_REPLACEMENTS
    )


def default_vocabulary() -> VocabularyCatalog:
    return VocabularyCatalog()


__all__ = [
    "ReplacementRule",
    "GenericPhrase",
    "VocabularyCatalog",
    "DEFAULT_SUB_TYPE_KEYWORDS",
    "DEFAULT_VOCAB_BLACKLIST",
    "DEFAULT_VOCAB_WHITELIST",
    "DEFAULT_GENERIC_PHRASES",
    "DEFAULT_HEADLINE_REPLACEMENTS",
    "DEFAULT_ROLE_REPLACEMENTS",
    "DEFAULT_VOCAB_REPLACEMENTS",
    "default_vocabulary",
]
