from __future__ import annotations

import logging
from typing import Iterable, Mapping

from .dictionaries import DEFAULT_KEY

logger = logging.getLogger(__name__)

VOICE_TONES = ("warm", "polished", "direct")
DEFAULT_VOICE_TONE = "polished"
FALLBACK_CTA_TEXT = "Get Started"

# Tags that make sales-forward call-to-action copy feel pushy.
SALES_AVERSE_TAGS = frozenset({"salesy", "aggressive"})


HEADLINES_BY_VOICE: Mapping[str, Mapping[str, str]] = {
    "warm": {
        "restaurant": "Welcome to {name} — pull up a chair, stay a while",
        "spa": "{name} — your escape is waiting",
        "photography": "{name} — let's capture something beautiful",
        "business": "Hey, welcome to {name} — we're glad you're here",
        "portfolio": "{name} — Let's create something beautiful together",
        "ecommerce": "{name} — Find something you'll love",
        "booking": "{name} — Your next great experience starts here",
        "blog": "{name} — Pull up a chair, let's talk",
        "personal": "Hey, I'm {name} — nice to meet you",
        "educational": "{name} — Learn at your own pace, your own way",
        "nonprofit": "{name} — Together, we're making it happen",
        "event": "{name} — Come be part of something special",
        "landing": "{name} — We think you'll love this",
    },
    "polished": {
        "restaurant": "{name} — A Culinary Experience Beyond Compare",
        "spa": "{name} — Where Wellness Becomes an Art",
        "photography": "{name} — Timeless Images, Artfully Captured",
        "business": "{name} — Where Excellence Meets Precision",
        "portfolio": "{name} — Refined Creative Vision",
        "ecommerce": "{name} — A Curated Collection Awaits",
        "booking": "{name} — Reserve Your Premium Experience",
        "blog": "{name} — Perspectives Worth Your Attention",
        "personal": "{name} — Crafting Impact Through Expertise",
        "educational": "{name} — Elevating Skills, Transforming Careers",
        "nonprofit": "{name} — Measurable Impact, Meaningful Change",
        "event": "{name} — An Experience Designed to Inspire",
        "landing": "{name} — The Intelligent Choice",
    },
    "direct": {
        "restaurant": "{name}. Exceptional food. No compromise.",
        "spa": "{name}. Real relaxation. Real results.",
        "photography": "{name}. Your story. Beautifully told.",
        "business": "{name}. Better results, less hassle.",
        "portfolio": "{name}. Work that speaks for itself.",
        "ecommerce": "{name}. Quality products. Fair prices. Done.",
        "booking": "{name}. Book it. Show up. Love it.",
        "blog": "{name}. No fluff. Just substance.",
        "personal": "I'm {name}. Let's get to work.",
        "educational": "{name}. Learn what matters. Skip what doesn't.",
        "nonprofit": "{name}. Real impact. Real numbers.",
        "event": "{name}. Show up. Be changed.",
        "landing": "{name}. See why thousands switched.",
    },
}


CTAS_BY_VOICE: Mapping[str, Mapping[str, str]] = {
    "warm": {
        "contact": "Let's chat",
        "book": "Book your spot",
        "showcase": "Take a look around",
        "sell": "Shop now",
        "hire": "Let's work together",
        "attention": "See the work",
        "audience": "Come along",
        "convert": "Join us",
    },
    "polished": {
        "contact": "Schedule a Consultation",
        "book": "Reserve Your Experience",
        "showcase": "Explore Our Portfolio",
        "sell": "Shop the Collection",
        "hire": "Discuss Your Project",
        "attention": "View Selected Works",
        "audience": "Subscribe",
        "convert": "Get Started",
    },
    "direct": {
        "contact": "Get in touch",
        "book": "Book now",
        "showcase": "See the work",
        "sell": "Shop now",
        "hire": "Hire me",
        "attention": "See portfolio",
        "audience": "Follow",
        "convert": "Sign up",
    },
}


# Softer phrasings for sales-forward goals when the brand rejects a hard sell.
SOFT_CTAS_BY_VOICE: Mapping[str, Mapping[str, str]] = {
    "warm": {
        "book": "See what's available",
        "sell": "Browse the collection",
        "convert": "Come take a look",
    },
    "polished": {
        "book": "View Availability",
        "sell": "Explore the Collection",
        "convert": "Learn More",
    },
    "direct": {
        "book": "See times",
        "sell": "Browse",
        "convert": "Learn more",
    },
}


SUB_TYPE_CTAS: Mapping[str, Mapping[str, Mapping[str, str]]] = {
    "restaurant": {
        "warm": {"book": "Come dine with us", "contact": "Say hello"},
        "polished": {"book": "Reserve Your Table", "contact": "Make a Reservation"},
        "direct": {"book": "Book a table", "contact": "Reserve now"},
    },
    "spa": {
        "warm": {"book": "Treat yourself", "contact": "Start your journey"},
        "polished": {"book": "Book Your Treatment", "contact": "Schedule Your Session"},
        "direct": {"book": "Book a session", "contact": "Book now"},
    },
    "photography": {
        "warm": {"book": "Let's capture your story", "contact": "Let's talk about your shoot"},
        "polished": {"book": "Book Your Session", "contact": "Schedule a Consultation"},
        "direct": {"book": "Book a shoot", "contact": "Get in touch"},
    },
}


def resolve_voice_tone(voice_tone: str | None) -> str:
    tone = (voice_tone or "").strip().lower()
    if tone in VOICE_TONES:
        return tone
    logger.debug("Unknown voice tone, using default", extra={"voice_tone": voice_tone, "default": DEFAULT_VOICE_TONE})
    return DEFAULT_VOICE_TONE


def get_voice_keyed_headline(
    business_name: str,
    site_type: str,
    voice_tone: str | None,
    sub_type: str | None = None,
) -> str:
    headlines = HEADLINES_BY_VOICE[resolve_voice_tone(voice_tone)]
    template = next(
        (headlines[key] for key in (sub_type, site_type) if key and key in headlines),
        headlines[DEFAULT_KEY],
    )
    return template.format(name=business_name)


def get_voice_keyed_cta_text(
    goal: str,
    voice_tone: str | None,
    anti_references: Iterable[str] | None = None,
    sub_type: str | None = None,
) -> str:
    """Call-to-action label for ``goal`` in the given register.

    A sales-averse anti-reference swaps sales-forward goals to a softer phrasing
    before any sub-type override is consulted. Unknown goals use the tone's
    ``contact`` entry.
    """
    tone = resolve_voice_tone(voice_tone)
    tags = {tag.strip().lower() for tag in anti_references or () if isinstance(tag, str)}

    if tags & SALES_AVERSE_TAGS and goal in SOFT_CTAS_BY_VOICE[tone]:
        return SOFT_CTAS_BY_VOICE[tone][goal]

    override = SUB_TYPE_CTAS.get(sub_type or "", {}).get(tone, {})
    if goal in override:
        return override[goal]

    ctas = CTAS_BY_VOICE[tone]
    return ctas.get(goal) or ctas.get("contact") or FALLBACK_CTA_TEXT


__all__ = [
    "VOICE_TONES",
    "DEFAULT_VOICE_TONE",
    "SALES_AVERSE_TAGS",
    "HEADLINES_BY_VOICE",
    "CTAS_BY_VOICE",
    "SOFT_CTAS_BY_VOICE",
    "SUB_TYPE_CTAS",
    "resolve_voice_tone",
    "get_voice_keyed_headline",
    "get_voice_keyed_cta_text",
]
