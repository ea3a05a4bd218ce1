from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from .intake import NEUTRAL_AXIS_VALUE

# Personality axes, in vector order.
MINIMAL_RICH = 0
PLAYFUL_SERIOUS = 1
WARM_COOL = 2
LIGHT_BOLD = 3
CLASSIC_MODERN = 4
CALM_DYNAMIC = 5

DEFAULT_THRESHOLD = 0.5


@dataclass(frozen=True)
class ComposerContext:
    site_type: str
    goal: str
    personality: Sequence[float]

    def axis(self, index: int) -> float:
        if index < len(self.personality):
            return self.personality[index]
        return NEUTRAL_AXIS_VALUE


Selector = Callable[[ComposerContext], str]
Predicate = Callable[[ComposerContext], bool]


def fixed(value: str) -> Selector:
    return lambda ctx: value


def by_axis(axis: int, low: str, high: str, *, threshold: float = DEFAULT_THRESHOLD) -> Selector:
    """Pick ``high`` only when the axis is strictly above ``threshold``; ties go ``low``."""
    return lambda ctx: high if ctx.axis(axis) > threshold else low


def always(ctx: ComposerContext) -> bool:
    return True


def site_type_in(*site_types: str) -> Predicate:
    allowed = frozenset(site_types)
    return lambda ctx: ctx.site_type in allowed


def goal_in(*goals: str) -> Predicate:
    allowed = frozenset(goals)
    return lambda ctx: ctx.goal in allowed


@dataclass(frozen=True)
class PlacementDecision:
    slot: str
    component_id: str
    variant: str
    order: int


@dataclass(frozen=True)
class PlacementRule:
    slot: str
    component: Selector
    variant: Selector
    predicate: Predicate = always

    def evaluate(self, context: ComposerContext, order: int) -> PlacementDecision | None:
        if not self.predicate(context):
            return None
        return PlacementDecision(
            slot=self.slot,
            component_id=self.component(context),
            variant=self.variant(context),
            order=order,
        )


_hero_component = by_axis(WARM_COOL, "hero-centered", "hero-split")
_hero_background = by_axis(MINIMAL_RICH, "gradient-bg", "with-bg-image")
_hero_image_side = by_axis(CLASSIC_MODERN, "image-left", "image-right")


def _hero_variant(ctx: ComposerContext) -> str:
    if _hero_component(ctx) == "hero-centered":
        return _hero_background(ctx)
    return _hero_image_side(ctx)


DEFAULT_PLACEMENT_RULES: Sequence[PlacementRule] = (
    PlacementRule(slot="nav", component=fixed("nav-sticky"), variant=fixed("transparent")),
    PlacementRule(slot="hero", component=_hero_component, variant=_hero_variant),
    PlacementRule(slot="about", component=fixed("content-text"), variant=fixed("centered")),
    PlacementRule(slot="features", component=fixed("content-features"), variant=fixed("icon-cards")),
    PlacementRule(
        slot="stats",
        component=fixed("content-stats"),
        variant=by_axis(LIGHT_BOLD, "cards", "animated-counter", threshold=0.6),
        predicate=site_type_in("business", "booking", "ecommerce", "educational", "nonprofit"),
    ),
    PlacementRule(
        slot="services",
        component=fixed("commerce-services"),
        variant=by_axis(LIGHT_BOLD, "list", "card-grid"),
        predicate=site_type_in("booking", "ecommerce"),
    ),
    PlacementRule(
        slot="team",
        component=fixed("team-grid"),
        variant=by_axis(MINIMAL_RICH, "minimal", "cards"),
        predicate=site_type_in("business", "booking", "personal"),
    ),
    PlacementRule(
        slot="logos",
        component=fixed("content-logos"),
        variant=by_axis(CLASSIC_MODERN, "grid", "scroll"),
        predicate=site_type_in("business", "ecommerce", "educational", "landing"),
    ),
    PlacementRule(slot="testimonials", component=fixed("proof-testimonials"), variant=fixed("carousel")),
    PlacementRule(
        slot="faq",
        component=fixed("content-accordion"),
        variant=fixed("single-open"),
        predicate=site_type_in("booking", "ecommerce", "educational", "event", "nonprofit"),
    ),
    PlacementRule(
        slot="cta",
        component=fixed("cta-banner"),
        variant=by_axis(LIGHT_BOLD, "contained", "full-width"),
    ),
    PlacementRule(
        slot="contact",
        component=fixed("form-contact"),
        variant=fixed("simple"),
        predicate=goal_in("contact", "book", "convert", "hire"),
    ),
    PlacementRule(slot="footer", component=fixed("footer-standard"), variant=fixed("multi-column")),
)


def compose_placements(
    context: ComposerContext,
    rules: Sequence[PlacementRule] = DEFAULT_PLACEMENT_RULES,
) -> list[PlacementDecision]:
    """Walk the build sequence, keeping the rules whose predicate holds.

    Orders are assigned from a single counter so they run 0..n-1 with no gaps.
    """
    decisions: list[PlacementDecision] = []
    for rule in rules:
        decision = rule.evaluate(context, order=len(decisions))
        if decision is not None:
            decisions.append(decision)
    return decisions


__all__ = [
    "MINIMAL_RICH",
    "PLAYFUL_SERIOUS",
    "WARM_COOL",
    "LIGHT_BOLD",
    "CLASSIC_MODERN",
    "CALM_DYNAMIC",
    "ComposerContext",
    "PlacementDecision",
    "PlacementRule",
    "DEFAULT_PLACEMENT_RULES",
    "by_axis",
    "fixed",
    "always",
    "site_type_in",
    "goal_in",
    "compose_placements",
]
