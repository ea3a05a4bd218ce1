from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Sequence

from .composer import DEFAULT_PLACEMENT_RULES, ComposerContext, PlacementDecision, PlacementRule, compose_placements
from .dictionaries import ContentCatalog, IndustryContent, default_content_catalog
from .intake import extract_business_name, infer_sub_type, normalize_personality
from .models.intake import IntakeRecord
from .models.spec import ComponentPlacement, PageSpec, SiteIntentDocument, SpecMetadata
from .vocabulary import DEFAULT_SUB_TYPE_KEYWORDS
from .voice import DEFAULT_VOICE_TONE, VOICE_TONES, get_voice_keyed_cta_text, get_voice_keyed_headline

logger = logging.getLogger(__name__)

HERO_IMAGE_URL = "https://images.unsplash.com/photo-1497366216548-37526070297c?w=800&h=600&fit=crop"
DEFAULT_CTA_SUBHEADLINE = "Take the next step and see what we can do for you."
CONTACT_FORM_FIELDS: Sequence[Mapping[str, Any]] = (
    {"name": "name", "label": "Your Name", "type": "text", "required": True},
    {"name": "email", "label": "Email Address", "type": "email", "required": True},
    {"name": "message", "label": "Message", "type": "textarea", "required": True},
)
FOOTER_CONTACT_LINKS: Sequence[Mapping[str, str]] = (
    {"label": "hello@example.com", "href": "mailto:hello@example.com"},
    {"label": "(555) 123-4567", "href": "tel:+15551234567"},
)
SOCIAL_PLATFORMS: Sequence[str] = ("twitter", "instagram", "linkedin")

_EMPTY_PARAGRAPH = re.compile(r"<p>\s*</p>")
_SPEAKER_PREFIX = re.compile(r"^(?:i'?m|they'?re)\s+", re.IGNORECASE)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class AssemblyContext:
    """Everything resolved once per intake and shared by the content builders."""

    intake: IntakeRecord
    business_name: str
    sub_type: str
    industry: IndustryContent
    tagline: str
    cta_text: str
    nav_links: list[dict[str, Any]]
    now: datetime

    @property
    def site_type(self) -> str:
        return self.intake.site_type

    @property
    def narrative(self) -> Mapping[str, str]:
        return self.intake.narrative_prompts or {}


class SiteSpecGenerator:
    def __init__(
        self,
        *,
        catalog: ContentCatalog | None = None,
        rules: Sequence[PlacementRule] = DEFAULT_PLACEMENT_RULES,
        sub_type_keywords: Mapping[str, Sequence[str]] = DEFAULT_SUB_TYPE_KEYWORDS,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._catalog = catalog or default_content_catalog()
        self._rules = tuple(rules)
        self._sub_type_keywords = sub_type_keywords
        self._clock = clock
        self._builders: Mapping[str, Callable[[AssemblyContext, PlacementDecision], dict[str, Any]]] = {
            "nav": self._build_nav,
            "hero": self._build_hero,
            "about": self._build_about,
            "features": self._build_features,
            "stats": self._build_stats,
            "services": self._build_services,
            "team": self._build_team,
            "logos": self._build_logos,
            "testimonials": self._build_testimonials,
            "faq": self._build_faq,
            "cta": self._build_cta,
            "contact": self._build_contact,
            "footer": self._build_footer,
        }

    def generate(self, intake: IntakeRecord) -> SiteIntentDocument:
        personality = normalize_personality(intake.personality)
        context = self._build_context(intake)
        decisions = compose_placements(
            ComposerContext(site_type=intake.site_type, goal=intake.goal, personality=personality),
            self._rules,
        )
        components = [
            ComponentPlacement(
                component_id=decision.component_id,
                variant=decision.variant,
                order=decision.order,
                content=self._build_content(context, decision),
            )
            for decision in decisions
        ]

        document = SiteIntentDocument(
            session_id=intake.session_id,
            site_type=intake.site_type,
            conversion_goal=intake.goal,
            personality_vector=personality,
            business_name=context.business_name,
            tagline=context.tagline,
            pages=[
                PageSpec(slug="/", title="Home", purpose="Primary landing page", components=components)
            ],
            metadata=SpecMetadata(generated_at=int(context.now.timestamp() * 1000), method="deterministic"),
            emotional_goals=intake.emotional_goals,
            voice_profile=intake.voice_profile,
            brand_archetype=intake.brand_archetype,
            anti_references=intake.anti_references,
            narrative_prompts=intake.narrative_prompts,
        )
        logger.info(
            "Generated deterministic site spec",
            extra={
                "session_id": intake.session_id,
                "site_type": intake.site_type,
                "sub_type": context.sub_type,
                "placement_count": len(components),
            },
        )
        return document

    def _build_context(self, intake: IntakeRecord) -> AssemblyContext:
        business_name = intake.business_name.strip() or extract_business_name(intake.description)
        sub_type = infer_sub_type(intake.site_type, intake.description, keywords=self._sub_type_keywords)
        industry = self._catalog.industry(sub_type, intake.site_type)
        cta_text = get_voice_keyed_cta_text(
            intake.goal,
            intake.voice_profile or DEFAULT_VOICE_TONE,
            intake.anti_references,
            sub_type,
        )
        return AssemblyContext(
            intake=intake,
            business_name=business_name,
            sub_type=sub_type,
            industry=industry,
            tagline=self._catalog.tagline(industry, intake.goal),
            cta_text=cta_text,
            nav_links=self._catalog.nav_links_for(sub_type, intake.site_type),
            now=self._clock(),
        )

    def _build_content(self, context: AssemblyContext, decision: PlacementDecision) -> dict[str, Any]:
        builder = self._builders.get(decision.slot)
        if builder is None:
            logger.warning("No content builder for slot", extra={"slot": decision.slot})
            return {}
        return builder(context, decision)

    def _cta_link(self, context: AssemblyContext) -> dict[str, str]:
        return {"text": context.cta_text, "href": "#contact"}

    def _build_nav(self, context: AssemblyContext, decision: PlacementDecision) -> dict[str, Any]:
        return {
            "logoText": context.business_name,
            "links": [dict(link) for link in context.nav_links],
            "cta": self._cta_link(context),
        }

    def _build_hero(self, context: AssemblyContext, decision: PlacementDecision) -> dict[str, Any]:
        content: dict[str, Any] = {
            "headline": self._hero_headline(context),
            "subheadline": context.tagline,
            "ctaPrimary": self._cta_link(context),
            "ctaSecondary": {"text": "Learn More", "href": "#about"},
        }
        if decision.component_id == "hero-split":
            content["subheadline"] = context.intake.description[:200] or context.tagline
            content["image"] = {"src": HERO_IMAGE_URL, "alt": context.business_name}
        return content

    def _hero_headline(self, context: AssemblyContext) -> str:
        voice = (context.intake.voice_profile or "").strip().lower()
        if voice in VOICE_TONES:
            return get_voice_keyed_headline(context.business_name, context.site_type, voice, context.sub_type)
        return context.industry.headline(context.business_name)

    def _build_about(self, context: AssemblyContext, decision: PlacementDecision) -> dict[str, Any]:
        return {
            "id": "about",
            "eyebrow": self._catalog.section_copy("about_eyebrows", context.sub_type, context.site_type),
            "headline": f"Why Choose {context.business_name}",
            "body": self._about_body(context),
        }

    def _about_body(self, context: AssemblyContext) -> str:
        parts: list[str] = []
        description = context.intake.description.strip()
        if description:
            parts.append(f"<p>{description}</p>")

        come_because = context.narrative.get("come_because")
        after_feel = context.narrative.get("after_feel")
        if come_because:
            parts.append(f"<p>{come_because}</p>")
        if after_feel:
            parts.append(
                f"<p>When you leave {context.business_name}, you should feel {after_feel.lower()}.</p>"
            )
        if not come_because and not after_feel:
            boilerplate = _EMPTY_PARAGRAPH.sub("", context.industry.about_body(context.business_name))
            if boilerplate.strip():
                parts.append(boilerplate)
        return "".join(parts)

    def _build_features(self, context: AssemblyContext, decision: PlacementDecision) -> dict[str, Any]:
        keys = (context.sub_type, context.site_type)
        return {
            "id": "services",
            "subheadline": self._catalog.section_copy("services_eyebrows", *keys),
            "headline": self._catalog.section_copy("services_headlines", *keys),
            "features": [dict(feature) for feature in context.industry.features],
        }

    def _build_stats(self, context: AssemblyContext, decision: PlacementDecision) -> dict[str, Any]:
        return {
            "headline": "By the Numbers",
            "stats": self._catalog.stats_for(context.sub_type, context.site_type),
        }

    def _build_services(self, context: AssemblyContext, decision: PlacementDecision) -> dict[str, Any]:
        headline, subheadline = self._catalog.section_copy(
            "commerce_headlines", context.sub_type, context.site_type, name=context.business_name
        )
        return {
            "headline": headline,
            "subheadline": subheadline,
            "services": self._catalog.services_for(context.sub_type, context.site_type),
        }

    def _build_team(self, context: AssemblyContext, decision: PlacementDecision) -> dict[str, Any]:
        headline, subheadline = self._catalog.section_copy(
            "team_headlines", context.sub_type, context.site_type, name=context.business_name
        )
        return {
            "headline": headline,
            "subheadline": subheadline,
            "members": self._catalog.team_for(context.sub_type, context.site_type),
        }

    def _build_logos(self, context: AssemblyContext, decision: PlacementDecision) -> dict[str, Any]:
        return {
            "headline": "Recognized By" if context.site_type == "educational" else "Trusted By",
            "logos": self._catalog.trust_logos_for(context.site_type),
        }

    def _build_testimonials(self, context: AssemblyContext, decision: PlacementDecision) -> dict[str, Any]:
        keys = (context.sub_type, context.site_type)
        return {
            "eyebrow": self._catalog.section_copy("testimonial_eyebrows", *keys),
            "headline": self._catalog.section_copy("testimonial_headlines", *keys),
            "testimonials": [dict(testimonial) for testimonial in context.industry.testimonials],
        }

    def _build_faq(self, context: AssemblyContext, decision: PlacementDecision) -> dict[str, Any]:
        return {
            "headline": "Frequently Asked Questions",
            "subheadline": "Everything you need to know",
            "items": self._catalog.faq_for(context.sub_type, context.site_type, context.business_name),
        }

    def _build_cta(self, context: AssemblyContext, decision: PlacementDecision) -> dict[str, Any]:
        return {
            "headline": self._catalog.cta_headline(context.intake.goal, context.sub_type),
            "subheadline": self._cta_subheadline(context),
            "ctaPrimary": self._cta_link(context),
            "backgroundVariant": "primary",
        }

    def _cta_subheadline(self, context: AssemblyContext) -> str:
        frustrated_with = (context.narrative.get("frustrated_with") or "").strip()
        if not frustrated_with:
            return DEFAULT_CTA_SUBHEADLINE
        complaint = _SPEAKER_PREFIX.sub("", frustrated_with.lower())
        return f"Tired of {complaint}? We do things differently."

    def _build_contact(self, context: AssemblyContext, decision: PlacementDecision) -> dict[str, Any]:
        return {
            "id": "contact",
            "headline": self._catalog.section_copy("contact_headlines", context.sub_type),
            "subheadline": self._catalog.section_copy(
                "contact_subheadlines", context.sub_type, name=context.business_name
            ),
            "fields": [dict(field) for field in CONTACT_FORM_FIELDS],
            "submitText": "Send Message",
        }

    def _build_footer(self, context: AssemblyContext, decision: PlacementDecision) -> dict[str, Any]:
        return {
            "logoText": context.business_name,
            "tagline": context.tagline,
            "columns": [
                {"title": "Quick Links", "links": [dict(link) for link in context.nav_links]},
                {"title": "Contact", "links": [dict(link) for link in FOOTER_CONTACT_LINKS]},
            ],
            "socialLinks": [{"platform": platform, "url": "#"} for platform in SOCIAL_PLATFORMS],
            "copyright": f"{context.now.year} {context.business_name}. All rights reserved.",
        }


__all__ = ["SiteSpecGenerator", "AssemblyContext", "utc_now"]
