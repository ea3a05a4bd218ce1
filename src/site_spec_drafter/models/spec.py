from __future__ import annotations

from typing import Any, Iterator, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SpecModel(BaseModel):
    """Base for every document model: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ComponentPlacement(SpecModel):
    component_id: str
    variant: str
    order: int
    content: dict[str, Any] = Field(default_factory=dict)
    visual_config: dict[str, Any] | None = None

    @property
    def ref(self) -> str:
        return f"{self.component_id}[{self.order}]"

    @property
    def category(self) -> str:
        # "nav-sticky" -> "nav", "footer-standard" -> "footer"
        return self.component_id.split("-", 1)[0]


class PageSpec(SpecModel):
    slug: str
    title: str
    purpose: str
    components: list[ComponentPlacement] = Field(default_factory=list)


class SpecMetadata(SpecModel):
    generated_at: int = Field(description="Epoch milliseconds")
    method: Literal["ai", "deterministic"] = "deterministic"


class SiteIntentDocument(SpecModel):
    session_id: str
    site_type: str
    conversion_goal: str
    personality_vector: list[float]
    business_name: str
    tagline: str
    pages: list[PageSpec] = Field(default_factory=list)
    metadata: SpecMetadata
    emotional_goals: list[str] | None = None
    voice_profile: str | None = None
    brand_archetype: str | None = None
    anti_references: list[str] | None = None
    narrative_prompts: dict[str, str] | None = None

    def iter_placements(self) -> Iterator[ComponentPlacement]:
        for page in self.pages:
            yield from page.components


__all__ = [
    "SpecModel",
    "ComponentPlacement",
    "PageSpec",
    "SpecMetadata",
    "SiteIntentDocument",
]
