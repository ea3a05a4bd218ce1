from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field

from .spec import SpecModel


class IntakeRecord(SpecModel):
    session_id: str
    site_type: str
    goal: str
    business_name: str = ""
    description: str = ""
    personality: list[Any] = Field(
        default_factory=list,
        description="Six axes in [0,1]; anything else is normalised during generation",
    )
    emotional_goals: list[str] | None = None
    voice_profile: str | None = None
    brand_archetype: str | None = None
    anti_references: list[str] | None = None
    narrative_prompts: dict[str, str] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "sessionId": "sess_2025_001",
                "siteType": "booking",
                "goal": "book",
                "businessName": "Luxe Cuts",
                "description": "A boutique hair salon in Brooklyn specializing in precision cuts",
                "personality": [0.5, 0.5, 0.5, 0.8, 0.5, 0.5],
                "voiceProfile": "warm",
                "antiReferences": ["salesy"],
                "narrativePrompts": {"after_feel": "Confident and refreshed"},
            }
        }
    )


class SpecContext(SpecModel):
    """The slice of intake that validation and auto-fix need."""

    description: str = ""
    site_type: str


__all__ = ["IntakeRecord", "SpecContext"]
