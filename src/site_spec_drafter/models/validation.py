from __future__ import annotations

from typing import Literal

from pydantic import Field

from .spec import SiteIntentDocument, SpecModel


class ValidationWarning(SpecModel):
    severity: Literal["error", "warning"]
    component_ref: str | None = None
    field: str | None = None
    message: str
    suggestion: str | None = None


class ValidationResult(SpecModel):
    warnings: list[ValidationWarning] = Field(default_factory=list)
    sub_type: str

    @property
    def errors(self) -> list[ValidationWarning]:
        return [warning for warning in self.warnings if warning.severity == "error"]


class AutoFix(SpecModel):
    component_ref: str
    field: str
    original: str
    replacement: str
    rule: str


class FixResult(SpecModel):
    spec: SiteIntentDocument
    fixes: list[AutoFix] = Field(default_factory=list)
    sub_type: str


__all__ = ["ValidationWarning", "ValidationResult", "AutoFix", "FixResult"]
