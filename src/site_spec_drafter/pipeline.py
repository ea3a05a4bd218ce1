from __future__ import annotations

import logging
from dataclasses import dataclass

from .auto_fix import fix_spec_content
from .generator import SiteSpecGenerator
from .models.intake import IntakeRecord, SpecContext
from .models.spec import SiteIntentDocument
from .models.validation import AutoFix, ValidationWarning
from .validator import validate_spec_content
from .vocabulary import VocabularyCatalog, default_vocabulary

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    spec: SiteIntentDocument
    original_spec: SiteIntentDocument
    warnings: list[ValidationWarning]
    fixes: list[AutoFix]
    sub_type: str

    def model_dump(self) -> dict[str, object]:
        return {
            "spec": self.spec.model_dump(by_alias=True, exclude_none=True),
            "originalSpec": self.original_spec.model_dump(by_alias=True, exclude_none=True),
            "warnings": [warning.model_dump(by_alias=True, exclude_none=True) for warning in self.warnings],
            "fixes": [fix.model_dump(by_alias=True) for fix in self.fixes],
            "subType": self.sub_type,
        }


class DeterministicPipeline:
    """Generate a document, validate it, and repair what the fix rules can."""

    def __init__(
        self,
        *,
        generator: SiteSpecGenerator | None = None,
        vocabulary: VocabularyCatalog | None = None,
        auto_fix: bool = True,
    ) -> None:
        self._generator = generator or SiteSpecGenerator()
        self._vocabulary = vocabulary or default_vocabulary()
        self._auto_fix = auto_fix

    def run(self, intake: IntakeRecord) -> PipelineResult:
        generated = self._generator.generate(intake)
        context = SpecContext(description=intake.description, site_type=intake.site_type)

        validation = validate_spec_content(generated, context, vocabulary=self._vocabulary)
        if validation.warnings:
            logger.warning(
                "Site spec validation produced warnings",
                extra={
                    "session_id": intake.session_id,
                    "sub_type": validation.sub_type,
                    "warnings": [warning.message for warning in validation.warnings],
                },
            )

        fix_result = fix_spec_content(generated, context, vocabulary=self._vocabulary)
        spec = generated
        if fix_result.fixes and self._auto_fix:
            spec = fix_result.spec
        elif fix_result.fixes:
            logger.info(
                "Auto-fix disabled; returning unfixed spec",
                extra={"session_id": intake.session_id, "fix_count": len(fix_result.fixes)},
            )

        return PipelineResult(
            spec=spec,
            original_spec=generated,
            warnings=list(validation.warnings),
            fixes=list(fix_result.fixes),
            sub_type=validation.sub_type,
        )


__all__ = ["DeterministicPipeline", "PipelineResult"]
