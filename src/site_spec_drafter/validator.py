from __future__ import annotations

import logging
from typing import Any, Iterator

from .intake import infer_sub_type
from .models.intake import SpecContext
from .models.spec import ComponentPlacement, SiteIntentDocument
from .models.validation import ValidationResult, ValidationWarning
from .vocabulary import VocabularyCatalog, default_vocabulary

logger = logging.getLogger(__name__)

NAME_BEARING_CATEGORIES = frozenset({"nav", "footer"})
NAME_FIELD = "logoText"


def collect_strings(value: Any) -> Iterator[str]:
    """Yield every string nested anywhere inside ``value``."""
    if isinstance(value, str):
        yield value
    elif isinstance(value, dict):
        for item in value.values():
            yield from collect_strings(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from collect_strings(item)


def _placement_text(placement: ComponentPlacement) -> str:
    return " ".join(collect_strings(placement.content)).lower()


def validate_spec_content(
    spec: SiteIntentDocument,
    context: SpecContext,
    *,
    vocabulary: VocabularyCatalog | None = None,
) -> ValidationResult:
    """Check a finished document against the vocabulary rules for its sub-type.

    Every rule runs; findings are advisory and nothing here raises.
    """
    vocabulary = vocabulary or default_vocabulary()
    sub_type = infer_sub_type(context.site_type, context.description, keywords=vocabulary.sub_type_keywords)
    placements = list(spec.iter_placements())
    texts = [(placement.ref, _placement_text(placement)) for placement in placements]
    joined = " ".join(text for _, text in texts)

    warnings: list[ValidationWarning] = []
    warnings.extend(_check_generic_phrases(spec, joined, sub_type, vocabulary))
    warnings.extend(_check_business_name(spec, placements))
    warnings.extend(_check_blacklist(joined, texts, sub_type, vocabulary))
    warnings.extend(_check_whitelist(joined, sub_type, vocabulary))
    warnings.extend(_check_stat_types(placements))

    logger.debug(
        "Validated site spec",
        extra={"session_id": spec.session_id, "sub_type": sub_type, "warning_count": len(warnings)},
    )
    return ValidationResult(warnings=warnings, sub_type=sub_type)


def _check_generic_phrases(
    spec: SiteIntentDocument, joined: str, sub_type: str, vocabulary: VocabularyCatalog
) -> Iterator[ValidationWarning]:
    for generic in vocabulary.generic_phrases:
        if sub_type in generic.exempt_sub_types:
            continue
        if generic.phrase.lower() in joined:
            yield ValidationWarning(
                severity="warning",
                message=f'Generic placeholder detected: "{generic.phrase}"',
                suggestion=f"Replace with content specific to {spec.business_name} / {sub_type}",
            )


def _check_business_name(
    spec: SiteIntentDocument, placements: list[ComponentPlacement]
) -> Iterator[ValidationWarning]:
    name = spec.business_name.lower()
    for placement in placements:
        if placement.category not in NAME_BEARING_CATEGORIES:
            continue
        value = placement.content.get(NAME_FIELD)
        if isinstance(value, str) and name in value.lower():
            return
    yield ValidationWarning(
        severity="error",
        field=NAME_FIELD,
        message=f'Business name "{spec.business_name}" not found in nav or footer {NAME_FIELD}',
        suggestion=f'Set {NAME_FIELD} to "{spec.business_name}" in the nav and footer blocks',
    )


def _check_blacklist(
    joined: str, texts: list[tuple[str, str]], sub_type: str, vocabulary: VocabularyCatalog
) -> Iterator[ValidationWarning]:
    for term in vocabulary.blacklist.get(sub_type, ()):
        needle = term.lower()
        if needle not in joined:
            continue
        component_ref = next((ref for ref, text in texts if needle in text), None)
        yield ValidationWarning(
            severity="warning",
            component_ref=component_ref,
            message=f'"{term}" is inappropriate vocabulary for a {sub_type} site',
            suggestion=f"Replace with {sub_type}-specific terminology",
        )


def _check_whitelist(joined: str, sub_type: str, vocabulary: VocabularyCatalog) -> Iterator[ValidationWarning]:
    whitelist = vocabulary.whitelist.get(sub_type)
    if not whitelist or any(term.lower() in joined for term in whitelist):
        return
    expected = ", ".join(whitelist[:5])
    yield ValidationWarning(
        severity="warning",
        message=f"No {sub_type}-specific vocabulary found in content (expected at least one of: {expected}, ...)",
        suggestion=f"Add industry-specific language for {sub_type}",
    )


def _check_stat_types(placements: list[ComponentPlacement]) -> Iterator[ValidationWarning]:
    for placement in placements:
        if placement.component_id != "content-stats":
            continue
        stats = placement.content.get("stats")
        if not isinstance(stats, list):
            continue
        for index, stat in enumerate(stats):
            if isinstance(stat, dict) and isinstance(stat.get("value"), str):
                yield ValidationWarning(
                    severity="error",
                    component_ref=placement.ref,
                    field=f"stats[{index}].value",
                    message=f'content-stats value should be a number, got string: "{stat["value"]}"',
                    suggestion="Convert value to a numeric type",
                )


__all__ = ["validate_spec_content", "collect_strings", "NAME_BEARING_CATEGORIES", "NAME_FIELD"]
