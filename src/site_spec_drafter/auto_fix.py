from __future__ import annotations

import logging
import math
import re
from typing import Any, Sequence

from .intake import infer_sub_type
from .models.intake import SpecContext
from .models.spec import ComponentPlacement, SiteIntentDocument
from .models.validation import AutoFix, FixResult
from .validator import NAME_BEARING_CATEGORIES, NAME_FIELD
from .vocabulary import ReplacementRule, VocabularyCatalog, default_vocabulary

logger = logging.getLogger(__name__)

_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_NUMERIC_RUN = re.compile(r"[+-]?[\d.,_]*")
# A comma counts as a thousands separator only before exactly three digits.
_NON_GROUPING_COMMA = re.compile(r",(?!\d{3}(?!\d))")


def parse_float_prefix(text: str) -> int | float | None:
    """Read the leading number of ``text``, ignoring digit separators and trailing units.

    ``"1,200+"`` -> 1200, ``" 4.9 "`` -> 4.9, ``"98%"`` -> 98, ``"n/a"`` -> None.
    A comma that cannot be a thousands separator (``"4,9"``) leaves the value unparsed.
    """
    stripped = text.strip()
    numeric_run = _NUMERIC_RUN.match(stripped).group().rstrip(",")
    if _NON_GROUPING_COMMA.search(numeric_run):
        return None
    cleaned = stripped.replace(",", "").replace("_", "")
    match = _NUMBER_PREFIX.match(cleaned)
    if not match:
        return None
    number = float(match.group())
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def apply_rules(
    value: Any,
    rules: Sequence[ReplacementRule],
    *,
    component_ref: str,
    fixes: list[AutoFix],
    path: str = "",
    skip_fields: frozenset[str] = frozenset(),
) -> Any:
    """Rewrite every string inside ``value`` with ``rules``, recording each effective change.

    Scalars, lists and nested mappings are walked the same way; ``path`` tracks the
    field name (``members[1].role``). Returns the rewritten value and leaves the
    input untouched.
    """
    if isinstance(value, str):
        current = value
        for rule in rules:
            replaced = rule.apply(current)
            if replaced != current:
                fixes.append(
                    AutoFix(
                        component_ref=component_ref,
                        field=path,
                        original=current,
                        replacement=replaced,
                        rule=rule.rule,
                    )
                )
                current = replaced
        return current
    if isinstance(value, dict):
        return {
            key: item
            if _join(path, key) in skip_fields
            else apply_rules(
                item,
                rules,
                component_ref=component_ref,
                fixes=fixes,
                path=_join(path, key),
                skip_fields=skip_fields,
            )
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [
            apply_rules(
                item,
                rules,
                component_ref=component_ref,
                fixes=fixes,
                path=f"{path}[{index}]",
                skip_fields=skip_fields,
            )
            for index, item in enumerate(value)
        ]
    return value


def fix_spec_content(
    spec: SiteIntentDocument,
    context: SpecContext,
    *,
    vocabulary: VocabularyCatalog | None = None,
) -> FixResult:
    """Return a corrected deep copy of ``spec`` and the ledger of changes.

    Fix families run per placement in a fixed order: business name, headline
    swaps, team role swaps, vocabulary swaps, then stat value coercion. The
    input document is never modified.
    """
    vocabulary = vocabulary or default_vocabulary()
    sub_type = infer_sub_type(context.site_type, context.description, keywords=vocabulary.sub_type_keywords)
    headline_rules = tuple(vocabulary.headline_replacements.get(sub_type, ()))
    role_rules = tuple(vocabulary.role_replacements.get(sub_type, ()))
    vocab_rules = tuple(vocabulary.vocab_replacements.get(sub_type, ()))

    fixed = spec.model_copy(deep=True)
    fixes: list[AutoFix] = []
    for placement in fixed.iter_placements():
        name_bearing = placement.category in NAME_BEARING_CATEGORIES
        skip_fields = frozenset({NAME_FIELD}) if name_bearing else frozenset()

        if name_bearing:
            _fix_business_name(placement, fixed.business_name, fixes)
        if headline_rules:
            placement.content = apply_rules(
                placement.content,
                headline_rules,
                component_ref=placement.ref,
                fixes=fixes,
                skip_fields=skip_fields,
            )
        if role_rules and placement.component_id == "team-grid":
            _fix_team_roles(placement, role_rules, fixes)
        if vocab_rules:
            placement.content = apply_rules(
                placement.content,
                vocab_rules,
                component_ref=placement.ref,
                fixes=fixes,
                skip_fields=skip_fields,
            )
        if placement.component_id == "content-stats":
            _coerce_stat_values(placement, fixes)

    if fixes:
        logger.info(
            "Auto-fixed site spec content",
            extra={
                "session_id": spec.session_id,
                "sub_type": sub_type,
                "fix_count": len(fixes),
                "fixes": [f"{fix.rule}: {fix.original} -> {fix.replacement}" for fix in fixes],
            },
        )
    return FixResult(spec=fixed, fixes=fixes, sub_type=sub_type)


def _fix_business_name(placement: ComponentPlacement, business_name: str, fixes: list[AutoFix]) -> None:
    if not business_name:
        return
    current = placement.content.get(NAME_FIELD)
    if isinstance(current, str) and business_name.lower() in current.lower():
        return
    fixes.append(
        AutoFix(
            component_ref=placement.ref,
            field=NAME_FIELD,
            original=current if isinstance(current, str) else "",
            replacement=business_name,
            rule="business-name",
        )
    )
    placement.content[NAME_FIELD] = business_name


def _fix_team_roles(
    placement: ComponentPlacement, rules: Sequence[ReplacementRule], fixes: list[AutoFix]
) -> None:
    members = placement.content.get("members")
    if not isinstance(members, list):
        return
    for index, member in enumerate(members):
        if isinstance(member, dict) and isinstance(member.get("role"), str):
            member["role"] = apply_rules(
                member["role"],
                rules,
                component_ref=placement.ref,
                fixes=fixes,
                path=f"members[{index}].role",
            )


def _coerce_stat_values(placement: ComponentPlacement, fixes: list[AutoFix]) -> None:
    stats = placement.content.get("stats")
    if not isinstance(stats, list):
        return
    for index, stat in enumerate(stats):
        if not isinstance(stat, dict) or not isinstance(stat.get("value"), str):
            continue
        number = parse_float_prefix(stat["value"])
        if number is None:
            continue
        fixes.append(
            AutoFix(
                component_ref=placement.ref,
                field=f"stats[{index}].value",
                original=stat["value"],
                replacement=str(number),
                rule="type-coerce",
            )
        )
        stat["value"] = number


__all__ = ["fix_spec_content", "apply_rules", "parse_float_prefix"]
