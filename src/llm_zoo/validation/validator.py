"""Run the entry rules over single entries and whole provider tables."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Callable

from llm_zoo.errors import ZooError
from llm_zoo.types.entry import CatalogEntry
from llm_zoo.validation.diagnostic import Diagnostic, Severity
from llm_zoo.validation.rules import ALL_RULES

logger = logging.getLogger(__name__)

RuleFunc = Callable[[CatalogEntry], list[Diagnostic]]


class ValidationError(ZooError):
    """An entry (or table) has ERROR findings.

    ``diagnostics`` holds only the errors; advisory findings are dropped.
    """

    def __init__(self, diagnostics: Iterable[Diagnostic]) -> None:
        self.diagnostics = [d for d in diagnostics if d.is_error]
        detail = "; ".join(str(d) for d in self.diagnostics)
        super().__init__(f"{len(self.diagnostics)} catalog error(s): {detail}")


def _rules(extra_rules: list[RuleFunc] | None) -> list[RuleFunc]:
    return [*ALL_RULES, *(extra_rules or ())]


def validate(
    entry: CatalogEntry, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Every finding for *entry*, in rule order. Never raises."""
    diagnostics = [d for rule in _rules(extra_rules) for d in rule(entry)]
    for d in diagnostics:
        logger.debug("%s (%s)", d, d.rule)
    return diagnostics


def validate_or_raise(
    entry: CatalogEntry, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Like :func:`validate`, but ERROR findings raise :class:`ValidationError`.

    On success the returned list holds warnings and info only.
    """
    diagnostics = validate(entry, extra_rules=extra_rules)
    if any(d.is_error for d in diagnostics):
        raise ValidationError(diagnostics)
    return diagnostics


def _key_mismatch(key: str, entry: CatalogEntry) -> Diagnostic:
    return Diagnostic(
        rule="check_key_matches_name",
        severity=Severity.ERROR,
        message=f"Table key '{key}' does not match entry name '{entry.name}'.",
        model=key,
        field="name",
        fix=f"Rename the key or set name='{key}'.",
    )


def validate_table(
    table: Mapping[str, CatalogEntry], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Findings for every entry of a provider table, plus key/name mismatches."""
    diagnostics: list[Diagnostic] = []
    for key, entry in table.items():
        if key != entry.name:
            diagnostics.append(_key_mismatch(key, entry))
        diagnostics.extend(validate(entry, extra_rules=extra_rules))
    return diagnostics
