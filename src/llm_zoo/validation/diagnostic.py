"""Findings reported by the catalog entry rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Severity(StrEnum):
    """How much a finding matters.

    ERROR entries must not be loaded; WARNING and INFO are advisory.
    """

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """One rule finding about one catalog entry.

    Attributes:
        rule: Name of the rule function that reported it.
        severity: ERROR, WARNING or INFO.
        message: What is wrong, with the offending value.
        model: Short key of the entry, when it has one.
        field: ``CatalogEntry`` or ``Capabilities`` field at fault.
        fix: How to correct the data, when obvious.
    """

    rule: str
    severity: Severity
    message: str
    model: str | None = None
    field: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def location(self) -> str:
        """``model.field``, ``model``, ``.field`` or empty."""
        if self.field:
            return f"{self.model or ''}.{self.field}"
        return self.model or ""

    def __str__(self) -> str:
        where = f" {self.location}" if self.location else ""
        return f"{self.severity}{where}: {self.message}"
