"""Record validation for catalog entries."""
from __future__ import annotations

from llm_zoo.validation.diagnostic import Diagnostic, Severity
from llm_zoo.validation.validator import (
    RuleFunc,
    ValidationError,
    validate,
    validate_or_raise,
    validate_table,
)

__all__ = [
    "Diagnostic",
    "RuleFunc",
    "Severity",
    "ValidationError",
    "validate",
    "validate_or_raise",
    "validate_table",
]
