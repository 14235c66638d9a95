"""Validation rules for catalog entries.

Each rule is a function taking a CatalogEntry and returning a list of
Diagnostic objects describing any issues found.  Rules only report; they
never rewrite the entry.
"""

from __future__ import annotations

from urllib.parse import urlparse

from llm_zoo.types.entry import CatalogEntry
from llm_zoo.types.enums import Provider, ReasoningEffort
from llm_zoo.validation.diagnostic import Diagnostic, Severity


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_name(entry: CatalogEntry) -> list[Diagnostic]:
    """Short key and API identifier must be non-empty."""
    diagnostics: list[Diagnostic] = []
    if not entry.name.strip():
        diagnostics.append(
            Diagnostic(
                rule="check_name",
                severity=Severity.ERROR,
                message="Entry has an empty short name.",
                field="name",
                fix="Give the entry a unique short key.",
            )
        )
    if not entry.full_name.strip():
        diagnostics.append(
            Diagnostic(
                rule="check_name",
                severity=Severity.ERROR,
                message="Entry has an empty full name.",
                model=entry.name or None,
                field="full_name",
                fix="Set full_name to the identifier the provider API expects.",
            )
        )
    return diagnostics


def check_prices(entry: CatalogEntry) -> list[Diagnostic]:
    """Input and output prices must be non-negative."""
    diagnostics: list[Diagnostic] = []
    for name in ("input_price", "output_price"):
        value = getattr(entry, name)
        if value < 0:
            diagnostics.append(
                Diagnostic(
                    rule="check_prices",
                    severity=Severity.ERROR,
                    message=f"{name} is negative ({value}).",
                    model=entry.name,
                    field=name,
                    fix="Prices are USD per 1M tokens and cannot be below 0.",
                )
            )
    return diagnostics


def check_token_limits(entry: CatalogEntry) -> list[Diagnostic]:
    """Context window and max output must be positive."""
    diagnostics: list[Diagnostic] = []
    for name in ("context_window", "max_output_tokens"):
        value = getattr(entry, name)
        if value <= 0:
            diagnostics.append(
                Diagnostic(
                    rule="check_token_limits",
                    severity=Severity.ERROR,
                    message=f"{name} must be positive, got {value}.",
                    model=entry.name,
                    field=name,
                )
            )
    return diagnostics


def check_cache_discount(entry: CatalogEntry) -> list[Diagnostic]:
    """Cache discount factor must lie in [0, 1]."""
    factor = entry.capabilities.cache_discount_factor
    if not 0.0 <= factor <= 1.0:
        return [
            Diagnostic(
                rule="check_cache_discount",
                severity=Severity.ERROR,
                message=f"cache_discount_factor {factor} is outside [0, 1].",
                model=entry.name,
                field="cache_discount_factor",
                fix="Use 1.0 for no discount, 0.1 for a 90% discount.",
            )
        ]
    return []


def check_base_url(entry: CatalogEntry) -> list[Diagnostic]:
    """A base URL override, when set, must be an absolute http(s) URL."""
    if entry.base_url is None:
        return []
    parsed = urlparse(entry.base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return [
            Diagnostic(
                rule="check_base_url",
                severity=Severity.ERROR,
                message=f"base_url '{entry.base_url}' is not an absolute http(s) URL.",
                model=entry.name,
                field="base_url",
            )
        ]
    return []


def check_provider(entry: CatalogEntry) -> list[Diagnostic]:
    """Provider must be one of the known organizations."""
    if entry.provider not in {p.value for p in Provider}:
        return [
            Diagnostic(
                rule="check_provider",
                severity=Severity.ERROR,
                message=f"Unknown provider {entry.provider!r}.",
                model=entry.name,
                field="provider",
                fix="Use a Provider member; OpenRouter-only models go under 'others'.",
            )
        ]
    return []


def check_reasoning_effort(entry: CatalogEntry) -> list[Diagnostic]:
    """Reasoning effort must be a ReasoningEffort level."""
    effort = entry.capabilities.reasoning_effort
    if effort not in {e.value for e in ReasoningEffort}:
        return [
            Diagnostic(
                rule="check_reasoning_effort",
                severity=Severity.ERROR,
                message=f"Unknown reasoning_effort {effort!r}.",
                model=entry.name,
                field="reasoning_effort",
            )
        ]
    return []


# ---------------------------------------------------------------------------
# Consistency rules (WARNING / INFO severity)
# ---------------------------------------------------------------------------


def check_output_within_context(entry: CatalogEntry) -> list[Diagnostic]:
    """Max output tokens is expected not to exceed the context window."""
    if entry.max_output_tokens > entry.context_window:
        return [
            Diagnostic(
                rule="check_output_within_context",
                severity=Severity.WARNING,
                message=(
                    f"max_output_tokens ({entry.max_output_tokens}) exceeds "
                    f"context_window ({entry.context_window})."
                ),
                model=entry.name,
                field="max_output_tokens",
            )
        ]
    return []


def check_cache_without_caching(entry: CatalogEntry) -> list[Diagnostic]:
    """A discount factor is only meaningful when some caching is supported."""
    caps = entry.capabilities
    if caps.cache_discount_factor < 1.0 and not caps.supports_any_caching:
        return [
            Diagnostic(
                rule="check_cache_without_caching",
                severity=Severity.INFO,
                message=(
                    f"cache_discount_factor is {caps.cache_discount_factor} "
                    "but neither explicit nor automatic prompt caching is supported."
                ),
                model=entry.name,
                field="cache_discount_factor",
            )
        ]
    return []


def check_effort_without_reasoning(entry: CatalogEntry) -> list[Diagnostic]:
    """A reasoning effort level is only meaningful for reasoning models."""
    caps = entry.capabilities
    if caps.reasoning_effort is not ReasoningEffort.NONE and not caps.supports_reasoning:
        return [
            Diagnostic(
                rule="check_effort_without_reasoning",
                severity=Severity.INFO,
                message=(
                    f"reasoning_effort is '{caps.reasoning_effort}' "
                    "but extended reasoning is not supported."
                ),
                model=entry.name,
                field="reasoning_effort",
            )
        ]
    return []


ALL_RULES = [
    check_name,
    check_prices,
    check_token_limits,
    check_cache_discount,
    check_base_url,
    check_provider,
    check_reasoning_effort,
    check_output_within_context,
    check_cache_without_caching,
    check_effort_without_reasoning,
]
