"""Capability flags attached to every catalog entry."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from llm_zoo.types.enums import ReasoningEffort


@dataclass(frozen=True)
class Capabilities:
    """Feature flags describing what a model supports.

    Field defaults form the shared template every provider starts from
    (see :data:`DEFAULT_CAPABILITIES`).  Values are immutable; use
    :func:`build_capabilities` to derive a variant.
    """

    supports_function_calling: bool = True
    """Function/tool calling."""

    supports_native_mcp_server: bool = False
    """Native MCP (Model Context Protocol) servers."""

    supports_native_web_search: bool = False
    """Built-in web search."""

    supports_dynamic_filtering_web_search: bool = False
    """Web search whose results the model can post-filter with code."""

    supports_native_code_execution: bool = False
    """Sandboxed code execution run by the provider."""

    supports_prompt_caching: bool = False
    """Explicit prompt caching (cache markers in the request)."""

    supports_auto_prompt_caching: bool = False
    """Prompt caching applied automatically by the provider."""

    cache_discount_factor: float = 1.0
    """Fraction of the input price charged for a cache-hit token (0.0-1.0)."""

    supports_reasoning: bool = False
    """Extended reasoning/thinking."""

    supports_interleaved_thinking: bool = False
    """Reasoning interleaved with regular output and tool calls."""

    supports_reasoning_effort: bool = False
    """Configurable reasoning effort levels."""

    reasoning_effort: ReasoningEffort = ReasoningEffort.NONE
    """Default effort when reasoning is enabled."""

    supports_vision: bool = True
    """Image input."""

    supports_native_pdf: bool = False
    """PDF documents as input."""

    supports_native_audio: bool = False
    """Audio as input."""

    supports_assistant_prefill: bool = False
    """Prefilling the assistant message."""

    supports_predictive_output: bool = False
    """Predictive/speculative output."""

    supports_token_counting: bool = False
    """Accurate token counting endpoint."""

    supports_system_prompt: bool = True
    """System prompts."""

    supports_interm_dev_msgs: bool = False
    """Intermediate developer messages."""

    @classmethod
    def flag_names(cls) -> list[str]:
        """Names of the boolean capability flags, in declaration order."""
        return [f.name for f in dataclasses.fields(cls) if f.type in ("bool", bool)]

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in dataclasses.fields(cls)]

    def is_default(self, name: str) -> bool:
        """Whether field *name* still holds its template value."""
        return getattr(self, name) == getattr(DEFAULT_CAPABILITIES, name)

    @property
    def supports_any_caching(self) -> bool:
        return self.supports_prompt_caching or self.supports_auto_prompt_caching


DEFAULT_CAPABILITIES = Capabilities()
"""Base capabilities with sensible defaults.  Provider templates derive from it."""


def build_capabilities(base: Capabilities, **overrides: Any) -> Capabilities:
    """Return a copy of *base* with *overrides* applied.

    Raises ``TypeError`` for an override that is not a capability field.
    """
    return dataclasses.replace(base, **overrides)
