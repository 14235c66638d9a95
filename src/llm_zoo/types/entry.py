"""Catalog entry: one addressable model configuration."""
from __future__ import annotations

from dataclasses import dataclass, field

from llm_zoo.types.capabilities import DEFAULT_CAPABILITIES, Capabilities
from llm_zoo.types.enums import Provider

DEFAULT_CONTEXT_WINDOW = 128_000
"""Fallback context window, in tokens, for models that do not state one."""


@dataclass(frozen=True)
class CatalogEntry:
    """Static metadata about a model.

    Prices are USD per one million tokens.
    """

    name: str
    """Short registry key (e.g., "sonnet45")."""

    full_name: str
    """Identifier sent to the provider API (e.g., "claude-sonnet-4-5").

    Not unique: a thinking variant usually shares it with its base model.
    """

    provider: Provider

    input_price: float
    output_price: float

    context_window: int = DEFAULT_CONTEXT_WINDOW
    """Max input plus history tokens."""

    max_output_tokens: int = 4096
    """Max tokens generated in a single response."""

    capabilities: Capabilities = field(default=DEFAULT_CAPABILITIES)

    openrouter_only: bool = False
    """Reachable only through OpenRouter, not the provider's own API."""

    openrouter_full_name: str | None = None
    """Identifier on OpenRouter (e.g., "anthropic/claude-sonnet-4.5")."""

    base_url: str | None = None
    """Endpoint overriding the provider default."""

    requires_responses_api: bool = False
    """Needs OpenAI's Responses API instead of chat completions."""

    deprecated: bool = False
    """Still served but superseded by a newer model."""

    @property
    def combined_price(self) -> float:
        """``input_price + output_price``, the single-number cost proxy."""
        return self.input_price + self.output_price
