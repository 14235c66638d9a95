"""GitHub Copilot model table (free tier, GPT-4o backed)."""
from __future__ import annotations

from llm_zoo.providers._table import make_table
from llm_zoo.types.capabilities import DEFAULT_CAPABILITIES, build_capabilities
from llm_zoo.types.entry import CatalogEntry
from llm_zoo.types.enums import Provider, ReasoningEffort

COPILOT_CAPABILITIES = DEFAULT_CAPABILITIES

COPILOT_MODELS = make_table(
    CatalogEntry(
        name="copilot4o",
        full_name="copilot-gpt-4o",
        provider=Provider.COPILOT,
        input_price=0.0,
        output_price=0.0,
        context_window=128_000,
        max_output_tokens=8192,
        capabilities=build_capabilities(
            COPILOT_CAPABILITIES, reasoning_effort=ReasoningEffort.MEDIUM
        ),
    ),
)
