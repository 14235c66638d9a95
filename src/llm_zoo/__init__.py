"""LLM Zoo: pricing, limits and capabilities of language models, with query helpers.

Example::

    from llm_zoo import cheapest, cost, load_default_registry

    registry = load_default_registry()
    claude = registry.lookup("sonnet45")
    price = cost("gpt4o", {"input": 10_000, "output": 2_000}, registry)
    budget = cheapest(registry, {"supports_vision": True, "supports_reasoning": True})
"""
from __future__ import annotations

# Types
from llm_zoo.types import (
    DEFAULT_CAPABILITIES,
    DEFAULT_CONTEXT_WINDOW,
    Capabilities,
    CatalogEntry,
    Provider,
    RankMetric,
    ReasoningEffort,
    SortOrder,
    TokenUsage,
    build_capabilities,
)

# Errors
from llm_zoo.errors import (
    DuplicateModelError,
    InvalidUsageError,
    RegistryError,
    UnknownModelError,
    ZooError,
)
from llm_zoo.validation import ValidationError

# Config
from llm_zoo.config import RegistryConfig

# Registry and provider tables
from llm_zoo.registry import Registry, build_registry, load_default_registry
from llm_zoo.providers import (
    ALL_TABLES,
    ANTHROPIC_MODELS,
    COPILOT_MODELS,
    DASHSCOPE_MODELS,
    DEEPSEEK_MODELS,
    GOOGLE_MODELS,
    MOONSHOT_MODELS,
    OPENAI_DEEP_RESEARCH_MODELS,
    OPENAI_MODELS,
    OPENAI_REASONING_MODELS,
    OTHER_MODELS,
    XAI_MODELS,
)

# Cost
from llm_zoo.cost import CostComparison, compare_costs, cost, max_cost

# Selection
from llm_zoo.selection import cheapest, ranked, smartpick

# Insights
from llm_zoo.insights import RegistryInsights, insights

__version__ = "0.4.0"

__all__ = [
    # Types
    "Capabilities",
    "CatalogEntry",
    "DEFAULT_CAPABILITIES",
    "DEFAULT_CONTEXT_WINDOW",
    "Provider",
    "RankMetric",
    "ReasoningEffort",
    "SortOrder",
    "TokenUsage",
    "build_capabilities",
    # Errors
    "ZooError",
    "UnknownModelError",
    "InvalidUsageError",
    "RegistryError",
    "DuplicateModelError",
    "ValidationError",
    # Config
    "RegistryConfig",
    # Registry
    "Registry",
    "build_registry",
    "load_default_registry",
    "ALL_TABLES",
    "ANTHROPIC_MODELS",
    "COPILOT_MODELS",
    "DASHSCOPE_MODELS",
    "DEEPSEEK_MODELS",
    "GOOGLE_MODELS",
    "MOONSHOT_MODELS",
    "OPENAI_DEEP_RESEARCH_MODELS",
    "OPENAI_MODELS",
    "OPENAI_REASONING_MODELS",
    "OTHER_MODELS",
    "XAI_MODELS",
    # Cost
    "CostComparison",
    "compare_costs",
    "cost",
    "max_cost",
    # Selection
    "cheapest",
    "ranked",
    "smartpick",
    # Insights
    "RegistryInsights",
    "insights",
]
