"""Per-provider model tables.

``ALL_TABLES`` lists them in merge order; registry iteration order follows it.
"""
from __future__ import annotations

from llm_zoo.providers.anthropic import ANTHROPIC_MODELS
from llm_zoo.providers.copilot import COPILOT_MODELS
from llm_zoo.providers.dashscope import DASHSCOPE_MODELS
from llm_zoo.providers.deepseek import DEEPSEEK_MODELS
from llm_zoo.providers.google import GOOGLE_MODELS
from llm_zoo.providers.moonshot import MOONSHOT_MODELS
from llm_zoo.providers.openai import (
    OPENAI_DEEP_RESEARCH_MODELS,
    OPENAI_MODELS,
    OPENAI_REASONING_MODELS,
)
from llm_zoo.providers.others import OTHER_MODELS
from llm_zoo.providers.xai import XAI_MODELS

ALL_TABLES = (
    ANTHROPIC_MODELS,
    OPENAI_DEEP_RESEARCH_MODELS,
    OPENAI_REASONING_MODELS,
    OPENAI_MODELS,
    GOOGLE_MODELS,
    XAI_MODELS,
    OTHER_MODELS,
    DEEPSEEK_MODELS,
    MOONSHOT_MODELS,
    DASHSCOPE_MODELS,
    COPILOT_MODELS,
)

__all__ = [
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
]
