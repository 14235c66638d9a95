"""Enumeration types for the model catalog."""
from __future__ import annotations

from enum import StrEnum


class Provider(StrEnum):
    """Organization a catalog entry originates from."""

    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    GOOGLE = "google"
    DEEPSEEK = "deepseek"
    XAI = "xai"
    MOONSHOT = "moonshot"
    DASHSCOPE = "dashscope"
    COPILOT = "copilot"
    OTHERS = "others"


class ReasoningEffort(StrEnum):
    """Default reasoning depth for models with extended reasoning."""

    XHIGH = "xhigh"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"


class RankMetric(StrEnum):
    """Metric used to order catalog entries."""

    PRICE = "price"
    CONTEXT = "context"
    OUTPUT = "output"


class SortOrder(StrEnum):
    """Direction of a ranking."""

    ASC = "asc"
    DESC = "desc"
