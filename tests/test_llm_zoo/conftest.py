"""Shared fixtures: small synthetic registries and an entry factory."""
from __future__ import annotations

from typing import Any, Callable

import pytest

from llm_zoo import (
    DEFAULT_CAPABILITIES,
    CatalogEntry,
    Provider,
    Registry,
    build_capabilities,
    build_registry,
    load_default_registry,
)


def _make_entry(
    name: str,
    *,
    input_price: float = 1.0,
    output_price: float = 1.0,
    provider: Provider = Provider.OPENAI,
    context_window: int = 128_000,
    max_output_tokens: int = 4096,
    full_name: str | None = None,
    openrouter_only: bool = False,
    deprecated: bool = False,
    **capabilities: Any,
) -> CatalogEntry:
    return CatalogEntry(
        name=name,
        full_name=full_name or f"{name}-full",
        provider=provider,
        input_price=input_price,
        output_price=output_price,
        context_window=context_window,
        max_output_tokens=max_output_tokens,
        capabilities=build_capabilities(DEFAULT_CAPABILITIES, **capabilities),
        openrouter_only=openrouter_only,
        deprecated=deprecated,
    )


@pytest.fixture
def make_entry() -> Callable[..., CatalogEntry]:
    return _make_entry


@pytest.fixture
def entry_a() -> CatalogEntry:
    """3/15 pricing, 200K context, 10% cache reads."""
    return _make_entry(
        "a",
        input_price=3.0,
        output_price=15.0,
        context_window=200_000,
        max_output_tokens=64_000,
        provider=Provider.ANTHROPIC,
        supports_prompt_caching=True,
        cache_discount_factor=0.1,
    )


@pytest.fixture
def entry_b() -> CatalogEntry:
    """Combined price 0.55."""
    return _make_entry(
        "b",
        input_price=0.05,
        output_price=0.5,
        context_window=131_072,
        max_output_tokens=8192,
        provider=Provider.DASHSCOPE,
        supports_reasoning=True,
        supports_vision=False,
    )


@pytest.fixture
def sample_registry() -> Registry:
    """Five entries across four providers, registry order as listed."""
    return build_registry(
        [
            {
                "sonnet": _make_entry(
                    "sonnet",
                    full_name="claude-sonnet",
                    provider=Provider.ANTHROPIC,
                    input_price=3.0,
                    output_price=15.0,
                    context_window=200_000,
                    max_output_tokens=64_000,
                    supports_prompt_caching=True,
                    cache_discount_factor=0.1,
                    supports_native_pdf=True,
                ),
                "sonnetT": _make_entry(
                    "sonnetT",
                    full_name="claude-sonnet",
                    provider=Provider.ANTHROPIC,
                    input_price=3.0,
                    output_price=15.0,
                    context_window=200_000,
                    max_output_tokens=64_000,
                    supports_prompt_caching=True,
                    cache_discount_factor=0.1,
                    supports_reasoning=True,
                    supports_native_pdf=True,
                ),
            },
            {
                "mini": _make_entry(
                    "mini",
                    full_name="gpt-mini",
                    provider=Provider.OPENAI,
                    input_price=0.4,
                    output_price=1.6,
                    context_window=1_000_000,
                    max_output_tokens=32_768,
                    supports_auto_prompt_caching=True,
                    cache_discount_factor=0.25,
                ),
            },
            {
                "turbo": _make_entry(
                    "turbo",
                    full_name="qwen-turbo",
                    provider=Provider.DASHSCOPE,
                    input_price=0.05,
                    output_price=0.5,
                    context_window=131_072,
                    max_output_tokens=8192,
                    supports_reasoning=True,
                    supports_vision=False,
                ),
                "llama": _make_entry(
                    "llama",
                    full_name="meta-llama/llama",
                    provider=Provider.OTHERS,
                    input_price=3.0,
                    output_price=3.0,
                    context_window=131_072,
                    max_output_tokens=131_072,
                    openrouter_only=True,
                ),
            },
        ]
    )


@pytest.fixture(scope="session")
def default_registry() -> Registry:
    return load_default_registry()
