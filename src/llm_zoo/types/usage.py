"""Token usage shape consumed by the cost functions."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from llm_zoo.errors import InvalidUsageError

_ALIASES = {
    "input": "input_tokens",
    "output": "output_tokens",
    "cached": "cached_tokens",
}


@dataclass(frozen=True)
class TokenUsage:
    """Tokens consumed by one request.

    ``cached_tokens`` counts the part of ``input_tokens`` served from the
    prompt cache, so it can never exceed ``input_tokens``.
    """

    input_tokens: int = 0
    output_tokens: int = 0
    cached_tokens: int = 0

    def __post_init__(self) -> None:
        for name in ("input_tokens", "output_tokens", "cached_tokens"):
            count = getattr(self, name)
            if isinstance(count, bool) or not isinstance(count, int):
                raise InvalidUsageError(
                    f"{name} must be an integer, got {count!r}", field=name
                )
            if count < 0:
                raise InvalidUsageError(
                    f"{name} must be non-negative, got {count}", field=name
                )
        if self.cached_tokens > self.input_tokens:
            raise InvalidUsageError(
                f"cached_tokens ({self.cached_tokens}) exceeds "
                f"input_tokens ({self.input_tokens})",
                field="cached_tokens",
            )

    @property
    def uncached_tokens(self) -> int:
        return self.input_tokens - self.cached_tokens

    @classmethod
    def of(cls, value: TokenUsage | Mapping[str, Any]) -> TokenUsage:
        """Coerce a ``TokenUsage`` or a mapping into a ``TokenUsage``.

        Mappings may use the short keys ``input``/``output``/``cached`` or
        the field names.  A ``None`` count falls back to the field default;
        giving the same field under both spellings is rejected.
        """
        if isinstance(value, TokenUsage):
            return value
        kwargs: dict[str, Any] = {}
        seen: set[str] = set()
        for key, count in value.items():
            name = _ALIASES.get(key, key)
            if name not in ("input_tokens", "output_tokens", "cached_tokens"):
                raise InvalidUsageError(f"Unknown usage field: {key!r}", field=key)
            if name in seen:
                raise InvalidUsageError(f"Usage field given twice: {name!r}", field=name)
            seen.add(name)
            if count is not None:
                kwargs[name] = count
        return cls(**kwargs)
