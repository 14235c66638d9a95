from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RegistryConfig:
    include_deprecated: bool = True  # False drops entries flagged deprecated
    validate: bool = False  # run llm_zoo.validation on every entry at build time
