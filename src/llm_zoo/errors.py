"""Error hierarchy for the model catalog."""
from __future__ import annotations


class ZooError(Exception):
    """Base error for all llm_zoo errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class UnknownModelError(ZooError):
    """A short model key has no entry in the registry."""

    def __init__(self, name: str, *, cause: Exception | None = None) -> None:
        super().__init__(f"Unknown model: {name}", cause=cause)
        self.name = name


class InvalidUsageError(ZooError):
    """A token usage shape is malformed (negative counts, cached > input)."""

    def __init__(
        self, message: str, *, field: str = "", cause: Exception | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.field = field


# ---------------------------------------------------------------------------
# Construction-time errors
# ---------------------------------------------------------------------------


class RegistryError(ZooError):
    """The provider tables cannot be assembled into a registry."""


class DuplicateModelError(RegistryError):
    """Two provider tables define the same short key."""

    def __init__(self, name: str, *, cause: Exception | None = None) -> None:
        super().__init__(f"Duplicate model key: {name}", cause=cause)
        self.name = name
