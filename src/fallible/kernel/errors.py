"""Error types raised when a container is unwrapped on the wrong variant."""

from __future__ import annotations

from typing import Any


class FallibleError(Exception):
    """Base exception for fallible errors."""
    pass


class UnwrapError(FallibleError):
    """Accessor called on the variant that has no such payload."""
    pass


class EmptyAccess(UnwrapError):
    """Value requested from an absent option."""

    def __init__(self, message: str = "Cannot unwrap an absent option") -> None:
        super().__init__(message)


class UnwrapOnFailure(UnwrapError):
    """Value requested from a failed result.

    The failure payload is preserved on ``error`` for debugging.
    """

    def __init__(self, error: Any, message: str | None = None) -> None:
        self.error = error
        super().__init__(message or f"Cannot unwrap value of a failure: {error!r}")

    def __repr__(self) -> str:
        return f"UnwrapOnFailure({super().__repr__()}, error={self.error!r})"


class UnwrapErrOnSuccess(UnwrapError):
    """Error requested from a successful result."""

    def __init__(self, value: Any, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"Cannot unwrap error of a success: {value!r}")

    def __repr__(self) -> str:
        return f"UnwrapErrOnSuccess({super().__repr__()}, value={self.value!r})"
