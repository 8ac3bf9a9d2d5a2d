"""Result types for KubeDeploy TUI.

This module provides the tagged success/failure result every remote
operation returns.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

from kubedeploy.constants.enums import ErrorCategory

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class ApiResult(Generic[T]):
    """Result wrapper for remote operations.

    ``error`` carries the backend's structured error string verbatim when the
    response had one; ``detail`` carries diagnostic text (transport errors,
    undecodable bodies) that is not meant to replace a user-facing fallback.
    """

    success: bool
    data: T | None = None
    error: str | None = None
    message: str | None = None
    status_code: int | None = None
    category: ErrorCategory | None = None
    detail: str | None = None
    duration_ms: float = 0.0

    @classmethod
    def ok(
        cls,
        data: T | None = None,
        *,
        message: str | None = None,
        status_code: int | None = None,
    ) -> ApiResult[T]:
        return cls(success=True, data=data, message=message, status_code=status_code)

    @classmethod
    def failure(
        cls,
        category: ErrorCategory,
        *,
        error: str | None = None,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> ApiResult[T]:
        return cls(
            success=False,
            error=error,
            status_code=status_code,
            category=category,
            detail=detail,
        )

    @property
    def is_unauthorized(self) -> bool:
        return self.category is ErrorCategory.UNAUTHORIZED

    def error_text(self, fallback: str) -> str:
        """Human-readable failure text: the structured error, else ``fallback``."""
        return self.error or fallback

    def map(self, func: Callable[[T | None], U]) -> ApiResult[U]:
        """Transform the payload of a successful result; failures pass through."""
        if not self.success:
            return replace(self, data=None)  # type: ignore[return-value]
        return replace(self, data=func(self.data))  # type: ignore[return-value]


def result_error_text(result: ApiResult[Any], fallback: str) -> str:
    """Failure text for inline display, including transport diagnostics."""
    return result.error or result.detail or fallback
