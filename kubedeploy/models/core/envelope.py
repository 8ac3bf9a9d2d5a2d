"""Shared response envelope returned by every backend endpoint."""

from typing import Any

from pydantic import BaseModel


class APIEnvelope(BaseModel):
    """``{success, message?, data?, error?}``."""

    success: bool = False
    message: str | None = None
    data: Any = None
    error: str | None = None
