"""Envelope wrapping every API response."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Success flag, optional payload, optional message and error string."""

    success: bool
    data: DataT | None = None
    message: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, data: DataT | None = None, message: str | None = None) -> ApiResponse[DataT]:
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, error: str) -> ApiResponse[DataT]:
        return cls(success=False, error=error)


__all__ = ["ApiResponse"]
