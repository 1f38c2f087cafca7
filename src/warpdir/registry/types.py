"""Registry domain types."""

from __future__ import annotations

from pydantic import BaseModel, field_validator

SEPARATOR = ":"


class WarpPoint(BaseModel):
    name: str  # Never contains the separator; the first ":" splits a line
    path: str  # Absolute, but only checked for existence by clean

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value:
            raise ValueError("name is empty")
        if SEPARATOR in value:
            raise ValueError(f"name contains {SEPARATOR!r}")
        if "\n" in value or "\r" in value:
            raise ValueError("name contains a line break")
        return value

    @field_validator("path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        if not value:
            raise ValueError("path is empty")
        if "\n" in value or "\r" in value:
            raise ValueError("path contains a line break")
        return value


class MissingPath(BaseModel):
    path: str
    points: list[str]
