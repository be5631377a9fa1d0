"""Catalog operation kinds and catalog errors."""

from __future__ import annotations

from enum import IntEnum


class OpT(IntEnum):
    CREATE = 0
    UPDATE = 1
    SOFT_DELETE = 2
    HARD_DELETE = 3


OP_NAMES: dict[OpT, str] = {
    OpT.CREATE: "Create",
    OpT.UPDATE: "Update",
    OpT.SOFT_DELETE: "SoftDelete",
    OpT.HARD_DELETE: "HardDelete",
}


def op_name(op: int) -> str:
    """Return the display name of ``op``, or an empty string if unknown."""
    try:
        return OP_NAMES[OpT(op)]
    except ValueError:
        return ""


class CatalogError(Exception):
    """Base class of catalog errors."""


class NotFoundError(CatalogError):
    def __init__(self, message: str = "tae catalog: not found") -> None:
        super().__init__(message)


class DuplicateError(CatalogError):
    def __init__(self, message: str = "tae catalog: duplicate") -> None:
        super().__init__(message)


class ValidationError(CatalogError):
    def __init__(self, message: str = "tae catalog: validataion") -> None:
        super().__init__(message)