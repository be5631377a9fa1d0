"""Closed integer ranges ``[left, right]``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class RangeNotContinuousError(ValueError):
    """Two ranges cannot be joined because they leave a gap."""

    def __init__(self, message: str = "aoe: range not continous") -> None:
        super().__init__(message)


class RangeInvalidError(ValueError):
    """A value cannot be appended to a range."""

    def __init__(self, message: str = "aoe: invalid range") -> None:
        super().__init__(message)


@dataclass
class Range:
    """A closed range of unsigned integers."""

    left: int = 0
    right: int = 0

    def __str__(self) -> str:
        return f"[{self.left}, {self.right}]"

    def valid(self) -> bool:
        return self.left <= self.right

    def lt(self, value: int) -> bool:
        """True if the whole range lies below ``value``."""
        return self.right < value

    def gt(self, value: int) -> bool:
        """True if the whole range lies above ``value``."""
        return self.left > value

    def closed_in(self, value: int) -> bool:
        return self.left <= value <= self.right

    def can_cover(self, other: Optional["Range"]) -> bool:
        if other is None:
            return True
        return self.left <= other.left and self.right >= other.right

    def commit_left(self, left: int) -> bool:
        """Extend the left bound down to ``left``; False if it lies beyond the right bound."""
        if left > self.right:
            return False
        if left < self.left:
            self.left = left
        return True

    def union(self, other: "Range") -> None:
        """Merge an adjacent or overlapping range into this one."""
        if other.left > self.right + 1 or self.left > other.right + 1:
            raise RangeNotContinuousError()
        self.left = min(self.left, other.left)
        self.right = max(self.right, other.right)

    def append(self, right: int) -> None:
        """Move the right bound to ``right``, which must lie past it.

        An empty ``[0, 0]`` range becomes ``[right, right]``.
        """
        if self.left == self.right == 0:
            self.left = right
            self.right = right
            return
        if right <= self.right:
            raise RangeInvalidError()
        self.right = right