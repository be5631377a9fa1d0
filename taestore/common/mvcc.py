"""Version chaining for objects that keep several physical versions."""

from __future__ import annotations

from typing import Any, Callable, Optional


class BaseMvcc:
    """Links an object to its previous and next versions.

    ``pin`` is called with the object when a previous version is attached;
    ``unpin`` is called with the next version's object when this version
    goes stale.
    """

    def __init__(
        self,
        pin: Optional[Callable[[Any], None]] = None,
        unpin: Optional[Callable[[Any], None]] = None,
        get_object: Optional[Callable[[], Any]] = None,
    ) -> None:
        self.pin = pin
        self.unpin = unpin
        self.get_object = get_object
        self._prev: Optional[BaseMvcc] = None
        self._next: Optional[BaseMvcc] = None

    def object(self) -> Any:
        if self.get_object is None:
            return None
        return self.get_object()

    def get_prev_version(self) -> Optional["BaseMvcc"]:
        return self._prev

    def set_prev_version(self, prev: Optional["BaseMvcc"]) -> None:
        """Attach ``prev`` as the previous version and link it forward to this one."""
        self._prev = prev
        if prev is not None:
            if self.pin is not None:
                self.pin(self.object())
            prev.set_next_version(self)

    def get_next_version(self) -> Optional["BaseMvcc"]:
        return self._next

    def set_next_version(self, next_version: Optional["BaseMvcc"]) -> None:
        self._next = next_version

    def on_version_stale(self) -> None:
        """Detach this version from the next one and release the pin it held."""
        next_version = self.get_next_version()
        if next_version is not None:
            next_version.set_prev_version(None)
            if self.unpin is not None:
                self.unpin(next_version.object())