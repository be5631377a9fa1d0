"""Iterators that run an executor over resources supplied by a provider."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

Executor = Callable[[Any, Any], None]
Handle = Callable[[Any], None]


class BaseResources:
    """Feeds resources to an iterator; subclasses may override ``handle_resources``."""

    def __init__(
        self,
        impl: Optional["BaseResources"] = None,
        items: Iterable[Any] = (),
    ) -> None:
        self.impl = impl if impl is not None else self
        self.items = list(items)

    def iter_resource(self, iterator: "BaseIterator") -> None:
        """Run ``iterator`` over every resource, recording any error on it."""
        try:
            iterator.pre_iter()
            self.impl.handle_resources(iterator.execute)
            iterator.post_iter()
        except Exception as exc:  # recorded for the caller to inspect
            iterator.err = exc
        else:
            iterator.err = None

    def handle_resources(self, handle: Handle) -> None:
        """Call ``handle`` on each held resource, in order."""
        for item in self.items:
            handle(item)


class BaseIterator:
    """Applies ``executor`` to each resource; outcome is kept in ``result`` and ``err``."""

    def __init__(
        self,
        impl: Any = None,
        executor: Optional[Executor] = None,
        resources: Optional[BaseResources] = None,
    ) -> None:
        self.impl = impl if impl is not None else self
        self.executor = executor
        self.resources = resources if resources is not None else BaseResources()
        self.err: Optional[Exception] = None
        self.result: Any = None

    def pre_iter(self) -> None:
        """Clear any error left from a previous walk."""
        self.err = None

    def iter(self) -> None:
        self.resources.iter_resource(self)

    def post_iter(self) -> Any:
        """Return the result gathered during the walk."""
        return self.result

    def execute(self, resource: Any) -> None:
        if self.executor is not None:
            self.executor(resource, self.impl)