"""CapabilityRegistry - ordered providers that turn a target into an accessor."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from tick_timeline.types import MissingCapabilityError

if TYPE_CHECKING:
    from tick_timeline.channels import Accessor


class CapabilityRegistry:
    """Maps a capability (e.g. ``"color"``) to ordered ``(predicate, factory)`` pairs.

    The first pair whose predicate accepts the target wins.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._providers: list[tuple[Callable[[Any], bool], Callable[[Any], Accessor]]] = []

    def register(
        self,
        predicate: Callable[[Any], bool],
        factory: Callable[[Any], Accessor],
    ) -> None:
        """Append a provider. Earlier registrations take precedence."""
        self._providers.append((predicate, factory))

    def has(self, target: Any) -> bool:
        """Check if any provider accepts ``target``."""
        return any(predicate(target) for predicate, _ in self._providers)

    def resolve(self, target: Any) -> Accessor:
        """Build an accessor for ``target``. Raises MissingCapabilityError if none match."""
        for predicate, factory in self._providers:
            if predicate(target):
                return factory(target)
        raise MissingCapabilityError(
            self.name,
            f"{type(target).__name__} exposes no '{self.name}' capability",
        )

    def __len__(self) -> int:
        return len(self._providers)
