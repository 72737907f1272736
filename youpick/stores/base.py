"""Space store interface.

A store owns the persisted Space per namespace key. ``mutate`` is the only
write path and the only atomicity boundary: two concurrent mutations of the
same key must behave as if they ran one after the other.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from youpick.models.space import Space, SpaceSummary

SpaceMutation = Callable[[Space], Space]


class SpaceStore(ABC):
    """Base store interface."""

    backend_name: str = "abstract"

    @abstractmethod
    async def get(self, key: str) -> Space:
        """Return the space for ``key``, creating an empty one on first access."""
        ...

    @abstractmethod
    async def mutate(self, key: str, fn: SpaceMutation) -> Space:
        """Apply ``fn`` to the current space and persist its result atomically.

        Exceptions raised by ``fn`` abort the mutation with nothing persisted.
        """
        ...

    @abstractmethod
    async def list_spaces(self) -> list[SpaceSummary]:
        """All spaces, most recently modified first."""
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """True if the backend is reachable."""
        ...
