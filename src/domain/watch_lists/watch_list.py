"""Change-tracking collection for the children of an aggregate."""

from typing import Generic, Iterable, Iterator, Optional, Protocol, TypeVar
from uuid import UUID


class Identifiable(Protocol):
    id: UUID


T = TypeVar("T", bound=Identifiable)


class WatchList(Generic[T]):
    """
    Collection that remembers what changed since it was loaded.

    The items passed to the constructor form the baseline. Afterwards every
    ``add``, ``remove`` and ``update`` is recorded in one of three disjoint
    id-keyed sets, and the current items are always derived from the
    baseline and those sets:

        items = [updated.get(b.id, b) for b in baseline if b.id not in removed]
                + added

    A repository reads ``added_items``, ``updated_items`` and
    ``removed_items`` to emit the minimal inserts, updates and deletes.
    Not thread-safe; use one instance per load-mutate-save cycle.
    """

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._initial: dict[UUID, T] = {}
        for item in items or []:
            if item.id in self._initial:
                raise ValueError(f"Duplicate item {item.id} in watch list")
            self._initial[item.id] = item
        self._added: dict[UUID, T] = {}
        self._updated: dict[UUID, T] = {}
        self._removed: dict[UUID, T] = {}
        # Updates superseded by a removal, restored if the removal is cancelled.
        self._removed_updates: dict[UUID, T] = {}

    @property
    def items(self) -> list[T]:
        """Current items: surviving baseline items first, then added ones."""
        current = [
            self._updated.get(item_id, item)
            for item_id, item in self._initial.items()
            if item_id not in self._removed
        ]
        current.extend(self._added.values())
        return current

    @property
    def initial_items(self) -> list[T]:
        return list(self._initial.values())

    @property
    def added_items(self) -> list[T]:
        return list(self._added.values())

    @property
    def updated_items(self) -> list[T]:
        return list(self._updated.values())

    @property
    def removed_items(self) -> list[T]:
        return list(self._removed.values())

    @property
    def has_changes(self) -> bool:
        return bool(self._added or self._updated or self._removed)

    def add(self, item: T) -> None:
        """
        Add an item.

        Re-adding an item removed earlier cancels the pending removal. If the
        re-added instance is not the baseline instance, it is tracked as an
        update so the new version is persisted. So is an item that had a pending
        update when it was removed: entities mutated in place are the baseline
        instance but still carry unsaved changes.

        Raises:
            ValueError: If an item with the same id is already present
        """
        if item.id in self._removed:
            del self._removed[item.id]
            had_update = self._removed_updates.pop(item.id, None) is not None
            if had_update or item is not self._initial[item.id]:
                self._updated[item.id] = item
            return

        if item.id in self:
            raise ValueError(f"Item {item.id} is already in the watch list")

        self._added[item.id] = item

    def remove(self, item: T) -> None:
        """
        Remove an item.

        Items that were only added are dropped without recording a removal.
        Unknown items are ignored.
        """
        if item.id in self._added:
            del self._added[item.id]
            return

        if item.id in self._initial and item.id not in self._removed:
            pending = self._updated.pop(item.id, None)
            if pending is not None:
                self._removed_updates[item.id] = pending
            self._removed[item.id] = self._initial[item.id]

    def update(self, item: T) -> None:
        """
        Replace the current item with the same id.

        Added items keep being tracked as added (with the new version).
        Unknown or removed items are ignored.
        """
        if item.id in self._added:
            self._added[item.id] = item
            return

        if item.id in self._initial and item.id not in self._removed:
            self._updated[item.id] = item

    def find(self, item_id: UUID) -> Optional[T]:
        """Get a current item by id."""
        if item_id in self._added:
            return self._added[item_id]
        if item_id in self._initial and item_id not in self._removed:
            return self._updated.get(item_id, self._initial[item_id])
        return None

    def __contains__(self, item_id: object) -> bool:
        return self.find(item_id) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self._initial) - len(self._removed) + len(self._added)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(items={len(self)}, added={len(self._added)}, "
            f"updated={len(self._updated)}, removed={len(self._removed)})"
        )
