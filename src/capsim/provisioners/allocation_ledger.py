"""
Per-consumer allocation records keyed by object identity.

Consumers are arbitrary external objects. They may be unhashable, or define
`__eq__` so that two distinct VMs compare equal; neither may merge ledger
entries. Each consumer is therefore wrapped in a key that hashes on `id()` and
compares with `is`. The key holds a strong reference, so an `id()` cannot be
reused by another object while its entry exists.
"""

from typing import Any, Iterator


class _ConsumerKey:
    __slots__ = ("consumer",)

    def __init__(self, consumer: Any):
        self.consumer = consumer

    def __hash__(self) -> int:
        return id(self.consumer)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _ConsumerKey):
            return False
        return self.consumer is other.consumer


class AllocationLedger:
    """
    Maps each consumer to its current absolute allocation.

    Only strictly positive allocations are stored; setting a consumer to 0
    removes its entry.
    """

    def __init__(self) -> None:
        self._entries: dict[_ConsumerKey, int] = {}

    def allocation_of(self, consumer: Any) -> int:
        """Return the consumer's allocation, or 0 if it has none."""
        return self._entries.get(_ConsumerKey(consumer), 0)

    def set(self, consumer: Any, amount: int) -> None:
        """Replace the consumer's allocation with `amount`."""
        if amount < 0:
            raise ValueError(f"allocation must be non-negative, got {amount}")
        key = _ConsumerKey(consumer)
        if amount == 0:
            self._entries.pop(key, None)
        else:
            self._entries[key] = amount

    def pop(self, consumer: Any) -> int:
        """Remove the consumer's entry and return what it held."""
        return self._entries.pop(_ConsumerKey(consumer), 0)

    def consumers(self) -> list[Any]:
        return [key.consumer for key in self._entries]

    def items(self) -> list[tuple[Any, int]]:
        return [(key.consumer, amount) for key, amount in self._entries.items()]

    def total(self) -> int:
        return sum(self._entries.values())

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, consumer: object) -> bool:
        return _ConsumerKey(consumer) in self._entries

    def __iter__(self) -> Iterator[Any]:
        return iter(self.consumers())

    def __repr__(self) -> str:
        return f"AllocationLedger(entries={len(self._entries)}, total={self.total()})"
