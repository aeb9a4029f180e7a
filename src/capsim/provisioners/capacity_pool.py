from capsim.provisioners.errors import InvalidArgumentError, ProvisionerError


class CapacityPool:
    """
    Fixed total capacity and the part of it that is not yet reserved.

    The pool does not know who holds what; it only keeps
    `0 <= available <= capacity`. Callers that move capacity in and out are
    responsible for keeping it in step with their own records.
    """

    __slots__ = ("_capacity", "_available")

    def __init__(self, capacity: int):
        if capacity < 0:
            raise InvalidArgumentError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._available = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def available(self) -> int:
        return self._available

    @property
    def total_allocated(self) -> int:
        return self._capacity - self._available

    def reserve(self, amount: int) -> None:
        """Take `amount` out of the available capacity."""
        if amount < 0 or amount > self._available:
            raise ProvisionerError(f"cannot reserve {amount}, only {self._available} available")
        self._available -= amount

    def release(self, amount: int) -> None:
        """Return `amount` to the available capacity."""
        if amount < 0 or self._available + amount > self._capacity:
            raise ProvisionerError(f"cannot release {amount}, only {self.total_allocated} reserved")
        self._available += amount

    def __repr__(self) -> str:
        return f"CapacityPool(capacity={self._capacity}, available={self._available})"
