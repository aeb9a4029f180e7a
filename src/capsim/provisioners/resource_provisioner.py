"""
Resource provisioners.

A provisioner hands out quantities of one resource pool to consumers (VMs)
and keeps the books exact: at every point

    capacity - available == sum of all consumer allocations

Allocation requests are absolute targets, not increments. A consumer that
already holds some of the resource has it credited back when a new target is
checked, so asking for 500 while holding 250 needs only 250 more to be free.

Example:
    from capsim.provisioners import SimpleResourceProvisioner
    from capsim.resources import Ram
    from capsim.vms import SimpleVm

    provisioner = SimpleResourceProvisioner(Ram(capacity=1000))
    vm = SimpleVm(vm_id=0)

    if provisioner.allocate(vm, 500):
        ...  # vm.current_allocated_ram == 500

    released = provisioner.deallocate(vm)  # 500
"""

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from capsim.config.logging_config import get_logger
from capsim.provisioners.allocation_ledger import AllocationLedger
from capsim.provisioners.capacity_pool import CapacityPool
from capsim.provisioners.errors import InvalidArgumentError

log = get_logger(__name__)


@dataclass
class ProvisionerStats:
    """Counters for a provisioner's lifetime."""

    allocations: int = 0
    rejections: int = 0
    deallocations: int = 0
    released_total: int = 0

    def copy(self) -> "ProvisionerStats":
        """Create a copy of the stats."""
        return ProvisionerStats(
            allocations=self.allocations,
            rejections=self.rejections,
            deallocations=self.deallocations,
            released_total=self.released_total,
        )


class ResourceProvisioner(ABC):
    """Allocates one resource pool to consumers."""

    @property
    @abstractmethod
    def resource(self) -> Any:
        """The descriptor this provisioner was built from."""

    @property
    @abstractmethod
    def capacity(self) -> int: ...

    @property
    @abstractmethod
    def available(self) -> int: ...

    @property
    def total_allocated(self) -> int:
        return self.capacity - self.available

    @abstractmethod
    def is_suitable(self, consumer: Any, requested: int | float) -> bool:
        """Whether the consumer's allocation could be set to `requested`."""

    @abstractmethod
    def allocate(self, consumer: Any, requested: int | float) -> bool:
        """Set the consumer's allocation to `requested` if it fits."""

    @abstractmethod
    def allocation_of(self, consumer: Any) -> int:
        """The consumer's current allocation, 0 if it holds none."""

    @abstractmethod
    def deallocate(self, consumer: Any) -> int:
        """Release everything the consumer holds and return the amount."""


class SimpleResourceProvisioner(ResourceProvisioner):
    """
    A provisioner that grants any request fitting in the free capacity.

    There is no priority or fairness among consumers: requests are served in
    call order and either succeed in full or leave the state untouched. An
    infeasible request is reported by a False return, never an exception,
    since running out of capacity is an ordinary outcome.

    Every successful allocate or deallocate tells the consumer its new amount
    through `consumer.set_allocated_resource(kind, amount)`. If that call
    raises, the error propagates and the books are left as they were.

    All state sits behind a single lock, so one instance may be shared between
    threads.
    """

    def __init__(self, resource: Any):
        """
        Initialize the provisioner.

        Args:
            resource: Descriptor exposing `capacity` and optionally `kind`.

        Raises:
            InvalidArgumentError: If resource is None or its capacity is negative.
        """
        if resource is None:
            raise InvalidArgumentError("resource cannot be None")

        self._resource = resource
        self._kind: str = getattr(resource, "kind", "generic")
        self._pool = CapacityPool(resource.capacity)
        self._ledger = AllocationLedger()
        self._lock = threading.RLock()
        self._stats = ProvisionerStats()

    @property
    def resource(self) -> Any:
        return self._resource

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def capacity(self) -> int:
        return self._pool.capacity

    @property
    def available(self) -> int:
        with self._lock:
            return self._pool.available

    @property
    def total_allocated(self) -> int:
        with self._lock:
            return self._pool.total_allocated

    @property
    def stats(self) -> ProvisionerStats:
        return self._stats

    def is_suitable(self, consumer: Any, requested: int | float) -> bool:
        """
        Check whether the consumer's allocation could be set to `requested`.

        The consumer's current allocation counts as free for this check.

        Args:
            consumer: The consumer the target is for.
            requested: Absolute allocation target. Fractions are truncated.

        Returns:
            True if the target fits, False otherwise. Negative targets never fit.
        """
        amount = int(requested)
        if amount < 0:
            return False
        with self._lock:
            return self._pool.available + self._ledger.allocation_of(consumer) >= amount

    def allocate(self, consumer: Any, requested: int | float) -> bool:
        """
        Set the consumer's allocation to `requested`.

        Repeated calls replace the previous allocation rather than add to it.
        A target of 0 releases everything the consumer holds; the consumer is
        told 0 even if it held nothing.

        Args:
            consumer: The consumer to allocate to.
            requested: Absolute allocation target. Fractions are truncated.

        Returns:
            True if the allocation was made, False if it did not fit, in which
            case nothing changed.

        Raises:
            Exception: Whatever `consumer.set_allocated_resource` raises. The
                provisioner's state is unchanged in that case.
        """
        amount = int(requested)
        with self._lock:
            if not self.is_suitable(consumer, amount):
                self._stats.rejections += 1
                log.debug(
                    f"Rejected {self._kind} allocation of {amount} for {consumer!r}",
                    extra={"requested": amount, "available": self._pool.available},
                )
                return False

            previous = self._ledger.allocation_of(consumer)
            self._transition(consumer, previous, amount)
            if amount > 0:
                self._stats.allocations += 1
            elif previous > 0:
                self._stats.deallocations += 1
                self._stats.released_total += previous

        log.debug(
            f"Allocated {amount} {self._kind} to {consumer!r} (was {previous})",
            extra={"requested": amount, "previous": previous},
        )
        return True

    def _transition(self, consumer: Any, previous: int, amount: int) -> None:
        # The consumer is told first; a setter that raises leaves pool and ledger untouched.
        consumer.set_allocated_resource(self._kind, amount)
        delta = amount - previous
        if delta >= 0:
            self._pool.reserve(delta)
        else:
            self._pool.release(-delta)
        self._ledger.set(consumer, amount)

    def allocation_of(self, consumer: Any) -> int:
        with self._lock:
            return self._ledger.allocation_of(consumer)

    def deallocate(self, consumer: Any) -> int:
        """
        Release the consumer's whole allocation.

        Returns:
            The amount released, 0 if the consumer held nothing.
        """
        with self._lock:
            released = self._ledger.allocation_of(consumer)
            if released == 0:
                return 0
            self._transition(consumer, released, 0)
            self._stats.deallocations += 1
            self._stats.released_total += released

        log.debug(f"Deallocated {released} {self._kind} from {consumer!r}")
        return released

    def deallocate_all(self) -> int:
        """Release every consumer's allocation and return the total released."""
        with self._lock:
            return sum(self.deallocate(consumer) for consumer in self._ledger.consumers())

    def allocations(self) -> list[tuple[Any, int]]:
        """Snapshot of (consumer, amount) pairs for every consumer holding some."""
        with self._lock:
            return self._ledger.items()

    def __repr__(self) -> str:
        return (
            f"SimpleResourceProvisioner(kind={self._kind}, capacity={self._pool.capacity}, "
            f"available={self._pool.available}, consumers={len(self._ledger)})"
        )


__all__ = [
    "ProvisionerStats",
    "ResourceProvisioner",
    "SimpleResourceProvisioner",
]
