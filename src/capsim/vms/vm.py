"""
Consumers of provisioned resources.

The provisioner does not own a consumer's view of what it was given; it only
informs the consumer through `set_allocated_resource`. `SimpleVm` is a minimal
consumer that records those notifications per resource kind.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Consumer(Protocol):
    """Anything a provisioner can allocate to."""

    def set_allocated_resource(self, kind: str, amount: int) -> None: ...


class SimpleVm:
    """
    A virtual machine that remembers the allocations it has been told about.

    Two VMs built with identical arguments are still distinct consumers;
    provisioners key on object identity.

    Example:
        vm = SimpleVm(vm_id=0, mips=1000, pes=1)
        provisioner.allocate(vm, 512)
        vm.current_allocated_ram  # 512 if the provisioner manages RAM
    """

    def __init__(self, vm_id: int, mips: float = 0.0, pes: int = 1):
        self.id = vm_id
        self.mips = mips
        self.pes = pes
        self._allocated: dict[str, int] = {}

    def set_allocated_resource(self, kind: str, amount: int) -> None:
        if amount == 0:
            self._allocated.pop(kind, None)
        else:
            self._allocated[kind] = amount

    def get_allocated_resource(self, kind: str) -> int:
        return self._allocated.get(kind, 0)

    @property
    def current_allocated_ram(self) -> int:
        return self.get_allocated_resource("ram")

    @property
    def current_allocated_bw(self) -> int:
        return self.get_allocated_resource("bw")

    @property
    def current_allocated_storage(self) -> int:
        return self.get_allocated_resource("storage")

    def __repr__(self) -> str:
        return f"SimpleVm(id={self.id}, allocated={self._allocated})"
