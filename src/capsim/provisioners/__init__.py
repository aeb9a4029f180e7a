from .allocation_ledger import AllocationLedger
from .capacity_pool import CapacityPool
from .errors import InvalidArgumentError, ProvisionerError
from .resource_provisioner import (
    ProvisionerStats,
    ResourceProvisioner,
    SimpleResourceProvisioner,
)

__all__ = [
    "AllocationLedger",
    "CapacityPool",
    "InvalidArgumentError",
    "ProvisionerError",
    "ProvisionerStats",
    "ResourceProvisioner",
    "SimpleResourceProvisioner",
]
