"""
Place a batch of VMs on one host's RAM and bandwidth, first-fit.

Each VM needs both resources; if either provisioner refuses, whatever was
already granted is rolled back so the host's books stay exact.
"""

import random

from capsim.provisioners import SimpleResourceProvisioner
from capsim.resources import Bandwidth, Ram
from capsim.vms import SimpleVm


def place(vm, ram, bw, ram_mb, bw_mbps):
    if not ram.allocate(vm, ram_mb):
        return False
    if not bw.allocate(vm, bw_mbps):
        ram.deallocate(vm)
        return False
    return True


def main():
    random.seed(7)
    ram = SimpleResourceProvisioner(Ram(capacity=16384))
    bw = SimpleResourceProvisioner(Bandwidth(capacity=10000))

    placed = []
    for vm_id in range(20):
        vm = SimpleVm(vm_id=vm_id, mips=1000, pes=2)
        ram_mb = random.choice([512, 1024, 2048, 4096])
        bw_mbps = random.choice([500, 1000, 2000])
        if place(vm, ram, bw, ram_mb, bw_mbps):
            placed.append(vm)
            print(f"VM {vm_id}: placed with {ram_mb} MB / {bw_mbps} Mbps")
        else:
            print(f"VM {vm_id}: rejected ({ram_mb} MB / {bw_mbps} Mbps)")

    print(f"\nPlaced {len(placed)} VMs")
    print(f"RAM free: {ram.available}/{ram.capacity} MB")
    print(f"BW free:  {bw.available}/{bw.capacity} Mbps")

    # Halve everyone's RAM; targets are absolute, so this frees capacity
    for vm in placed:
        ram.allocate(vm, vm.current_allocated_ram // 2)
    print(f"RAM free after shrinking: {ram.available} MB")

    print(f"Released {ram.deallocate_all()} MB RAM, {bw.deallocate_all()} Mbps BW")


if __name__ == "__main__":
    main()
