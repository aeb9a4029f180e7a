from .resource import Bandwidth, Ram, Resource, Storage

__all__ = [
    "Bandwidth",
    "Ram",
    "Resource",
    "Storage",
]
