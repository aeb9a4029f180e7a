from .vm import Consumer, SimpleVm

__all__ = [
    "Consumer",
    "SimpleVm",
]
