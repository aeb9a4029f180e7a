class ProvisionerError(Exception):
    """Base exception for provisioning errors."""


class InvalidArgumentError(ProvisionerError, ValueError):
    """Raised when a provisioner or pool is built from an unusable argument."""
