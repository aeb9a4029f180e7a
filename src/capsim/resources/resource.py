"""
Resource-pool descriptors.

A descriptor names one finite, fungible resource and its fixed capacity. It is
what a provisioner is built from; provisioners only ever read `capacity` and
`kind`, so the concrete subclasses here are labels rather than behavior.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class Resource(BaseModel):
    """A fixed-capacity pool of a single resource kind."""

    model_config = ConfigDict(frozen=True)

    KIND: ClassVar[str] = "generic"

    capacity: int = Field(ge=0, description="Total quantity the pool can ever allocate")

    @property
    def kind(self) -> str:
        """Label under which consumers are told about their allocation."""
        return self.KIND


class Ram(Resource):
    """Memory, usually in megabytes."""

    KIND: ClassVar[str] = "ram"


class Bandwidth(Resource):
    """Network bandwidth, usually in megabits per second."""

    KIND: ClassVar[str] = "bw"


class Storage(Resource):
    """Disk space, usually in megabytes."""

    KIND: ClassVar[str] = "storage"
