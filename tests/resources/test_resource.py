import pytest
from pydantic import ValidationError

from capsim.resources import Bandwidth, Ram, Resource, Storage


class TestResource:
    """Tests for resource-pool descriptors."""

    def test_kinds(self):
        """Test that each descriptor carries its kind label."""
        assert Resource(capacity=1).kind == "generic"
        assert Ram(capacity=1).kind == "ram"
        assert Bandwidth(capacity=1).kind == "bw"
        assert Storage(capacity=1).kind == "storage"

    def test_capacity(self):
        """Test that capacity is stored as given."""
        assert Ram(capacity=1024).capacity == 1024

    def test_negative_capacity_rejected(self):
        """Test that negative capacity fails validation."""
        with pytest.raises(ValidationError):
            Ram(capacity=-1)

    def test_capacity_is_immutable(self):
        """Test that capacity cannot change after construction."""
        ram = Ram(capacity=10)
        with pytest.raises(ValidationError):
            ram.capacity = 20
        assert ram.capacity == 10
