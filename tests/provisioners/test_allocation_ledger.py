import pytest

from capsim.provisioners.allocation_ledger import AllocationLedger


class _EqualEverything:
    """A consumer that compares equal to any other instance."""

    def __eq__(self, other):
        return isinstance(other, _EqualEverything)

    def __hash__(self):
        return 0


class TestAllocationLedger:
    """Tests for AllocationLedger."""

    def test_unknown_consumer_has_zero(self):
        """Test that consumers without an entry read as 0."""
        ledger = AllocationLedger()
        assert ledger.allocation_of(object()) == 0
        assert len(ledger) == 0

    def test_set_replaces(self):
        """Test that set replaces rather than adds."""
        ledger = AllocationLedger()
        consumer = object()
        ledger.set(consumer, 100)
        ledger.set(consumer, 40)
        assert ledger.allocation_of(consumer) == 40
        assert ledger.total() == 40

    def test_set_zero_removes_entry(self):
        """Test that a zero allocation leaves no entry behind."""
        ledger = AllocationLedger()
        consumer = object()
        ledger.set(consumer, 10)
        ledger.set(consumer, 0)
        assert consumer not in ledger
        assert len(ledger) == 0

    def test_set_negative_rejected(self):
        """Test that negative allocations are refused."""
        ledger = AllocationLedger()
        with pytest.raises(ValueError):
            ledger.set(object(), -5)

    def test_pop(self):
        """Test that pop removes the entry and returns its amount."""
        ledger = AllocationLedger()
        consumer = object()
        ledger.set(consumer, 25)
        assert ledger.pop(consumer) == 25
        assert ledger.pop(consumer) == 0
        assert consumer not in ledger

    def test_identity_not_equality(self):
        """Test that equal-but-distinct consumers get separate entries."""
        ledger = AllocationLedger()
        a, b = _EqualEverything(), _EqualEverything()
        assert a == b

        ledger.set(a, 10)
        ledger.set(b, 20)
        assert ledger.allocation_of(a) == 10
        assert ledger.allocation_of(b) == 20
        assert len(ledger) == 2

    def test_unhashable_consumers(self):
        """Test that consumers need not be hashable."""
        ledger = AllocationLedger()
        consumer = {"name": "vm-0"}
        ledger.set(consumer, 7)
        assert ledger.allocation_of(consumer) == 7
        assert ledger.allocation_of({"name": "vm-0"}) == 0

    def test_snapshots(self):
        """Test consumers, items and iteration."""
        ledger = AllocationLedger()
        a, b = object(), object()
        ledger.set(a, 1)
        ledger.set(b, 2)

        assert ledger.consumers() == [a, b]
        assert ledger.items() == [(a, 1), (b, 2)]
        assert list(ledger) == [a, b]
        assert ledger.total() == 3

    def test_clear(self):
        """Test that clear empties the ledger."""
        ledger = AllocationLedger()
        ledger.set(object(), 5)
        ledger.clear()
        assert len(ledger) == 0
        assert ledger.total() == 0
