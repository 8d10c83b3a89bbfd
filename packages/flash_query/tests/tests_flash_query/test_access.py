import pytest
from flash_query import (
    EmptySequenceError,
    FlashQueryError,
    IndexOutOfBoundsError,
    Query,
    wrap,
)


class TestSafeDefaults:
    def test_at_in_range(self, numbers):
        assert numbers.at(0) == 1
        assert numbers.at(2) == 3
        assert numbers.at(4) == 5

    @pytest.mark.parametrize("index", [-1, 5, 100])
    def test_at_out_of_range_returns_default(self, numbers, index):
        assert numbers.at(index) is None
        assert numbers.at(index, default=0) == 0

    def test_first_and_last(self, numbers, people):
        assert numbers.first() == 1
        assert numbers.last() == 5
        assert people.last().name == "Michael"

    def test_empty_accessors_return_default(self, empty):
        assert empty.at(0) is None
        assert empty.first() is None
        assert empty.last(default=-1) == -1


class TestStrictBounds:
    def test_at_on_empty_raises(self):
        with pytest.raises(EmptySequenceError, match=r"Query\.at: empty sequence"):
            wrap([], strict=True).at(0)

    @pytest.mark.parametrize("index", [-1, 5])
    def test_at_out_of_bounds_raises(self, index):
        with pytest.raises(
            IndexOutOfBoundsError, match=r"Query\.at: index out of bounds"
        ):
            wrap([1, 2, 3, 4, 5], strict=True).at(index)

    @pytest.mark.parametrize("method", ["first", "last"])
    def test_first_last_on_empty_raise(self, method):
        with pytest.raises(EmptySequenceError, match=f"Query.{method}"):
            getattr(wrap([], strict=True), method)()

    def test_errors_share_base_classes(self):
        with pytest.raises(FlashQueryError):
            wrap([], strict=True).first()
        with pytest.raises(IndexError):
            wrap([1], strict=True).at(3)

    def test_strict_from_settings(self, strict_settings):
        q = Query([], settings=strict_settings)
        assert q.strict is True
        with pytest.raises(EmptySequenceError):
            q.last()

    def test_explicit_strict_overrides_settings(self, strict_settings):
        q = Query([], strict=False, settings=strict_settings)
        assert q.first() is None

    def test_strict_in_range_behaves_normally(self):
        q = wrap([7, 8], strict=True)
        assert q.at(1) == 8
        assert q.first() == 7
        assert q.last() == 8


def test_out_of_bounds_on_non_empty_is_not_an_empty_sequence_error():
    """Each boundary violation maps to exactly one exception type."""
    with pytest.raises(IndexOutOfBoundsError) as excinfo:
        wrap([1, 2], strict=True).at(2)
    assert not isinstance(excinfo.value, EmptySequenceError)

    with pytest.raises(EmptySequenceError) as excinfo:
        wrap([], strict=True).at(0)
    assert not isinstance(excinfo.value, IndexOutOfBoundsError)
