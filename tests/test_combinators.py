import pytest
from combinators import (
    multiply,
    upper,
    max_of,
    sum_of,
    get_mapper,
    get_reducer,
    MAPPERS,
    REDUCERS,
    UnknownCombinatorError,
)


class TestMappers:
    """Test mapper factories"""

    def test_multiply_closes_over_factor(self):
        double = multiply(2)
        triple = multiply(3)
        assert double(5) == 10
        assert triple(5) == 15

    def test_multiply_negative_and_zero(self):
        assert multiply(-1)(4) == -4
        assert multiply(0)(99) == 0

    def test_upper(self):
        assert upper()("mixed Case") == "MIXED CASE"


class TestReducers:
    """Test reducer factories"""

    def test_max_picks_greater(self):
        fn = max_of()
        assert fn(1, 2) == 2
        assert fn(2, 1) == 2

    def test_max_works_on_strings(self):
        assert max_of()("apple", "pear") == "pear"

    def test_sum(self):
        assert sum_of()(40, 2) == 42


class TestRegistry:
    """Test name lookups"""

    def test_registered_names(self):
        assert set(MAPPERS) == {"multiply", "upper"}
        assert set(REDUCERS) == {"max", "sum"}

    def test_get_mapper_passes_args(self):
        assert get_mapper("multiply", 4)(3) == 12

    def test_get_reducer(self):
        assert get_reducer("sum")(1, 2) == 3

    def test_unknown_mapper(self):
        with pytest.raises(UnknownCombinatorError, match="Unknown mapper"):
            get_mapper("square")

    def test_unknown_reducer_is_key_error(self):
        with pytest.raises(KeyError):
            get_reducer("product")
