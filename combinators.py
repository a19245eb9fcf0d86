"""
Example mappers and reducers for SequenceView.

Mappers take one element and return one element; reducers take the running
value and the next element and return the new running value. Both are plain
closures, looked up by name through the registries below.
"""

from typing import Any, Callable, Dict


class UnknownCombinatorError(KeyError):
    """Raised when a mapper or reducer name is not registered"""


def multiply(factor):
    """Mapper that multiplies each element by factor"""
    def _multiply(item):
        return item * factor
    return _multiply


def upper():
    """Mapper that upper-cases string elements"""
    def _upper(item):
        return item.upper()
    return _upper


def max_of():
    """Reducer keeping the greater value; on a tie the earlier one wins"""
    def _max(memo, item):
        if item > memo:
            return item
        return memo
    return _max


def sum_of():
    """Reducer adding each element to the running total"""
    def _sum(memo, item):
        return memo + item
    return _sum


MAPPERS: Dict[str, Callable[..., Callable[[Any], Any]]] = {
    "multiply": multiply,
    "upper": upper,
}

REDUCERS: Dict[str, Callable[..., Callable[[Any, Any], Any]]] = {
    "max": max_of,
    "sum": sum_of,
}


def get_mapper(name: str, *args) -> Callable[[Any], Any]:
    """Build the registered mapper called name"""
    if name not in MAPPERS:
        raise UnknownCombinatorError(f"Unknown mapper: {name}")
    return MAPPERS[name](*args)


def get_reducer(name: str, *args) -> Callable[[Any, Any], Any]:
    """Build the registered reducer called name"""
    if name not in REDUCERS:
        raise UnknownCombinatorError(f"Unknown reducer: {name}")
    return REDUCERS[name](*args)
