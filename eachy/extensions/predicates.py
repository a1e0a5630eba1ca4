from __future__ import annotations
from ..types import *
from ..collection import Collection

# classification is by intrinsic type, never by the shape a value imitates


def is_array(value: Any) -> bool:
    return isinstance(value, list)


def is_function(value: Any) -> bool:
    """callables other than classes"""
    return callable(value) and not isinstance(value, type)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_arguments(value: Any) -> bool:
    """a packed positional argument tuple, as produced by *args"""
    return isinstance(value, tuple)


def is_empty(value: Any) -> bool:
    """
    true for None, for sequences and strings of length zero, and for
    mappings and objects without any own keys.
    """
    source = Collection.classify(value)
    if source.is_absent:
        return True
    return len(source) == 0
