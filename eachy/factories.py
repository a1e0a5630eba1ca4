import math
from .types import *


def range_(start_or_stop: Optional[float] = None, stop: Optional[float] = None,
           step: Optional[float] = None) -> List[float]:
    """
    an arithmetic progression, python's range() with fractional steps allowed.
    a lone argument is the stop and the progression starts at 0.
    """
    if stop is None:
        start, stop = 0, start_or_stop or 0
    else:
        start = start_or_stop or 0
    step = step or 1

    length = max(math.ceil((stop - start) / step), 0)
    result = []
    for _ in range(length):
        result.append(start)
        start += step
    return result


def sparse(length: int, entries: Mapping[int, T]) -> List[T]:
    """a list of the given length where only the entries' indices are present"""
    result = [HOLE] * length
    for index, value in entries.items():
        if not 0 <= index < length:
            raise ValueError(f"index {index} is outside a sparse sequence of length {length}")
        result[index] = value
    return result
