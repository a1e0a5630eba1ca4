from __future__ import annotations
from bisect import bisect_left
from functools import cmp_to_key
from ..types import *
from ..collection import Collection, make_iteratee, make_key_function, resolve_path


def sort_by(collection: Any, iteratee: KeyOrPath, context: Any = MISSING) -> List[Any]:
    """
    a new list of the items ordered by the criterion iteratee computes for each.
    decorate, sort, undecorate; items with equal criteria keep their visit order.
    """
    source = Collection.classify(collection)
    if callable(iteratee):
        call = make_iteratee(iteratee, context)
    else:
        call = lambda value, key, _: resolve_path(value, iteratee)

    decorated = [Criterion(value, call(value, key, source.source), position)
                 for position, (key, value) in enumerate(source.entries())]
    return [pair.value for pair in sorted(decorated, key=cmp_to_key(_compare_criteria))]


def _compare_criteria(left: Criterion, right: Criterion) -> int:
    a, b = left.criteria, right.criteria
    if a < b: return -1
    if a > b: return 1
    # equal (or unordered) criteria fall back to the original position
    return left.position - right.position


def sorted_index(sequence: Sequence[T], value: T, key: Optional[KeyOrPath] = None) -> int:
    """
    binary search for the leftmost index at which value can be inserted while
    keeping sequence sorted by key (identity by default).
    """
    # arrays and series are searched by position, never by label
    source = Collection.classify(sequence)
    if len(source) == 0:
        return 0
    key_of = make_key_function(key)
    return bisect_left(source.slots(), key_of(value), key=key_of)
