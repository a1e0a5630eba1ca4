from __future__ import annotations
import operator
from ..types import *
from ..collection import Collection, make_iteratee, try_numpy_extreme
from .core import identity


def max_(collection: Any, iteratee: Optional[Iteratee] = None, context: Any = MISSING) -> Any:
    """
    the largest item, or the item with the largest computed criterion.
    ties on a criterion go to the last item seen. empty input gives -inf.
    """
    source = Collection.classify(collection)
    if iteratee is None and source.is_indexed:
        return _direct_extreme(source.values(), 'max', max, float('-inf'))
    return _track_extreme(source, iteratee, context, operator.ge, float('-inf'))


def min_(collection: Any, iteratee: Optional[Iteratee] = None, context: Any = MISSING) -> Any:
    """
    the smallest item, or the item with the smallest computed criterion.
    ties on a criterion go to the first item seen. empty input gives inf.
    """
    source = Collection.classify(collection)
    if iteratee is None and source.is_indexed:
        return _direct_extreme(source.values(), 'min', min, float('inf'))
    return _track_extreme(source, iteratee, context, operator.lt, float('inf'))


def _direct_extreme(items: List[Any], operation: str, builtin: Callable, empty: float) -> Any:
    if not items:
        return empty
    optimized = try_numpy_extreme(items, operation)
    if optimized is not MISSING: return optimized
    return builtin(items)


def _track_extreme(source: Collection, iteratee: Optional[Iteratee], context: Any,
                   replaces: Callable[[Any, Any], bool], empty: float) -> Any:
    """keep the item (not its criterion) whose criterion wins under replaces(computed, best)"""
    call = make_iteratee(iteratee or identity, context)
    result, best = empty, MISSING
    for key, value in source.entries():
        computed = call(value, key, source.source)
        if best is MISSING or replaces(computed, best):
            result, best = value, computed
    return result
