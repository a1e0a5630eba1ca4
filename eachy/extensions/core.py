from __future__ import annotations
from ..types import *
from ..collection import Collection, make_iteratee, resolve_property
from ..errors import EmptyReductionError, InvalidIterateeError


def identity(value: T) -> T:
    """return the value unchanged, the default iteratee"""
    return value


def each(collection: Any, iteratee: Iteratee, context: Any = MISSING) -> None:
    """
    the cornerstone. calls iteratee(item, index, collection) for every present index
    of a sequence, in order, or iteratee(value, key, collection) for every own key of
    a mapping. a string is walked character by character. returning Flow.STOP from
    the iteratee ends the traversal on either branch.
    """
    source = Collection.classify(collection)
    if source.is_absent:
        return
    call = make_iteratee(iteratee, context)
    for key, value in source.entries():
        if call(value, key, source.source) is Flow.STOP:
            return


def map_(collection: Any, iteratee: Iteratee, context: Any = MISSING) -> List[Any]:
    """project each item through iteratee. indexed inputs keep their length, holes stay holes"""
    source = Collection.classify(collection)
    if source.is_absent:
        return []
    call = make_iteratee(iteratee, context)
    if source.is_indexed:
        results = [HOLE] * len(source)
        for index, value in source.entries():
            results[index] = call(value, index, source.source)
        return results
    return [call(value, key, source.source) for key, value in source.entries()]


def reduce_(collection: Any, iteratee: Iteratee, seed: Any = NO_SEED, context: Any = MISSING) -> Any:
    """
    fold the collection into a single value with iteratee(memo, item, index, collection).
    without a seed the first visited item becomes the memo; a seed is used as given,
    None and other falsy values included.
    """
    source = Collection.classify(collection)
    call = make_iteratee(iteratee, context)
    memo, seeded = seed, seed is not NO_SEED
    for key, value in source.entries():
        if not seeded:
            memo, seeded = value, True
            continue
        memo = call(memo, value, key, source.source)
    if not seeded:
        raise EmptyReductionError()
    return memo


def any_(collection: Any, iteratee: Optional[Predicate] = None, context: Any = MISSING) -> bool:
    """true as soon as one item passes the truth test"""
    call = make_iteratee(iteratee or identity, context)
    found = False

    def visit(value, key, source):
        nonlocal found
        if call(value, key, source):
            found = True
            return Flow.STOP
        return Flow.CONTINUE

    each(collection, visit)
    return found


def every(collection: Any, iteratee: Optional[Predicate] = None, context: Any = MISSING) -> bool:
    """true unless some item fails the truth test; vacuously true when empty"""
    call = make_iteratee(iteratee or identity, context)
    passed = True

    def visit(value, key, source):
        nonlocal passed
        if not call(value, key, source):
            passed = False
            return Flow.STOP
        return Flow.CONTINUE

    each(collection, visit)
    return passed


def find(collection: Any, iteratee: Predicate, context: Any = MISSING, default: Any = None) -> Any:
    """the first item passing the truth test, or default"""
    call = make_iteratee(iteratee, context)
    result = default

    def matches(value, key, source):
        nonlocal result
        if call(value, key, source):
            result = value
            return True
        return False

    any_(collection, matches)
    return result


def filter_(collection: Any, iteratee: Predicate, context: Any = MISSING) -> List[Any]:
    """all items passing the truth test, in visit order"""
    call = make_iteratee(iteratee, context)
    source = Collection.classify(collection)
    return [value for key, value in source.entries() if call(value, key, source.source)]


def reject(collection: Any, iteratee: Predicate, context: Any = MISSING) -> List[Any]:
    """all items failing the truth test; the complement of filter_"""
    call = make_iteratee(iteratee, context)
    source = Collection.classify(collection)
    return [value for key, value in source.entries() if not call(value, key, source.source)]


def include(collection: Any, target: Any) -> bool:
    """true if some item is, or equals, target"""
    if collection is None or target is HOLE:
        return False
    # the builtin containment scan only for the exact builtin containers
    if type(collection) in (list, tuple):
        return target in collection
    return any_(collection, lambda value: value is target or value == target)


def invoke(collection: Any, method: Union[str, Callable[..., Any]], *args: Any) -> List[Any]:
    """
    call a method on every item. a name is looked up on each item; a callable
    receives the item as its first argument. extra args are forwarded.
    """
    def call(value):
        if callable(method):
            return method(value, *args)
        bound = getattr(value, method, None)
        if not callable(bound):
            raise InvalidIterateeError(value, method)
        return bound(*args)

    return map_(collection, call)


def pluck(collection: Any, name: Any) -> List[Any]:
    """the named property of every item, None where an item lacks it"""
    def fetch(value):
        found = resolve_property(value, name)
        return None if found is MISSING else found

    return map_(collection, fetch)


# --- aliases ---
for_each = each
collect = map_
foldl = inject = reduce_
some = any_
all_ = every
detect = find
select = filter_
contains = include
