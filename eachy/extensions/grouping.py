from __future__ import annotations
from collections import defaultdict
from ..types import *
from ..collection import Collection, make_iteratee, resolve_path


def group_by(collection: Any, key: KeyOrPath) -> Dict[Any, List[Any]]:
    """
    split the collection into lists of items sharing a key. key is either a
    callable key(item, index) or a property name, which may be a dotted path
    like 'o.a'. groups keep their items in visit order.
    """
    if callable(key):
        key_of = make_iteratee(key)
    else:
        key_of = lambda value, index: resolve_path(value, key)

    source = Collection.classify(collection)
    groups = defaultdict(list)
    for index, value in source.entries():
        groups[_group_key(key_of(value, index))].append(value)
    return dict(groups)


def _group_key(computed: Any) -> Any:
    """unhashable keys (a dict left by a short path walk, say) group by their repr"""
    try:
        hash(computed)
    except TypeError:
        return repr(computed)
    return computed
