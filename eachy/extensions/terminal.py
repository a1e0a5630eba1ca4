from __future__ import annotations
from ..types import *
from ..collection import Collection


def to_array(collection: Any) -> List[Any]:
    """
    a new list of the collection's items. sequences are copied slot for slot
    (holes included), mappings and objects give their own values in order,
    and anything with its own to_array() is asked for it.
    """
    if collection is None:
        return []
    converter = getattr(collection, 'to_array', None)
    if callable(converter) and not isinstance(collection, type):
        return converter()
    return Collection.classify(collection).slots()


def size(collection: Any) -> int:
    """number of items, counted after to_array"""
    return len(to_array(collection))


values = to_array
