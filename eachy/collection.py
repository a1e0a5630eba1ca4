from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable as IterableABC, Mapping as MappingABC
from functools import partial

import numpy as np
import pandas as pd

from .types import *

logger = logging.getLogger(__name__)

_NUMERIC = (int, float, np.integer, np.floating)


# --- classification ---

class Collection(Generic[T]):
    """
    a value classified once, at the start of an operation, into one of the
    four shapes every operation understands.
    """

    def __init__(self, shape: Shape, source: Any, items: Any):
        self.shape = shape
        # what iteratees receive as their third argument
        self.source = source
        # positional items for sequences, the key/value store for mappings
        self._items = items

    @classmethod
    def classify(cls, value: Any) -> 'Collection':
        if value is None:
            return cls(Shape.ABSENT, None, ())
        if isinstance(value, str):
            chars = list(value)
            return cls(Shape.CHARACTERS, chars, chars)
        if isinstance(value, MappingABC):
            return cls(Shape.MAPPING, value, value)
        if isinstance(value, (np.ndarray, pd.Series)):
            if value.ndim == 0:
                return cls(Shape.MAPPING, value, {})
            # positional snapshot, a series is never indexed by label
            return cls(Shape.SEQUENCE, value, value.tolist())
        if _is_sequence_shaped(value):
            return cls(Shape.SEQUENCE, value, value)
        if isinstance(value, IterableABC):
            snapshot = tuple(value)
            return cls(Shape.SEQUENCE, snapshot, snapshot)
        return cls(Shape.MAPPING, value, _own_attributes(value))

    @property
    def is_absent(self) -> bool: return self.shape is Shape.ABSENT

    @property
    def is_indexed(self) -> bool: return self.shape in (Shape.SEQUENCE, Shape.CHARACTERS)

    def entries(self) -> Iterator[Tuple[Any, Any]]:
        """(index, item) for present sequence slots, (key, value) for own mapping keys"""
        if self.shape is Shape.MAPPING:
            # snapshot so an iteratee may touch the mapping it is walking
            yield from list(self._items.items())
            return
        items = self._items
        for index in range(len(items)):
            item = items[index]
            if item is not HOLE:
                yield index, item

    def values(self) -> List[Any]:
        """present items, in visit order"""
        return [value for _, value in self.entries()]

    def slots(self) -> List[Any]:
        """every slot of an indexed collection, holes included"""
        if self.is_indexed:
            return list(self._items)
        return self.values()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Collection(shape={self.shape.name}, length={len(self)})"


def classify(value: Any) -> Collection:
    return Collection.classify(value)


def _is_sequence_shaped(value: Any) -> bool:
    """an accurate integer length plus integer-indexed access up to that length"""
    kind = type(value)
    if not (hasattr(kind, '__len__') and hasattr(kind, '__getitem__')):
        return False
    try:
        length = len(value)
    except TypeError:
        return False
    if not isinstance(length, int):
        return False
    try:
        if length:
            value[length - 1]
    except (IndexError, KeyError, TypeError):
        return False
    try:
        value[length]
    except IndexError:
        return True
    except (KeyError, TypeError):
        return False
    # the length under-reports what the value can index
    return False


def _own_attributes(value: Any) -> Dict[str, Any]:
    """instance attributes only, class level attributes are inherited"""
    try:
        return vars(value)
    except TypeError:
        pass
    # slotted objects keep their attributes in descriptors, not a __dict__
    attributes = {}
    for kind in type(value).__mro__:
        slots = kind.__dict__.get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ('__dict__', '__weakref__') or name in attributes:
                continue
            if hasattr(value, name):
                attributes[name] = getattr(value, name)
    return attributes


# --- iteratees ---

def make_iteratee(func: Iteratee, context: Any = MISSING) -> Iteratee:
    """
    bind func to context (passed ahead of the item, like a method's instance) and
    trim each (item, key, collection) call down to the positional arguments func accepts.
    """
    if context is not MISSING:
        func = partial(func, context)
    arity = _positional_arity(func)
    if arity is None:
        return func
    return lambda *args: func(*args[:arity])


def _positional_arity(func: Callable) -> Optional[int]:
    """number of positional parameters, None when func takes *args"""
    try:
        parameters = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        # builtins without an introspectable signature take the item only
        return 1
    count = 0
    for param in parameters:
        if param.kind is param.VAR_POSITIONAL:
            return None
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


# --- property lookup ---

def resolve_property(item: Any, name: Any) -> Any:
    """look a named property up on an item; MISSING when the item has no such property"""
    if item is None or item is HOLE:
        return MISSING
    if isinstance(item, MappingABC):
        if name in item:
            return item[name]
        index = _as_index(name)
        if isinstance(name, str) and index is not None and index in item:
            return item[index]
        return MISSING
    if isinstance(item, (list, tuple, str)) and _as_index(name) is not None:
        index = _as_index(name)
        if -len(item) <= index < len(item):
            return item[index]
    elif isinstance(name, str) and name.isidentifier() and hasattr(item, name):
        return getattr(item, name)
    if name == 'length' and hasattr(item, '__len__'):
        return len(item)
    return MISSING


def resolve_path(item: Any, path: Any) -> Any:
    """
    walk a dotted path one segment at a time. a missing segment ends the walk
    and the deepest value resolved so far (the item itself at worst) is returned.
    """
    segments = path.split('.') if isinstance(path, str) else [path]
    current = item
    for segment in segments:
        resolved = resolve_property(current, segment)
        if resolved is MISSING:
            break
        current = resolved
    return current


def _as_index(name: Any) -> Optional[int]:
    if isinstance(name, int) and not isinstance(name, bool):
        return name
    if isinstance(name, str) and name.lstrip('-').isdigit():
        return int(name)
    return None


def make_key_function(key: Optional[KeyOrPath]) -> Callable[[Any], Any]:
    """a one-argument key function from a callable, a property path, or None (identity)"""
    if key is None:
        return lambda item: item
    if callable(key):
        return key
    return lambda item: resolve_path(item, key)


# --- numpy fast path ---

def try_numpy_extreme(items: List[Any], operation: str) -> Any:
    """
    pick the maximum or minimum item with numpy when every item is a plain number.
    the position found is used to index back into items, so the caller gets the
    original object. returns MISSING whenever the python path has to decide.
    """
    if not items or not all(isinstance(x, _NUMERIC) and not isinstance(x, (bool, np.bool_)) for x in items):
        return MISSING
    if _mixes_ints_and_floats(items):
        # numpy promotes to float64, which can round ints and break first-wins ties
        logger.debug("numpy %s fast path declined for mixed ints and floats", operation)
        return MISSING
    try:
        arr = np.asarray(items)
        if arr.dtype == object or np.isnan(arr).any():
            logger.debug("numpy %s fast path declined for dtype %s", operation, arr.dtype)
            return MISSING
        position = np.argmax(arr) if operation == 'max' else np.argmin(arr)
    except (TypeError, ValueError, OverflowError) as e:  # catch specific errors
        logger.debug("numpy %s fast path failed: %s", operation, e)
        return MISSING
    return items[int(position)]


def _mixes_ints_and_floats(items: List[Any]) -> bool:
    has_float = any(isinstance(x, (float, np.floating)) for x in items)
    has_int = any(isinstance(x, (int, np.integer)) for x in items)
    return has_float and has_int
