from __future__ import annotations
from collections.abc import Mapping as MappingABC
from functools import partial
import numpy as np
from ..types import *
from ..collection import Collection
from .predicates import is_function


def shuffle(collection: Any, random_state: Optional[int] = None) -> List[Any]:
    """
    a new list holding every item exactly once in uniformly random order,
    built with the inside-out fisher-yates shuffle. a random_state makes the
    permutation reproducible.
    """
    rng = np.random.default_rng(random_state)
    shuffled = []
    for index, value in enumerate(Collection.classify(collection).values()):
        rand = int(rng.integers(0, index, endpoint=True))
        # rand may be index itself, so grow the list before swapping
        shuffled.append(value)
        shuffled[index], shuffled[rand] = shuffled[rand], value
    return shuffled


def bind(func: Callable[..., U], context: Any, *args: Any) -> Callable[..., U]:
    """pre-apply a context (and optionally leading arguments) to func"""
    if not is_function(func):
        raise TypeError("bind requires a function")
    return partial(func, context, *args)


def functions(obj: Any) -> List[Any]:
    """sorted names of the callable members of a mapping or object"""
    if isinstance(obj, MappingABC):
        names = [key for key, value in obj.items() if is_function(value)]
    else:
        names = [name for name in dir(obj)
                 if not name.startswith('_') and is_function(getattr(obj, name, None))]
    return sorted(names, key=str)


methods = functions
