"""
'     ___   __    ___  _  _  _  _
'    | __| /  \  / __|| || || || |
'    | _| | () || (__ | __ | \_. |
'    |___| \__/  \___||_||_| |__/
'
'    each, and everything built on it.
"""

# expose the collection model
from .collection import Collection, classify
from .errors import EachyError, EmptyReductionError, InvalidIterateeError
from .types import Flow, Shape, Criterion, HOLE, MISSING, NO_SEED

# expose the factory functions
from .factories import range_, sparse

# iteration and traversal
from .extensions.core import (
    identity,
    each,
    map_,
    reduce_,
    any_,
    every,
    find,
    filter_,
    reject,
    include,
    invoke,
    pluck,
    # aliases
    for_each,
    collect,
    foldl,
    inject,
    some,
    all_,
    detect,
    select,
    contains
)

# aggregates
from .extensions.stats import max_, min_
from .extensions.terminal import to_array, values, size

# ordering and grouping
from .extensions.ordering import sort_by, sorted_index
from .extensions.grouping import group_by

# predicates and utilities
from .extensions.predicates import is_array, is_function, is_string, is_arguments, is_empty
from .extensions.utility import shuffle, bind, functions, methods

# define what `import *` does
__all__ = [
    "Collection",
    "classify",
    "EachyError",
    "EmptyReductionError",
    "InvalidIterateeError",
    "Flow",
    "Shape",
    "Criterion",
    "HOLE",
    "MISSING",
    "NO_SEED",
    "range_",
    "sparse",
    "identity",
    "each",
    "map_",
    "reduce_",
    "any_",
    "every",
    "find",
    "filter_",
    "reject",
    "include",
    "invoke",
    "pluck",
    "for_each",
    "collect",
    "foldl",
    "inject",
    "some",
    "all_",
    "detect",
    "select",
    "contains",
    "max_",
    "min_",
    "to_array",
    "values",
    "size",
    "sort_by",
    "sorted_index",
    "group_by",
    "is_array",
    "is_function",
    "is_string",
    "is_arguments",
    "is_empty",
    "shuffle",
    "bind",
    "functions",
    "methods"
]
