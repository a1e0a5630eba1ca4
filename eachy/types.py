from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Mapping, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Iteratee = Callable[..., Any]
Predicate = Callable[..., Any]
KeySelector = Callable[[T], K]
Memo = Callable[..., U]
KeyOrPath = Union[str, Callable[..., Any]]


class _Marker:
    """a named singleton used where None is a legitimate value"""

    def __init__(self, name: str):
        self._name = name

    def __repr__(self) -> str:
        return self._name


# argument left out by the caller (context, seed)
MISSING = _Marker('MISSING')
NO_SEED = _Marker('NO_SEED')

# index inside a sequence's length that holds no item
HOLE = _Marker('HOLE')


class Flow(Enum):
    """control-flow result an iteratee hands back to each()"""
    CONTINUE = 'continue'
    STOP = 'stop'


class Shape(Enum):
    """the four kinds of collection every operation understands"""
    SEQUENCE = 'sequence'
    MAPPING = 'mapping'
    CHARACTERS = 'characters'
    ABSENT = 'absent'


class Criterion(Generic[T, K]):
    """an item decorated with its computed sort key and original position"""

    __slots__ = ('value', 'criteria', 'position')

    def __init__(self, value: T, criteria: K, position: int):
        self.value = value
        self.criteria = criteria
        self.position = position

    def __repr__(self) -> str:
        return f"Criterion(value={self.value!r}, criteria={self.criteria!r}, position={self.position})"
