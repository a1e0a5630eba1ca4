import numpy as np
import pandas as pd

import suite
from eachy import each, for_each, classify, is_empty, sparse, Flow, Shape, HOLE

test = suite.test
assert_that = suite.assert_that


class Stooges:
    four = 4

    def __init__(self):
        self.one = 'X'


class Boat:
    def __init__(self):
        self.length = 50


class Point:
    __slots__ = ('a', 'b')

    def __init__(self):
        self.a = 1
        self.b = 2


class LyingLength:
    """claims five items but only indexes two"""

    def __len__(self):
        return 5

    def __getitem__(self, index):
        if index < 2:
            return index
        raise IndexError(index)


# --- absent input ---

@test("each returns without calling on None")
def test_each_none():
    calls = []
    each(None, lambda num, i: calls.append(i))
    assert_that(calls == [], "iteratee should never run for None")
    assert_that(each(None, lambda x: x) is None, "each returns None")


# --- sequences ---

@test("each provides value and index in order")
def test_each_values_and_indices():
    seen = []
    each([1, 2, 3], lambda num, i: seen.append((num, i)))
    assert_that(seen == [(1, 0), (2, 1), (3, 2)], f"unexpected visits: {seen}")


@test("each passes the original collection as third argument")
def test_each_collection_argument():
    data = [1, 2, 3]
    checks = []
    each(data, lambda num, index, arr: checks.append(arr is data and arr[index] == num))
    assert_that(checks == [True, True, True], "iteratee should see the collection itself")


@test("each skips holes in sparse sequences")
def test_each_sparse():
    seen = []
    each(sparse(6, {0: 'a', 3: 'd', 5: 'f'}), lambda value, i: seen.append((i, value)))
    assert_that(seen == [(0, 'a'), (3, 'd'), (5, 'f')], f"holes should be skipped: {seen}")


@test("each splits a string into characters")
def test_each_string():
    answer = []
    each("pisvejc", lambda char, i: answer.append(char))
    assert_that("".join(answer) == "pisvejc", "characters should rebuild the string")
    assert_that(all(len(char) == 1 for char in answer), "every item should be one character")


@test("each hands iteratees taking *args all three arguments")
def test_each_var_args():
    calls = []
    each(['a'], lambda *args: calls.append(args))
    assert_that(len(calls) == 1 and len(calls[0]) == 3, f"expected a three argument call: {calls}")


# --- context ---

@test("each binds a context ahead of the item")
def test_each_context_value():
    answers = []
    each([1, 2, 3], lambda this, num, i: answers.append(this + num == 10 + i + 1), 10)
    assert_that(answers == [True, True, True], "context should be the first argument")


@test("each exposes context object properties")
def test_each_context_object():
    answers = []
    each([1, 2, 3], lambda this, num: answers.append(num * this['multiplier']), {'multiplier': 5})
    assert_that(answers == [5, 10, 15], f"context lookup failed: {answers}")


# --- mappings and objects ---

@test("each walks mapping keys in order")
def test_each_mapping():
    seen = []
    each({'one': 1, 'two': 2, 'three': 3}, lambda value, key: seen.append((key, value)))
    assert_that(seen == [('one', 1), ('two', 2), ('three', 3)], f"unexpected visits: {seen}")


@test("each treats a mapping with a length key as a mapping")
def test_each_length_decoy():
    seen = []
    each({'length': 50}, lambda value, key: seen.append((key, value)))
    assert_that(seen == [('length', 50)], "length key must not make a sequence of holes")

    seen = []
    each(Boat(), lambda value, key: seen.append((key, value)))
    assert_that(seen == [('length', 50)], "length attribute must not make a sequence either")


@test("each ignores class level attributes")
def test_each_own_attributes():
    obj = Stooges()
    obj.one = 1
    obj.two = 2
    obj.three = 3
    keys, values = [], []
    each(obj, lambda value, key: (keys.append(key), values.append(value)))
    assert_that(keys == ['one', 'two', 'three'], f"class attribute leaked: {keys}")
    assert_that(values == [1, 2, 3], "instance values should override the initial one")


@test("each walks the attributes of slotted objects")
def test_each_slotted_object():
    seen = []
    each(Point(), lambda value, key: seen.append((key, value)))
    assert_that(seen == [('a', 1), ('b', 2)], f"slot attributes should be visited: {seen}")
    assert_that(not is_empty(Point()), "a slotted object with values is not empty")


# --- early exit ---

@test("each stops a sequence walk on Flow.STOP")
def test_each_stop_sequence():
    seen = []

    def visit(num):
        seen.append(num)
        return Flow.STOP if num == 2 else Flow.CONTINUE

    each([1, 2, 3, 4], visit)
    assert_that(seen == [1, 2], f"nothing after the stop should run: {seen}")


@test("each stops a mapping walk on Flow.STOP")
def test_each_stop_mapping():
    seen = []

    def visit(value, key):
        seen.append(key)
        return Flow.STOP

    each({'a': 1, 'b': 2, 'c': 3}, visit)
    assert_that(seen == ['a'], f"mapping walk should stop too: {seen}")


@test("for_each is an alias of each")
def test_for_each_alias():
    assert_that(for_each is each, "alias should be the same function")


# --- other inputs ---

@test("each walks numpy arrays and pandas series by position")
def test_each_numpy_pandas():
    seen = []
    each(np.array([4, 5]), lambda value, i: seen.append((i, value)))
    assert_that(seen == [(0, 4), (1, 5)], f"array walk: {seen}")

    seen = []
    series = pd.Series([10, 20, 30], index=['a', 'b', 'c'])
    each(series, lambda value, i, s: seen.append((i, value, s is series)))
    assert_that(seen == [(0, 10, True), (1, 20, True), (2, 30, True)], f"series walk: {seen}")


@test("each materializes non-indexable iterables")
def test_each_iterables():
    seen = []
    each((n * n for n in range(3)), lambda value, i: seen.append((i, value)))
    assert_that(seen == [(0, 0), (1, 1), (2, 4)], f"generator walk: {seen}")

    seen = []
    each({7}, lambda value: seen.append(value))
    assert_that(seen == [7], "sets should be walked")


# --- classification ---

@test("classify assigns the four shapes")
def test_classify_shapes():
    assert_that(classify(None).shape is Shape.ABSENT, "None is absent")
    assert_that(classify("ab").shape is Shape.CHARACTERS, "strings are characters")
    assert_that(classify([1]).shape is Shape.SEQUENCE, "lists are sequences")
    assert_that(classify((1, 2)).shape is Shape.SEQUENCE, "tuples are sequences")
    assert_that(classify(range(3)).shape is Shape.SEQUENCE, "ranges are sequences")
    assert_that(classify({'length': 2}).shape is Shape.MAPPING, "dicts are mappings")
    assert_that(classify(Stooges()).shape is Shape.MAPPING, "plain objects are mappings")


@test("classify rejects a length that overstates the indexable extent")
def test_classify_lying_length():
    assert_that(classify(LyingLength()).shape is Shape.MAPPING, "inaccurate length must not be a sequence")


@test("classify keeps holes in the slot view")
def test_classify_slots():
    source = classify(sparse(3, {1: 'b'}))
    assert_that(len(source) == 3, "length counts holes")
    assert_that(source.values() == ['b'], "values skip holes")
    assert_that(source.slots() == [HOLE, 'b', HOLE], "slots keep holes")


if __name__ == "__main__":
    suite.main("eachy each test suite")
