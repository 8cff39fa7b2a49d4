import suite
from sparray import from_, from_range, empty, Sparray, NumericSparray, IndexedValue, EmptyReduceError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises
assert_warns = suite.assert_warns

# helper data
numbers = from_range(1, 11)  # 1 through 10
words = from_('apple', 'banana', 'cherry', 'date', 'elderberry')
nested_data = from_([[1, 2], [3, 4, 5], [], [6]])


# access

@test("at supports negative indexes and returns None out of range")
def test_at():
    assert_that(words.at(0) == 'apple', "first element")
    assert_that(words.at(-1) == 'elderberry', "last element")
    assert_that(words.at(-5) == 'apple', "negative index at the front")
    assert_that(words.at(5) is None, "past the end is None")
    assert_that(words.at(-6) is None, "before the start is None")
    assert_that(empty().at(0) is None, "empty sparray has nothing")

    for i in range(numbers.length):
        assert_that(numbers.at(-1 - i) == numbers.at(numbers.length - 1 - i), f"mirror index {i}")


@test("get is a deprecated alias of at")
def test_get():
    assert_that(assert_warns(DeprecationWarning, words.get, -2) == 'date', "should match at(-2)")
    assert_that(assert_warns(DeprecationWarning, words.get, 10) is None, "out of range is None")


@test("keys, values and entries restart on every call")
def test_iterators():
    data = from_('a', 'b', 'c')
    assert_that(list(data.keys()) == [0, 1, 2], "positions")
    assert_that(list(data.values()) == ['a', 'b', 'c'], "elements")
    assert_that(list(data.entries()) == [(0, 'a'), (1, 'b'), (2, 'c')], "pairs")

    first_pass = data.values()
    assert_that(list(first_pass) == ['a', 'b', 'c'], "first pass")
    assert_that(list(first_pass) == [], "an iterator is exhausted once")
    assert_that(list(data.values()) == ['a', 'b', 'c'], "a fresh call starts over")
    assert_that(list(data) == ['a', 'b', 'c'], "the sparray itself is iterable")
    assert_that(list(data) == ['a', 'b', 'c'], "and iterable again")


@test("length, size and emptiness agree")
def test_length():
    assert_that(numbers.length == 10 and numbers.size() == 10 and len(numbers) == 10, "ten elements")
    assert_that(empty().is_empty() and not empty().is_not_empty(), "empty")
    assert_that(numbers.is_not_empty() and not numbers.is_empty(), "not empty")


@test("python indexing, slicing and membership")
def test_python_protocols():
    assert_that(words[1] == 'banana', "integer index")
    assert_that(words[-1] == 'elderberry', "negative index")
    assert_that(words[1:3].to_array() == ['banana', 'cherry'], "slices are sparrays")
    assert_that('date' in words and 'fig' not in words, "membership")
    assert_raises(IndexError, lambda: words[10])


# map / flat_map / flat

@test("map transforms elements and passes index and sparray")
def test_map():
    assert_that(numbers.map(lambda x: x * x).to_array() == [1, 4, 9, 16, 25, 36, 49, 64, 81, 100], "squares")
    assert_that(words.map(lambda w, i: f"{i}:{w}").to_array()[0] == "0:apple", "index is passed")
    assert_that(from_(1, 2).map(lambda x, i, s: s.length).to_array() == [2, 2], "sparray is passed")
    assert_that(words.map(str.upper).first() == 'APPLE', "unbound methods work")


@test("flat_map flattens exactly one level")
def test_flat_map():
    sentences = from_('hello world', 'sparray rocks')
    assert_that(sentences.flat_map(lambda s: s.split()).to_array() == ['hello', 'world', 'sparray', 'rocks'],
                "lists are spliced")
    assert_that(from_(1, 2).flat_map(lambda x: from_(x, x * 10)).to_array() == [1, 10, 2, 20],
                "inner sparrays are unwrapped")
    assert_that(from_(1, 2).flat_map(lambda x: [[x]]).to_array() == [[1], [2]], "only one level")
    assert_that(from_(1, 2).flat_map(lambda x: x + 1).to_array() == [2, 3], "scalars are kept")


@test("flat flattens to the requested depth")
def test_flat():
    nested = from_(1, [2, [3, [4]]], from_(5, from_(6)))
    assert_that(nested.flat().to_array()[:3] == [1, 2, [3, [4]]], "depth 1 list")
    assert_that(nested.flat(2).to_array() == [1, 2, 3, [4], 5, 6], "depth 2")
    assert_that(nested.flat(10).to_array() == [1, 2, 3, 4, 5, 6], "deep")
    assert_that(nested.flat(0) == nested, "depth 0 keeps the content")
    assert_that(from_('ab', ['cd']).flat().to_array() == ['ab', 'cd'], "strings are not split")
    assert_that(nested_data.flat().to_array() == [1, 2, 3, 4, 5, 6], "list of lists")
    assert_that(isinstance(nested_data.flat(), NumericSparray), "flattened numbers are numeric")


# reduce / reduce_right

@test("reduce folds left with or without a seed")
def test_reduce():
    assert_that(numbers.reduce(lambda acc, x: acc + x) == 55, "sum without seed")
    assert_that(numbers.reduce(lambda acc, x: acc + x, 100) == 155, "sum with seed")
    assert_that(from_('a', 'b', 'c').reduce(lambda acc, x: acc + x) == 'abc', "left to right")
    indexes = []
    from_(5, 6, 7).reduce(lambda acc, x, i: indexes.append(i) or acc, 0)
    assert_that(indexes == [0, 1, 2], f"indexes with seed: {indexes}")
    assert_that(empty().reduce(lambda acc, x: acc + x, None) is None, "None is a valid seed")


@test("reduce_right folds from the end")
def test_reduce_right():
    assert_that(from_('a', 'b', 'c').reduce_right(lambda acc, x: acc + x) == 'cba', "right to left")
    indexes = []
    from_(5, 6, 7).reduce_right(lambda acc, x, i: indexes.append(i) or acc)
    assert_that(indexes == [1, 0], f"seedless fold starts next to the last element: {indexes}")


@test("reduce of a single element without seed skips the callback")
def test_reduce_single():
    calls = []
    result = from_(42).reduce(lambda acc, x: calls.append(x) or acc)
    assert_that(result == 42 and calls == [], "element returned untouched")
    result = from_(42).reduce_right(lambda acc, x: calls.append(x) or acc)
    assert_that(result == 42 and calls == [], "same for reduce_right")


@test("reduce of an empty sparray without seed raises")
def test_reduce_empty():
    assert_raises(EmptyReduceError, empty().reduce, lambda acc, x: acc + x)
    assert_raises(EmptyReduceError, empty().reduce_right, lambda acc, x: acc + x)
    assert_raises(TypeError, empty().reduce, lambda acc, x: acc + x)
    assert_that(empty().reduce(lambda acc, x: acc + x, 0) == 0, "seed is returned")


# filter / for_each / distinct / concat

@test("filter keeps matching elements")
def test_filter():
    assert_that(numbers.filter(lambda x: x % 2 == 0).to_array() == [2, 4, 6, 8, 10], "evens")
    assert_that(numbers.filter(lambda x: x > 100).to_array() == [], "no match")
    assert_that(words.filter(lambda w, i: i % 2 == 0).to_array() == ['apple', 'cherry', 'elderberry'],
                "by index")


@test("for_each runs eagerly and returns the same sparray")
def test_for_each():
    seen = []
    returned = words.for_each(lambda w, i: seen.append((i, w)))
    assert_that(returned is words, "should return the original sparray")
    assert_that(seen[0] == (0, 'apple') and len(seen) == 5, "should visit every element")


@test("distinct keeps first occurrences")
def test_distinct():
    assert_that(from_(3, 1, 3, 2, 1).distinct().to_array() == [3, 1, 2], "numbers")
    records = from_({'a': 1}, {'a': 2}, {'a': 1})
    assert_that(records.distinct().to_array() == [{'a': 1}, {'a': 2}], "unhashable values by equality")
    assert_that(empty().distinct().to_array() == [], "empty")


@test("concat splices sequences and sparrays and appends scalars")
def test_concat():
    result = from_(1, 2).concat(3, [4, 5], from_(6), 'seven')
    assert_that(result.to_array() == [1, 2, 3, 4, 5, 6, 'seven'], f"got {result.to_array()}")
    assert_that(from_(1).concat().to_array() == [1], "nothing to add")
    assert_that(from_(1).concat([[2]]).to_array() == [1, [2]], "only one level is spliced")


# slicing and ends

@test("slice is half-open with negative index support")
def test_slice():
    assert_that(numbers.slice(2, 5).to_array() == [3, 4, 5], "middle")
    assert_that(numbers.slice(-3).to_array() == [8, 9, 10], "negative start")
    assert_that(numbers.slice(1, -7).to_array() == [2, 3], "negative end")
    assert_that(numbers.slice().to_array() == numbers.to_array(), "full copy")
    assert_that(numbers.slice(8, 2).to_array() == [], "inverted range is empty")


@test("first and last return an element or a sub-sparray")
def test_first_last():
    assert_that(numbers.first() == 1 and numbers.last() == 10, "single elements")
    assert_that(empty().first() is None and empty().last() is None, "None when empty")
    assert_that(numbers.first(3).to_array() == [1, 2, 3], "leading three")
    assert_that(numbers.last(3).to_array() == [8, 9, 10], "trailing three")
    assert_that(from_(1, 2).first(5).to_array() == [1, 2], "never longer than the data")
    assert_that(from_(1, 2).last(5).to_array() == [1, 2], "never longer than the data")
    assert_that(numbers.last(0).to_array() == [], "zero elements")


@test("reverse and enumerate")
def test_reverse_enumerate():
    assert_that(from_(1, 2, 3).reverse().to_array() == [3, 2, 1], "reversed")
    pairs = from_('x', 'y').enumerate().to_array()
    assert_that(pairs == [IndexedValue(0, 'x'), IndexedValue(1, 'y')], f"got {pairs}")
    assert_that(pairs[1].index == 1 and pairs[1].value == 'y', "named fields")


# join and printing

@test("join uses a distinct separator before the last element")
def test_join():
    assert_that(from_(1, 2, 3, 4, 5).join(' | ', ' | and ') == "1 | 2 | 3 | 4 | and 5", "custom last separator")
    assert_that(from_(1, 2, 3).join() == "1,2,3", "default separator")
    assert_that(from_('a', 'b').join(', ', ' or ') == "a or b", "two elements")
    assert_that(from_('solo').join(', ', ' and ') == "solo", "one element")
    assert_that(empty().join() == "", "no elements")
    assert_that(from_(1, None, 3).join('-') == "1--3", "None becomes an empty string")


@test("string form lists the elements")
def test_str():
    assert_that(str(empty()) == "[ ]", "empty")
    assert_that(str(from_(1, 2, 3)) == "[ 1, 2, 3 ]", "numbers")
    assert_that(str(from_(from_(1), 'a')) == "[ [ 1 ], a ]", "nested sparrays")
    assert_that(repr(from_(1, 2)) == "NumericSparray([1, 2])", f"repr: {repr(from_(1, 2))}")
    assert_that(repr(from_('a')) == "Sparray(['a'])", "generic repr")


# immutability

@test("operations never change the source sparray")
def test_immutability():
    source = from_(3, 1, 2)
    before = source.to_array()
    source.map(lambda x: x * 2)
    source.filter(lambda x: x > 1)
    source.sort()
    source.reverse()
    source.concat(4)
    source.sliding(2)
    source.sample(3)
    source.to_array().append(99)
    assert_that(source.to_array() == before, f"source changed: {source.to_array()}")


@test("equality compares elements")
def test_equality():
    assert_that(from_(1, 2) == from_([1, 2]), "same elements")
    assert_that(from_(1, 2) != from_(2, 1), "order matters")
    assert_that(from_(1, 2) != [1, 2], "plain lists are not sparrays")
    assert_that(hash(from_(1, 2)) == hash(from_(1, 2)), "hash follows elements")


if __name__ == "__main__":
    suite.run(title="sparray core operations test suite")
