import warnings
from pathlib import Path
import suite
import dgen
import seqkit
from seqkit import S, from_iterable, from_range, repeat, empty, Enumerable

test = suite.test
assert_that = suite.assert_that

# helper data
numbers = S(range(1, 6))  # 1 through 5


# --- factories ---

@test("from_iterable snapshots its input")
def test_from_iterable_snapshot():
    data = [1, 2, 3]
    seq = from_iterable(data)
    data.append(4)
    assert_that(seq.to.list() == [1, 2, 3], "later changes to the source list should not leak in")


@test("from_iterable accepts generators")
def test_from_iterable_generator():
    seq = from_iterable(x * x for x in range(4))
    assert_that(seq.to.list() == [0, 1, 4, 9], "generator should be materialised once")
    assert_that(seq.to.list() == [0, 1, 4, 9], "second read should see the same data")


@test("from_range, repeat and empty build the expected sequences")
def test_other_factories():
    assert_that(from_range(3, 4).to.list() == [3, 4, 5, 6], "from_range should count from start")
    assert_that(repeat('x', 3).to.list() == ['x', 'x', 'x'], "repeat should repeat the item")
    assert_that(empty().to.list() == [], "empty should have no elements")


@test("enumerable supports iter and len")
def test_iter_and_len():
    assert_that(list(numbers) == [1, 2, 3, 4, 5], "iteration should yield the elements in order")
    assert_that(len(numbers) == 5, "len should count the elements")
    assert_that(isinstance(numbers.take(1), Enumerable), "operations should return enumerables")


# --- where / select ---

@test("where filters and select projects")
def test_where_select():
    evens = numbers.where(lambda x: x % 2 == 0).to.list()
    assert_that(evens == [2, 4], f"expected [2, 4], got {evens}")
    doubled = numbers.select(lambda x: x * 2).to.list()
    assert_that(doubled == [2, 4, 6, 8, 10], f"expected doubled values, got {doubled}")


# --- take / skip ---

@test("take returns the first n elements")
def test_take():
    assert_that(numbers.take(2).to.list() == [1, 2], "take(2) should keep two elements")
    assert_that(numbers.take(10).to.list() == [1, 2, 3, 4, 5], "take past the end keeps everything")


@test("take with zero or negative count is empty")
def test_take_non_positive():
    assert_that(numbers.take(0).to.list() == [], "take(0) should be empty")
    assert_that(numbers.take(-2).to.list() == [], "negative take should be empty, not a tail slice")


@test("skip drops the first n elements")
def test_skip():
    assert_that(numbers.skip(2).to.list() == [3, 4, 5], "skip(2) should drop two elements")
    assert_that(numbers.skip(5).to.list() == [], "skipping everything leaves nothing")
    assert_that(numbers.skip(99).to.list() == [], "skip past the end leaves nothing")
    assert_that(numbers.skip(-3).to.list() == [1, 2, 3, 4, 5], "negative skip keeps everything")


@test("take and skip at the same n reconstruct the sequence")
def test_take_skip_reconstruct():
    data = numbers.to.list()
    for n in range(len(data) + 1):
        rebuilt = numbers.take(n).to.list() + numbers.skip(n).to.list()
        assert_that(rebuilt == data, f"n={n}: got {rebuilt}")


# --- reversed ---

@test("reversed flips the order without touching the source")
def test_reversed():
    data = [1, 2, 3]
    seq = S(data)
    assert_that(seq.reversed().to.list() == [3, 2, 1], "order should be reversed")
    assert_that(seq.to.list() == [1, 2, 3], "source enumerable should be unchanged")
    assert_that(data == [1, 2, 3], "caller list should be unchanged")


@test("reversed twice is the identity")
def test_reversed_involution():
    seq = S(['a', 'b', 'c', 'd'])
    assert_that(seq.reversed().reversed().to.list() == seq.to.list(), "double reverse should round trip")
    assert_that(empty().reversed().to.list() == [], "reversing empty gives empty")


# --- remove ---

@test("remove drops every equal element")
def test_remove():
    assert_that(S([1, 2, 1, 3, 1]).remove(1).to.list() == [2, 3], "all 1s should be gone")
    assert_that(S([1, 2]).remove(9).to.list() == [1, 2], "removing a missing value changes nothing")
    assert_that(S(['a', 'b']).remove('a').to.list() == ['b'], "works for strings too")


@test("module sources compile without escape warnings")
def test_sources_compile_cleanly():
    for module in (seqkit, dgen):
        path = Path(module.__file__)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            compile(path.read_text(encoding="utf-8"), str(path), "exec")


if __name__ == "__main__":
    suite.run(title="seqkit core operations test")
