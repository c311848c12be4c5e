import suite
from decimal import Decimal
from fractions import Fraction
from dgen import from_schema
from seqkit import S, empty

test = suite.test
assert_that = suite.assert_that

score_schema = {
    'name': 'word',
    'score': ('pyint', {'min_value': 0, 'max_value': 100})
}


# --- sum ---

@test("sum adds up the elements")
def test_sum_basic():
    result = S([1, 2, 3, 4]).stats.sum()
    assert_that(result == 10, f"expected 10, got {result}")
    assert_that(isinstance(result, int), "sum of ints should come back as a python int")


@test("sum of empty is zero")
def test_sum_empty():
    assert_that(empty().stats.sum() == 0, "sum([]) should be 0")


@test("sum handles floats and fractions")
def test_sum_other_numbers():
    assert_that(S([0.5, 0.25]).stats.sum() == 0.75, "float sum")
    assert_that(S([Fraction(1, 3)] * 3).stats.sum() == 1, "fraction sum should be exact")


@test("sum of large ints stays exact")
def test_sum_no_overflow():
    result = S([2**62, 2**62]).stats.sum()
    assert_that(result == 2**63, f"expected {2**63}, got {result}")
    assert_that(S([2**70, -1]).stats.sum() == 2**70 - 1, "beyond int64 should still be exact")


@test("sum keeps exact types exact")
def test_sum_exact_types():
    total = S([Decimal("0.1")] * 3).stats.sum()
    assert_that(total == Decimal("0.3") and isinstance(total, Decimal), f"got {total!r}")
    assert_that(isinstance(S([Fraction(1, 2), 1]).stats.sum(), Fraction), "mixed fraction and int should stay a fraction")


# --- average ---

@test("average is the arithmetic mean")
def test_average_basic():
    result = S([1, 2, 3, 4]).stats.average()
    assert_that(result == 2.5, f"expected 2.5, got {result}")


@test("average of empty is zero")
def test_average_empty():
    assert_that(empty().stats.average() == 0, "average([]) should be 0, not an error")


@test("average lies between min and max")
def test_average_bounds():
    scores = from_schema(score_schema, seed=7).take(50).select(lambda r: r['score'])
    low, avg, high = scores.stats.min(), scores.stats.average(), scores.stats.max()
    assert_that(low <= avg <= high, f"expected {low} <= {avg} <= {high}")


# --- median ---

@test("median picks the middle of an odd sequence")
def test_median_odd():
    assert_that(S([1, 2, 3]).stats.median() == 2, "median([1,2,3]) should be 2")
    assert_that(S([9]).stats.median() == 9, "single element is its own median")


@test("median averages the middle pair of an even sequence")
def test_median_even():
    assert_that(S([1, 2, 3, 4]).stats.median() == 2.5, "median([1,2,3,4]) should be 2.5")


@test("median sorts a copy and leaves the input alone")
def test_median_no_mutation():
    data = [3, 1, 2]
    seq = S(data)
    assert_that(seq.stats.median() == 2, "unsorted input should still give 2")
    assert_that(seq.to.list() == [3, 1, 2], "enumerable order should be unchanged")
    assert_that(data == [3, 1, 2], "caller list should be unchanged")


@test("median of empty is None")
def test_median_empty():
    assert_that(empty().stats.median() is None, "median([]) should be None")


# --- min / max ---

@test("min and max use natural ordering")
def test_min_max():
    seq = S([3, -1, 2])
    assert_that(seq.stats.min() == -1, "min should be -1")
    assert_that(seq.stats.max() == 3, "max should be 3")


@test("min and max of empty are None")
def test_min_max_empty():
    assert_that(empty().stats.min() is None, "min([]) should be None")
    assert_that(empty().stats.max() is None, "max([]) should be None")


if __name__ == "__main__":
    suite.run(title="seqkit stats test")
