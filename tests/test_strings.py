import itertools
import math
import string

from hypothesis import given, strategies as st

from dsakit.strings import most_frequent_letter, permutations, subsets


def test_most_frequent_letter_empty_defaults_to_a():
    assert most_frequent_letter("") == "a"
    assert most_frequent_letter("123 !?") == "a"


def test_most_frequent_letter_is_case_insensitive():
    assert most_frequent_letter("ZZz") == "z"
    assert most_frequent_letter("bBa") == "b"


def test_most_frequent_letter_tie_goes_to_earliest():
    assert most_frequent_letter("yxxy") == "x"


@given(st.text(alphabet=string.ascii_letters + "0123 ", max_size=40))
def test_most_frequent_letter_has_maximal_count(text):
    result = most_frequent_letter(text)
    lowered = text.lower()
    best = max(lowered.count(letter) for letter in string.ascii_lowercase)
    assert lowered.count(result) == best
    earlier = string.ascii_lowercase[: string.ascii_lowercase.index(result)]
    assert all(lowered.count(letter) < best for letter in earlier)


def test_permutations_order_for_three():
    assert permutations([1, 2, 3]) == [
        [1, 2, 3],
        [1, 3, 2],
        [2, 1, 3],
        [2, 3, 1],
        [3, 2, 1],
        [3, 1, 2],
    ]


def test_permutations_leave_input_untouched():
    nums = [4, 5, 6]
    first = permutations(nums)[0]
    assert nums == [4, 5, 6]
    assert first == nums


def test_permutations_of_empty():
    assert permutations([]) == [[]]


@given(st.lists(st.integers(), unique=True, max_size=5))
def test_permutations_match_all_orderings(nums):
    result = permutations(nums)
    assert len(result) == math.factorial(len(nums))
    assert {tuple(p) for p in result} == set(itertools.permutations(nums))


def test_subsets_order_for_three():
    assert subsets([1, 2, 3]) == [
        [],
        [3],
        [2],
        [2, 3],
        [1],
        [1, 3],
        [1, 2],
        [1, 2, 3],
    ]


def test_subsets_of_empty():
    assert subsets([]) == [[]]


@given(st.lists(st.integers(), unique=True, max_size=6))
def test_subsets_match_all_combinations(nums):
    result = subsets(nums)
    assert len(result) == 2 ** len(nums)
    expected = {
        combo
        for size in range(len(nums) + 1)
        for combo in itertools.combinations(nums, size)
    }
    assert {tuple(s) for s in result} == expected
    assert result[0] == []
    assert result[-1] == nums