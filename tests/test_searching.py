import math

import pytest

from algotrace.generators.searching import binary_search_steps, linear_search_steps


def compares(steps):
    return [s for s in steps if s["action"] == "compare"]


class TestLinearSearch:

    def test_default_target_is_middle_element(self, sample_array):
        steps = linear_search_steps(sample_array)
        found = [s for s in steps if s["action"] == "found"]
        assert len(compares(steps)) == 4
        assert [s["indices"] for s in compares(steps)] == [[0], [1], [2], [3]]
        assert found[0]["indices"] == [3]
        assert steps[-1]["action"] == "complete"

    def test_explicit_target(self, sample_array):
        steps = linear_search_steps(sample_array, target=64)
        assert len(compares(steps)) == 1
        assert steps[-1]["indices"] == [0]

    def test_missing_target_scans_everything(self, sample_array):
        steps = linear_search_steps(sample_array, target=1000)
        assert len(compares(steps)) == len(sample_array)
        assert len([s for s in steps if s["action"] == "notmatch"]) == len(sample_array)
        assert steps[-1]["action"] == "notfound"

    def test_compare_result_flags_match(self):
        steps = linear_search_steps([5, 7], target=7)
        assert [s["comparison"]["result"] for s in compares(steps)] == [False, True]

    def test_non_numeric_target_uses_middle(self):
        steps = linear_search_steps([1, 2, 3], target="x")
        assert steps[-1]["action"] == "complete"
        assert steps[-1]["indices"] == [1]


class TestBinarySearch:

    def test_searches_sorted_copy(self, sample_array):
        steps = binary_search_steps(sample_array)
        assert steps[0]["data"] == sorted(sample_array)
        assert steps[-1]["action"] == "complete"

    def test_left_never_exceeds_right(self):
        arr = list(range(0, 200, 3))
        for target in (-1, 0, 57, 58, 198, 500):
            steps = binary_search_steps(arr, target=target)
            for step in steps:
                if step["action"] == "range":
                    left, mid, right = step["indices"]
                    assert left <= mid <= right

    @pytest.mark.parametrize("n", [1, 8, 50, 200])
    def test_iterations_are_logarithmic(self, n):
        arr = list(range(n))
        steps = binary_search_steps(arr, target=-1)
        assert len(compares(steps)) <= math.floor(math.log2(n)) + 1
        assert steps[-1]["action"] == "notfound"

    def test_narrowing_direction(self):
        steps = binary_search_steps([1, 2, 3, 4, 5, 6, 7], target=6)
        moves = [s["action"] for s in steps if s["action"] in ("left", "right")]
        assert moves == ["right"]
        assert steps[-1]["indices"] == [5]

    def test_empty_array_is_not_found(self):
        steps = binary_search_steps([], target=3)
        assert [s["action"] for s in steps] == ["init", "notfound"]

    def test_non_numeric_target_uses_middle(self):
        steps = binary_search_steps([1, 2, 3], target="x")
        assert compares(steps)[0]["comparison"]["right"] == 2
        assert steps[-1]["action"] == "complete"

    def test_non_numeric_values_use_default_array(self, sample_array):
        steps = binary_search_steps(["a", 1])
        assert steps[0]["data"] == sorted(sample_array)
        assert steps[-1]["action"] == "complete"
