import pytest

from algotrace.generators.sorting import (
    SORTERS,
    bubble_sort_steps,
    insertion_sort_steps,
    merge_sort_steps,
    quick_sort_steps,
)

INPUTS = [
    [64, 34, 25, 12, 22, 11, 90],
    [3, 1, 2],
    [1],
    [5, 5, 1, 5, 0],
    [9, 8, 7, 6, 5, 4, 3, 2, 1],
    [1, 2, 3, 4],
    [2.5, -1, 0, 2.5, 7],
]


def actions(steps, name):
    return [s for s in steps if s["action"] == name]


@pytest.mark.parametrize("name", sorted(SORTERS))
@pytest.mark.parametrize("arr", INPUTS)
class TestSortedResult:

    def test_terminal_step_is_sorted_permutation(self, name, arr):
        steps = SORTERS[name](arr)
        last = steps[-1]
        assert last["action"] == "complete"
        assert last["data"] == sorted(arr)

    def test_starts_with_untouched_input(self, name, arr):
        steps = SORTERS[name](arr)
        assert steps[0]["action"] == "init"
        assert steps[0]["data"] == arr

    def test_does_not_mutate_input(self, name, arr):
        original = list(arr)
        SORTERS[name](arr)
        assert arr == original


@pytest.mark.parametrize("name", ["bubble", "selection", "quick", "heap"])
@pytest.mark.parametrize("arr", INPUTS)
def test_swap_replay_reproduces_result(name, arr):
    steps = SORTERS[name](arr)
    replay = list(arr)
    for step in actions(steps, "swap"):
        src, dst = step["swap"]["from"], step["swap"]["to"]
        replay[src], replay[dst] = replay[dst], replay[src]
    assert replay == steps[-1]["data"]


class TestBubbleSort:

    def test_three_element_scenario(self):
        steps = bubble_sort_steps([3, 1, 2])
        moves = [(s["action"], s["indices"]) for s in steps if s["action"] in ("compare", "swap")]
        assert moves == [
            ("compare", [0, 1]),
            ("swap", [0, 1]),
            ("compare", [1, 2]),
            ("swap", [1, 2]),
            ("compare", [0, 1]),
        ]
        assert steps[-1]["data"] == [1, 2, 3]

    @pytest.mark.parametrize("n", [1, 2, 5, 7, 10])
    def test_compare_count_is_quadratic(self, n):
        steps = bubble_sort_steps(list(range(n, 0, -1)))
        assert len(actions(steps, "compare")) == n * (n - 1) // 2

    def test_compare_carries_comparison(self):
        steps = bubble_sort_steps([3, 1])
        compare = actions(steps, "compare")[0]
        assert compare["comparison"] == {"left": 3, "right": 1, "result": True}

    def test_sorted_milestones_walk_down(self):
        steps = bubble_sort_steps([4, 3, 2, 1])
        assert [s["indices"] for s in actions(steps, "sorted")] == [[3], [2], [1]]


class TestStableSorts:

    def test_merge_sort_takes_left_on_ties(self):
        steps = merge_sort_steps([2, 1, 2])
        ties = [s for s in actions(steps, "compare") if s["comparison"]["left"] == s["comparison"]["right"]]
        assert ties
        assert all(s["comparison"]["result"] is False for s in ties)

    def test_insertion_sort_stops_at_equal_key(self):
        steps = insertion_sort_steps([1, 1])
        compares = actions(steps, "compare")
        assert len(compares) == 1
        assert compares[0]["comparison"]["result"] is False
        assert actions(steps, "shift") == []

    def test_insertion_sort_emits_failing_compare(self):
        steps = insertion_sort_steps([1, 3, 2])
        results = [s["comparison"]["result"] for s in actions(steps, "compare")]
        assert results == [False, True, False]


class TestQuickSort:

    def test_pivot_is_last_element(self):
        steps = quick_sort_steps([3, 1, 2])
        first_pivot = actions(steps, "pivot")[0]
        assert first_pivot["indices"] == [2]

    def test_pivot_placement_recorded_as_swap(self):
        steps = quick_sort_steps([3, 1, 2])
        assert any(s["swap"] == {"from": 2, "to": 1} for s in actions(steps, "swap"))

    def test_empty_input(self):
        steps = quick_sort_steps([])
        assert [s["action"] for s in steps] == ["init", "complete"]
