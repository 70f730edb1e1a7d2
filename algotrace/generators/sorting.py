"""
Sorting trace generators.

Every generator works on its own copy of the input and emits:
init -> (compare -> mutation)* with milestone steps -> complete.
Comparisons are strict ``>`` on the element values; the stable variants
(insertion, merge) only move an element past a strictly greater one.
"""

from typing import Any, Dict, List, Sequence

from ..steps import TraceRecorder, comparison, swap


def bubble_sort_steps(arr: Sequence) -> List[Dict[str, Any]]:
    a = list(arr)
    n = len(a)
    rec = TraceRecorder()
    rec.array("init", f"Starting Bubble Sort with {n} elements", a)

    for i in range(n - 1):
        rec.array("pass", f"Pass {i + 1}: comparing adjacent elements", a)
        for j in range(n - i - 1):
            greater = a[j] > a[j + 1]
            rec.array(
                "compare",
                f"Comparing arr[{j}] = {a[j]} with arr[{j + 1}] = {a[j + 1]}",
                a, [j, j + 1],
                comparison=comparison(a[j], a[j + 1], greater),
            )
            if greater:
                a[j], a[j + 1] = a[j + 1], a[j]
                rec.array(
                    "swap", f"Swapping {a[j + 1]} and {a[j]}",
                    a, [j, j + 1], swap=swap(j, j + 1),
                )
        rec.array("sorted", f"Element at position {n - i - 1} is now in its final position",
                  a, [n - i - 1])

    rec.array("complete", "Array is now sorted", a)
    return rec.steps


def selection_sort_steps(arr: Sequence) -> List[Dict[str, Any]]:
    a = list(arr)
    n = len(a)
    rec = TraceRecorder()
    rec.array("init", "Starting Selection Sort: finding the minimum of the unsorted part", a)

    for i in range(n - 1):
        min_idx = i
        rec.array("select", f"Pass {i + 1}: starting with index {i} as minimum", a, [i])

        for j in range(i + 1, n):
            greater = a[min_idx] > a[j]
            rec.array(
                "compare",
                f"Comparing arr[{min_idx}] = {a[min_idx]} with arr[{j}] = {a[j]}",
                a, [min_idx, j],
                comparison=comparison(a[min_idx], a[j], greater),
            )
            if greater:
                min_idx = j
                rec.array("newmin", f"New minimum found at index {j}: {a[j]}", a, [min_idx])

        if min_idx != i:
            a[i], a[min_idx] = a[min_idx], a[i]
            rec.array(
                "swap", f"Swapping minimum {a[i]} into position {i}",
                a, [i, min_idx], swap=swap(min_idx, i),
            )

        rec.array("sorted", f"Position {i} now holds its final element", a, [i])

    rec.array("complete", "Array is now sorted", a)
    return rec.steps


def insertion_sort_steps(arr: Sequence) -> List[Dict[str, Any]]:
    a = list(arr)
    n = len(a)
    rec = TraceRecorder()
    rec.array("init", "Starting Insertion Sort: growing a sorted prefix one element at a time", a)

    for i in range(1, n):
        key = a[i]
        j = i - 1
        rec.array("select", f"Processing element at index {i}: {key}", a, [i])

        while j >= 0:
            greater = a[j] > key
            rec.array(
                "compare", f"Is {a[j]} > {key}? {'Yes, shifting' if greater else 'No, stop'}",
                a, [j, j + 1],
                comparison=comparison(a[j], key, greater),
            )
            if not greater:
                break
            a[j + 1] = a[j]
            rec.array("shift", f"Shifting {a[j]} to position {j + 1}", a, [j + 1])
            j -= 1

        a[j + 1] = key
        rec.array("insert", f"Inserting {key} at position {j + 1}", a, [j + 1])

    rec.array("complete", "Array is now sorted", a)
    return rec.steps


def merge_sort_steps(arr: Sequence) -> List[Dict[str, Any]]:
    a = list(arr)
    rec = TraceRecorder()
    rec.array("init", "Starting Merge Sort: divide and conquer", a)

    def merge(left: int, mid: int, right: int):
        left_part = a[left:mid + 1]
        right_part = a[mid + 1:right + 1]
        rec.array("divide", f"Merging {left_part} and {right_part}", a,
                  list(range(left, right + 1)))

        i = j = 0
        k = left
        while i < len(left_part) and j < len(right_part):
            greater = left_part[i] > right_part[j]
            rec.array(
                "compare", f"Comparing {left_part[i]} and {right_part[j]}",
                a, [k],
                comparison=comparison(left_part[i], right_part[j], greater),
            )
            if greater:
                a[k] = right_part[j]
                j += 1
            else:
                a[k] = left_part[i]
                i += 1
            rec.array("merge", f"Merged {a[k]} into position {k}", a, [k])
            k += 1

        while i < len(left_part):
            a[k] = left_part[i]
            rec.array("merge", f"Copying remaining {left_part[i]}", a, [k])
            i += 1
            k += 1

        while j < len(right_part):
            a[k] = right_part[j]
            rec.array("merge", f"Copying remaining {right_part[j]}", a, [k])
            j += 1
            k += 1

    def sort(left: int, right: int):
        if left < right:
            mid = (left + right) // 2
            sort(left, mid)
            sort(mid + 1, right)
            merge(left, mid, right)

    sort(0, len(a) - 1)
    rec.array("complete", "Array is now sorted", a)
    return rec.steps


def quick_sort_steps(arr: Sequence) -> List[Dict[str, Any]]:
    a = list(arr)
    rec = TraceRecorder()
    rec.array("init", "Starting Quick Sort: partitioning around a pivot", a)

    def partition(low: int, high: int) -> int:
        pivot = a[high]
        rec.array("pivot", f"Selecting pivot {pivot} at index {high}", a, [high])
        i = low - 1

        for j in range(low, high):
            greater = pivot > a[j]
            rec.array(
                "compare", f"Comparing arr[{j}] = {a[j]} with pivot {pivot}",
                a, [j, high],
                comparison=comparison(pivot, a[j], greater),
            )
            if greater:
                i += 1
                a[i], a[j] = a[j], a[i]
                rec.array("swap", f"Swapping {a[j]} and {a[i]}", a, [i, j], swap=swap(i, j))

        if i + 1 != high:
            a[i + 1], a[high] = a[high], a[i + 1]
            rec.array("swap", f"Moving pivot {pivot} to index {i + 1}",
                      a, [i + 1, high], swap=swap(high, i + 1))
        rec.array("pivotpos", f"Pivot {pivot} placed at final position {i + 1}", a, [i + 1])
        return i + 1

    def sort(low: int, high: int):
        if low < high:
            pi = partition(low, high)
            sort(low, pi - 1)
            sort(pi + 1, high)
        elif low == high:
            rec.array("sorted", f"Single element at index {low} is in place", a, [low])

    sort(0, len(a) - 1)
    rec.array("complete", "Array is now sorted", a)
    return rec.steps


def heap_sort_steps(arr: Sequence) -> List[Dict[str, Any]]:
    a = list(arr)
    n = len(a)
    rec = TraceRecorder()
    rec.array("init", "Starting Heap Sort: building a max heap", a)

    def heapify(size: int, i: int):
        largest = i
        for child in (2 * i + 1, 2 * i + 2):
            if child >= size:
                continue
            greater = a[child] > a[largest]
            rec.array(
                "compare", f"Comparing child arr[{child}] = {a[child]} with arr[{largest}] = {a[largest]}",
                a, [child, largest],
                comparison=comparison(a[child], a[largest], greater),
            )
            if greater:
                largest = child

        if largest != i:
            a[i], a[largest] = a[largest], a[i]
            rec.array(
                "swap", f"Heapifying: swapping {a[largest]} and {a[i]}",
                a, [i, largest], swap=swap(i, largest),
            )
            heapify(size, largest)

    for i in range(n // 2 - 1, -1, -1):
        heapify(n, i)

    for end in range(n - 1, 0, -1):
        a[0], a[end] = a[end], a[0]
        rec.array("swap", f"Moving max {a[end]} to position {end}", a, [0, end], swap=swap(0, end))
        rec.array("sorted", f"Position {end} now holds its final element", a, [end])
        heapify(end, 0)

    rec.array("complete", "Array is now sorted", a)
    return rec.steps


SORTERS = {
    "bubble": bubble_sort_steps,
    "selection": selection_sort_steps,
    "insertion": insertion_sort_steps,
    "merge": merge_sort_steps,
    "quick": quick_sort_steps,
    "heap": heap_sort_steps,
}
