"""In-place sorting algorithms sharing a common ``Sorter`` interface."""

from __future__ import annotations

import bisect
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, MutableSequence


class Sorter(ABC):
    """Something that sorts a mutable sequence in place."""

    @abstractmethod
    def sort(self, items: MutableSequence[Any]) -> None:
        """Sort ``items`` in ascending order, in place."""


def _swap(items: MutableSequence[Any], a: int, b: int) -> None:
    items[a], items[b] = items[b], items[a]


def _rotate_one_right(items: MutableSequence[Any], start: int, stop: int) -> None:
    """Move ``items[stop]`` to ``start``, shifting ``items[start:stop]`` right by one."""
    items.insert(start, items.pop(stop))


class StdSort(Sorter):
    """Delegates to the built-in list sort."""

    def sort(self, items: MutableSequence[Any]) -> None:
        items.sort()


class BubbleSort(Sorter):
    """Repeatedly swaps adjacent out-of-order pairs until none remain."""

    def sort(self, items: MutableSequence[Any]) -> None:
        swapped = True
        while swapped:
            swapped = False
            for i in range(1, len(items)):
                if items[i - 1] > items[i]:
                    _swap(items, i - 1, i)
                    swapped = True


class HeapSort(Sorter):
    """Builds a max-heap, then repeatedly moves its root to the end."""

    def sort(self, items: MutableSequence[Any]) -> None:
        size = len(items)
        for index in reversed(range(size)):
            self._shift(items, index, size)

        for last in range(size - 1, 0, -1):
            _swap(items, 0, last)
            self._shift(items, 0, last)

    @classmethod
    def _shift(cls, items: MutableSequence[Any], current: int, size: int) -> None:
        cls._swap_if_greater(items, current, current * 2 + 1, size)
        cls._swap_if_greater(items, current, current * 2 + 2, size)

    @classmethod
    def _swap_if_greater(
        cls, items: MutableSequence[Any], parent: int, child: int, size: int
    ) -> None:
        if child < size and items[child] > items[parent]:
            _swap(items, parent, child)
            cls._shift(items, child, size)


@dataclass(frozen=True)
class InsertionSort(Sorter):
    """Insertion sort; ``smart`` uses binary search to find each insertion point."""

    smart: bool

    def sort(self, items: MutableSequence[Any]) -> None:
        for unsorted in range(1, len(items)):
            if self.smart:
                position = bisect.bisect_left(items, items[unsorted], 0, unsorted)
                _rotate_one_right(items, position, unsorted)
            else:
                i = unsorted
                while i > 0 and items[i - 1] > items[i]:
                    _swap(items, i - 1, i)
                    i -= 1


class MergeSort(Sorter):
    """Top-down merge sort that merges halves in place by rotation."""

    def sort(self, items: MutableSequence[Any]) -> None:
        self._mergesort(items, 0, len(items))

    @classmethod
    def _mergesort(cls, items: MutableSequence[Any], lo: int, hi: int) -> None:
        length = hi - lo
        if length <= 1:
            return
        if length == 2:
            if items[lo] > items[lo + 1]:
                _swap(items, lo, lo + 1)
            return

        mid = lo + length // 2
        cls._mergesort(items, lo, mid)
        cls._mergesort(items, mid, hi)
        cls._merge(items, lo, mid, hi)

    @staticmethod
    def _merge(items: MutableSequence[Any], lo: int, mid: int, hi: int) -> None:
        left = lo
        right = mid
        while left <= mid and right < hi:
            if items[left] <= items[right]:
                left += 1
            else:
                _rotate_one_right(items, left, right)
                left += 1
                mid += 1
                right += 1


class QuickSort(Sorter):
    """Quicksort using the first element of each range as the pivot."""

    def sort(self, items: MutableSequence[Any]) -> None:
        self._quicksort(items, 0, len(items))

    @classmethod
    def _quicksort(cls, items: MutableSequence[Any], lo: int, hi: int) -> None:
        length = hi - lo
        if length <= 1:
            return
        if length == 2:
            if items[lo] > items[lo + 1]:
                _swap(items, lo, lo + 1)
            return

        pivot = items[lo]
        rest = lo + 1
        left = 0
        right = length - 2

        while left <= right and right != 0:
            if items[rest + left] <= pivot:
                left += 1
            elif items[rest + right] > pivot:
                right -= 1
            else:
                _swap(items, rest + left, rest + right)
                left += 1
                right -= 1

        _swap(items, lo, lo + left)

        cls._quicksort(items, lo, lo + left)
        cls._quicksort(items, lo + left + 1, hi)


class SelectionSort(Sorter):
    """Repeatedly selects the smallest remaining element."""

    def sort(self, items: MutableSequence[Any]) -> None:
        for unsorted in range(len(items)):
            smallest = min(range(unsorted, len(items)), key=items.__getitem__)
            if smallest != unsorted:
                _swap(items, smallest, unsorted)