"""Table of selectable sorting algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, MutableSequence, Optional

from sort_sonic.errors import InvalidChoiceError
from sort_sonic.sorting.cocktail import cocktail_sort
from sort_sonic.sorting.insertion import insertion_sort
from sort_sonic.sorting.merge import merge_sort
from sort_sonic.sorting.selection import selection_sort
from sort_sonic.visualization.host import VizContext

SortFn = Callable[[MutableSequence[int], Optional[VizContext]], None]


@dataclass(frozen=True)
class Algorithm:
    key: str
    name: str
    label: str
    sort: SortFn


ALGORITHMS: tuple[Algorithm, ...] = (
    Algorithm("1", "insertion", "Insertion sort", insertion_sort),
    Algorithm("2", "selection", "Selection sort", selection_sort),
    Algorithm("3", "merge", "Merge sort", merge_sort),
    Algorithm("4", "cocktail", "Cocktail shaker sort", cocktail_sort),
)


def resolve_algorithm(choice: str) -> Algorithm:
    """Return the algorithm named by a menu key or name."""
    wanted = choice.strip().lower()
    for algorithm in ALGORITHMS:
        if wanted in (algorithm.key, algorithm.name):
            return algorithm
    raise InvalidChoiceError(choice.strip())


def menu_lines() -> Iterator[str]:
    yield "Choose a sorting algorithm to visualise"
    for algorithm in ALGORITHMS:
        yield f"{algorithm.key}: {algorithm.label}"
