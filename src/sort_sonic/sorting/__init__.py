"""In-place sorting engines with optional step instrumentation."""

from sort_sonic.sorting.cocktail import cocktail_sort
from sort_sonic.sorting.insertion import insertion_sort
from sort_sonic.sorting.merge import merge_sort
from sort_sonic.sorting.selection import selection_sort

__all__ = ["cocktail_sort", "insertion_sort", "merge_sort", "selection_sort"]
