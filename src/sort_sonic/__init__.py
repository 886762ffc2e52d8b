"""SortSonic: sorting algorithms you can watch and hear."""

__version__ = "0.1.0"
