"""Sorting, linked lists, trees, graph and grid search, shortest paths, union-find and spanning trees."""

__version__ = "0.1.0"