"""Algorithms and data structures: prefix sums, segment trees, union-find, tries, link-cut trees, suffix arrays and graph algorithms."""

__version__ = "0.1.0"