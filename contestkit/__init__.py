"""Algorithms and data structures for competitive programming.

Number theory, modular and big integers, hashing, string search, range-query
trees, heaps and ordered sets, graph and tree algorithms, and Mo's ordering.
"""

__version__ = "0.1.0"