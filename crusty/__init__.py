"""Sorting algorithms, string splitting, linked structures, a channel, iterator adapters, builders and ownership primitives."""

__version__ = "0.1.0"