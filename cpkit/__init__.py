"""Segment trees, disjoint sets, modular integers, Mo's algorithm, flows and string algorithms."""

__version__ = "0.1.0"