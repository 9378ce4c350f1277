"""Traversal-and-filter engine: predicates, directory walker, collector."""
