"""Record storage layer.

This package holds the in-memory store, its query engine, and the
identifier policies used when records arrive without an identifier.
"""
