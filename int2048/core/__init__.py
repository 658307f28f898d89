"""
Core numeric primitives, value types, and contracts.

This package is independent of any I/O: stream adapters live in
int2048.adapters.
"""
