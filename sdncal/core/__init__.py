"""
Core calendar arithmetic, domain models and contracts.

This package contains the pure SDN conversion algorithms and the value
types they operate on; nothing here performs I/O or keeps state.
"""
