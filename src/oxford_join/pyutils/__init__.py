"""Python Utils

This package contains dependency-free Python utility functions used by the
joining functions to check their arguments.

These functions are not part of the module interface and are subject to change.
"""

from .is_iterable import is_collection, is_iterable, is_iterator

__all__ = ["is_collection", "is_iterable", "is_iterator"]
