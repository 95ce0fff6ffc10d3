"""Testing utilities for arenatree consumers."""

from .fixtures import TreeTestHelper

__all__ = ['TreeTestHelper']
