"""Concrete tree representations sharing the arena core."""

from .opt_tree import OptTree
from .vec_tree import VecTree

__all__ = [
    'OptTree',
    'VecTree',
]
