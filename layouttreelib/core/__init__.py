"""Core abstractions for LayoutTreeLib.

This package contains the tree accessor interface, the cursor protocol and
the traversal and filtering cursors built on top of them.
"""

from .tree import Tree, CallableTree
from .cursor import Cursor, Step, IteratorCursor, as_cursor
from .traverser import TraversalFrame, ReverseDepthFirstCursor, create_cursor
from .filtering import FilteringCursor

__all__ = [
    "Tree",
    "CallableTree",
    "Cursor",
    "Step",
    "IteratorCursor",
    "as_cursor",
    "TraversalFrame",
    "ReverseDepthFirstCursor",
    "create_cursor",
    "FilteringCursor",
]
