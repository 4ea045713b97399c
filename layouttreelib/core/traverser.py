"""Tree traversal strategies for LayoutTreeLib.

Traversers are cursors that walk a Tree in a particular order. They work
with any Tree implementation and keep their own explicit stack, so deep
trees do not run into the interpreter's recursion limit.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Type, TypeVar, Union

from ..config import IterationOrder, UnsupportedOrderError, parse_order
from .cursor import Cursor, Step
from .tree import Tree

T = TypeVar('T')

logger = logging.getLogger(__name__)


@dataclass
class TraversalFrame(Generic[T]):
    """A node on the traversal stack and the index of its next child."""

    node: T
    next_child_index: int = 0


class ReverseDepthFirstCursor(Cursor[T]):
    """Depth-first traversal that yields every node after its descendants.

    Children are visited in ascending index order, so for a root R with
    children [A, B] the produced order is A's subtree, A, B's subtree, B, R.
    The root is always the last node and is delivered with the completion
    signal (Step.last).

    Cycles are not detected; a tree that contains one never terminates.
    """

    def __init__(self, tree: Tree[T]):
        """Initialize the cursor and seed the stack with the root.

        Args:
            tree: Tree for navigating the structure
        """
        self.tree = tree
        self._stack: List[TraversalFrame[T]] = []

        root = tree.get_root()
        if root is not None:
            self._stack.append(TraversalFrame(root))
        else:
            logger.debug("Tree has no root; traversal is empty")

    def advance(self) -> Step[T]:
        stack = self._stack
        while stack:
            frame = stack[-1]
            child = self.tree.get_child(frame.node, frame.next_child_index)

            if child is None:
                # All children produced; the node itself comes next
                stack.pop()
                if not stack:
                    return Step.last(frame.node)
                return Step.more(frame.node)

            frame.next_child_index += 1
            stack.append(TraversalFrame(child))

        return Step.END


_CURSOR_CLASSES: Dict[IterationOrder, Type[Cursor]] = {
    IterationOrder.DFS_REVERSE: ReverseDepthFirstCursor,
}


def create_cursor(order: Union[IterationOrder, str], tree: Tree[Any]) -> Cursor:
    """Create a traversal cursor for the given order.

    Args:
        order: Iteration order as enum or name
        tree: Tree to traverse

    Returns:
        Cursor producing the nodes of ``tree`` in the requested order

    Raises:
        UnsupportedOrderError: If the order is not recognized
    """
    order = parse_order(order)
    cursor_class = _CURSOR_CLASSES.get(order)
    if cursor_class is None:
        raise UnsupportedOrderError(order.value)

    logger.debug("Creating %s cursor over %s", order.value, tree.__class__.__name__)
    return cursor_class(tree)
