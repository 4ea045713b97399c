"""Tree abstraction for LayoutTreeLib.

A Tree is the only thing the traversal code knows about the structure it
walks. It answers two questions: what is the root, and what is the child of
a node at a given position. The number of children is discovered by asking
for successive indices until None comes back.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar('T')


class Tree(ABC, Generic[T]):
    """Abstract accessor pair for navigating a tree of nodes of type T.

    Implementations must not cache the structure: each call reflects the
    state of the underlying tree at the moment of the call.
    """

    @abstractmethod
    def get_root(self) -> Optional[T]:
        """Return the root node, or None if the tree is empty.

        Returns:
            The current root node or None
        """
        pass

    @abstractmethod
    def get_child(self, node: T, index: int) -> Optional[T]:
        """Return the child of ``node`` at the given zero-based index.

        Args:
            node: The parent node
            index: Position of the child among its siblings

        Returns:
            The child node, or None once ``index`` is past the last child
        """
        pass


class CallableTree(Tree[T]):
    """Tree built from a pair of plain functions.

    Example:
        tree = CallableTree(lambda: root, lambda node, i: node.kids[i] if i < len(node.kids) else None)
    """

    def __init__(self,
                 get_root: Callable[[], Optional[T]],
                 get_child: Callable[[T, int], Optional[T]]):
        self._get_root = get_root
        self._get_child = get_child

    def get_root(self) -> Optional[T]:
        return self._get_root()

    def get_child(self, node: T, index: int) -> Optional[T]:
        return self._get_child(node, index)
