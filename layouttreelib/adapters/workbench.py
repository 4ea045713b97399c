"""Workbench adapter for LayoutTreeLib.

Exposes the content item tree of a workbench through the Tree interface.
A workbench is any object with a ``layout`` attribute that is either None
(no layout built yet) or an object whose ``root`` is the top content item.
Content items carry a ``type`` string and an ordered ``content_items`` list.
"""

from typing import Any, Optional

from ..core.tree import Tree

# Content item type used for panels; every other type is a container
PANEL_TYPE = "component"


class WorkbenchTree(Tree[Any]):
    """Tree over the live content items of a workbench.

    Nothing is copied: the root and the children are read from the
    workbench every time they are requested.
    """

    def __init__(self, workbench: Any):
        """Initialize the adapter.

        Args:
            workbench: Workbench whose content items are to be traversed
        """
        self.workbench = workbench

    def get_root(self) -> Optional[Any]:
        layout = self.workbench.layout
        if layout is None:
            return None
        return layout.root

    def get_child(self, node: Any, index: int) -> Optional[Any]:
        children = node.content_items
        if 0 <= index < len(children):
            return children[index]
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(workbench={self.workbench!r})"
