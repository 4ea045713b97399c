"""Test fixtures for LayoutTreeLib consumers.

These stand-ins mimic the parts of a workbench the iterators touch: a
``layout`` that may be None, a layout ``root``, and content items with a
``type`` and an ordered ``content_items`` list.
"""

from typing import Any, List, Optional, Sequence, Tuple, Union


class StubContentItem:
    """Minimal content item with a type, an id and child items.

    Example:
        row = StubContentItem("row", "R", [StubContentItem("component", "P1")])
    """

    def __init__(self, type: str, id: Optional[str] = None,
                 content_items: Optional[List['StubContentItem']] = None):
        self.type = type
        self.id = id
        self.content_items = list(content_items or [])

    def add_child(self, item: 'StubContentItem') -> 'StubContentItem':
        """Append ``item`` to the children and return it."""
        self.content_items.append(item)
        return item

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.type!r}, {self.id!r})"


class StubLayout:
    """Layout holding the root content item."""

    def __init__(self, root: Optional[StubContentItem] = None):
        self.root = root


class StubWorkbench:
    """Workbench whose layout may not have been created yet."""

    def __init__(self, layout: Optional[StubLayout] = None):
        self.layout = layout


# ("row", "R", [children...]) or ("component", "P1")
ItemSpec = Union[Tuple[str, str], Tuple[str, str, Sequence[Any]]]


def build_item(spec: ItemSpec) -> StubContentItem:
    """Build a content item tree from nested ``(type, id, children)`` tuples."""
    type_, id_ = spec[0], spec[1]
    children = spec[2] if len(spec) > 2 else []
    return StubContentItem(type_, id_, [build_item(child) for child in children])


def build_workbench(spec: Optional[ItemSpec] = None) -> StubWorkbench:
    """Build a workbench from a nested tuple spec.

    Args:
        spec: Root item spec, or None for a workbench without a layout

    Returns:
        StubWorkbench ready to be iterated

    Example:
        workbench = build_workbench(
            ("row", "R", [("component", "P1"), ("row", "C1", [("component", "P2")])])
        )
    """
    if spec is None:
        return StubWorkbench()
    return StubWorkbench(StubLayout(build_item(spec)))


def ids(items) -> List[Optional[str]]:
    """Return the ids of the given content items in order."""
    return [item.id for item in items]
