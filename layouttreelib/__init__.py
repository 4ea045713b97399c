"""LayoutTreeLib - Lazy traversal of workbench layout trees.

LayoutTreeLib walks the tree of content items of a workbench (rows, columns,
stacks and the panels inside them) and hands the items out one at a time.

    from layouttreelib import panels_in

    for panel in panels_in(workbench):
        ...

The traversal itself works on any structure that implements the Tree
interface (get_root / get_child), not only on workbenches.
"""

__version__ = "0.1.0"

from .config import (
    IterationOrder,
    IterationOptions,
    LayoutTreeError,
    UnsupportedOrderError,
    parse_order,
    resolve_options,
)
from .core import (
    Tree,
    CallableTree,
    Cursor,
    Step,
    IteratorCursor,
    as_cursor,
    TraversalFrame,
    ReverseDepthFirstCursor,
    create_cursor,
    FilteringCursor,
)
from .adapters import WorkbenchTree, PANEL_TYPE
from .api import (
    content_items_in,
    panels_in,
    containers_in,
    items_matching,
    is_panel,
    is_container,
)

__all__ = [
    "__version__",
    # Config
    "IterationOrder",
    "IterationOptions",
    "LayoutTreeError",
    "UnsupportedOrderError",
    "parse_order",
    "resolve_options",
    # Core
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
    # Adapters
    "WorkbenchTree",
    "PANEL_TYPE",
    # API
    "content_items_in",
    "panels_in",
    "containers_in",
    "items_matching",
    "is_panel",
    "is_container",
]
