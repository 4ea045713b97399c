"""High-level API for LayoutTreeLib.

This module provides the functional entry points for iterating over the
content items of a workbench. Each call builds a fresh WorkbenchTree, so the
returned cursor walks the layout as it is when the cursor is advanced.
"""

import logging
from typing import Any, Callable

from .adapters.workbench import WorkbenchTree, PANEL_TYPE
from .config import OptionsLike, resolve_options
from .core.cursor import Cursor
from .core.filtering import FilteringCursor
from .core.traverser import create_cursor

logger = logging.getLogger(__name__)


def is_panel(item: Any) -> bool:
    """Return True if the content item is a panel (leaf component)."""
    return item.type == PANEL_TYPE


def is_container(item: Any) -> bool:
    """Return True if the content item is a row, column, stack or other container."""
    return item.type != PANEL_TYPE


def content_items_in(workbench: Any, options: OptionsLike = None) -> Cursor:
    """Iterate over the content items of a workbench.

    Both panels (leaf nodes) and containers (rows, columns and stacks) are
    returned. If you need the panels only, use panels_in(). If you need the
    containers only, use containers_in().

    Args:
        workbench: Workbench whose content items are to be iterated over
        options: IterationOptions or mapping, e.g. {"order": "dfsReverse"}

    Returns:
        Cursor over the content items; also usable in a for loop

    Raises:
        UnsupportedOrderError: If the requested order is not recognized

    Example:
        >>> for item in content_items_in(workbench):
        ...     print(item.type)
    """
    effective = resolve_options(options)
    return create_cursor(effective.order, WorkbenchTree(workbench))


def items_matching(
    workbench: Any,
    condition: Callable[[Any], bool],
    options: OptionsLike = None
) -> Cursor:
    """Iterate over the content items of a workbench that satisfy a condition.

    The traversal order is applied first and the condition is applied to the
    resulting sequence.

    Args:
        workbench: Workbench whose content items are to be iterated over
        condition: Callable(item) -> bool selecting the items to return
        options: IterationOptions or mapping

    Returns:
        Cursor over the matching content items
    """
    cursor = content_items_in(workbench, options)
    logger.debug("Filtering content items with %r", condition)
    return FilteringCursor(cursor, condition)


def panels_in(workbench: Any, options: OptionsLike = None) -> Cursor:
    """Iterate over the panels of a workbench.

    Only panels are returned by this iterator; containers are skipped.
    """
    return items_matching(workbench, is_panel, options)


def containers_in(workbench: Any, options: OptionsLike = None) -> Cursor:
    """Iterate over the containers of a workbench.

    Only containers are returned by this iterator; panels are skipped.
    """
    return items_matching(workbench, is_container, options)
