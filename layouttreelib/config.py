"""Configuration system for LayoutTreeLib.

This module defines how callers pick the order in which the content items
of a workbench are produced. Options can be given as an IterationOptions
instance or as a plain mapping with an ``order`` key.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union


class LayoutTreeError(Exception):
    """Base class for errors raised by LayoutTreeLib."""
    pass


class UnsupportedOrderError(LayoutTreeError, ValueError):
    """Raised when an iteration order is requested that is not implemented."""

    def __init__(self, order: Any):
        self.order = order
        supported = ', '.join(member.value for member in IterationOrder)
        super().__init__(
            f"Unknown iteration order: {order}. Choose from: {supported}"
        )


class IterationOrder(Enum):
    """The order in which tree nodes are produced.

    Despite its name, DFS_REVERSE yields children before their parent and
    visits siblings left to right (post-order).
    """
    DFS_REVERSE = "dfsReverse"


@dataclass
class IterationOptions:
    """Options that influence the behaviour of a content item iterator."""

    order: IterationOrder = IterationOrder.DFS_REVERSE


OptionsLike = Union[IterationOptions, Mapping[str, Any], None]


def parse_order(order: Union[IterationOrder, str]) -> IterationOrder:
    """Convert an order name or enum value to an IterationOrder.

    Args:
        order: Order as enum or string

    Returns:
        IterationOrder enum value

    Raises:
        UnsupportedOrderError: If the order is not recognized
    """
    if isinstance(order, IterationOrder):
        return order

    # Names are matched exactly
    order_map = {member.value: member for member in IterationOrder}

    if isinstance(order, str) and order in order_map:
        return order_map[order]

    raise UnsupportedOrderError(order)


def resolve_options(options: OptionsLike = None) -> IterationOptions:
    """Merge caller options over the defaults.

    Keys other than ``order`` in a mapping are ignored.

    Args:
        options: None, an IterationOptions, or a mapping of option names

    Returns:
        IterationOptions with a validated order

    Raises:
        UnsupportedOrderError: If the requested order is not recognized
        TypeError: If options is neither IterationOptions nor a mapping
    """
    if options is None:
        return IterationOptions()

    if isinstance(options, IterationOptions):
        return IterationOptions(order=parse_order(options.order))

    if not isinstance(options, Mapping):
        raise TypeError(
            f"options must be IterationOptions or a mapping, not {type(options).__name__}"
        )

    effective = IterationOptions()
    if 'order' in options:
        effective.order = parse_order(options['order'])
    return effective

