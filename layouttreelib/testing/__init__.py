"""Testing utilities for LayoutTreeLib consumers."""

from .fixtures import (
    StubContentItem,
    StubLayout,
    StubWorkbench,
    build_item,
    build_workbench,
    ids,
)

__all__ = [
    'StubContentItem',
    'StubLayout',
    'StubWorkbench',
    'build_item',
    'build_workbench',
    'ids',
]
