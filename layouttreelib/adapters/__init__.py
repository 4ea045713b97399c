"""Tree adapters for specific tree structures.

Adapters implement the Tree interface for concrete structures so that the
traversal cursors can walk them.
"""

from .workbench import WorkbenchTree, PANEL_TYPE

__all__ = [
    "WorkbenchTree",
    "PANEL_TYPE",
]
