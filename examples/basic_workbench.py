#!/usr/bin/env python3
"""
Basic workbench iteration example for LayoutTreeLib.

This example demonstrates:
- Iterating over every content item of a layout
- Picking out panels and containers
- Driving a cursor by hand with advance()
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from layouttreelib import containers_in, content_items_in, panels_in
from layouttreelib.testing import build_workbench


def main():
    """Demonstrate iteration over a small workbench layout."""
    workbench = build_workbench(
        ("row", "main", [
            ("stack", "editors", [("component", "editor"), ("component", "preview")]),
            ("column", "side", [("component", "files"), ("component", "console")]),
        ])
    )

    print("All content items (children before parents):")
    for item in content_items_in(workbench, {"order": "dfsReverse"}):
        print(f"  {item.type:<10} {item.id}")

    print(f"\nPanels:     {', '.join(item.id for item in panels_in(workbench))}")
    print(f"Containers: {', '.join(item.id for item in containers_in(workbench))}")

    print("\nStepping through panels manually:")
    cursor = panels_in(workbench)
    while True:
        step = cursor.advance()
        if step.has_value:
            print(f"  {step.value.id} (done={step.done})")
        if step.done:
            break


if __name__ == "__main__":
    main()
