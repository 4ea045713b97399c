"""
Filtering cursor for tree traversal.

This cursor wraps another cursor and passes on only the values that satisfy
a condition. It is a post-processing stage: the wrapped traversal runs
unchanged and the filter only decides which of its values are exposed.
"""

from typing import Any, Callable, TypeVar

from .cursor import Cursor, Step, as_cursor

T = TypeVar('T')


class FilteringCursor(Cursor[T]):
    """
    Cursor that yields only the values of another cursor matching a condition.

    The final value of the wrapped cursor may arrive together with its
    completion signal. That value is still tested: if it matches it is
    returned as Step.last, otherwise the filter reports Step.END.

    Attributes:
        source: The wrapped cursor providing values
        condition: Callable returning True for values to keep
        filtered_count: Number of values rejected so far
    """

    def __init__(self, source: Any, condition: Callable[[T], bool]):
        """
        Initialize the filtering cursor.

        Args:
            source: The cursor (or plain iterable) to filter
            condition: Callable(value) -> bool; exceptions it raises propagate
                       to the caller of advance()
        """
        self.source = as_cursor(source)
        self.condition = condition
        self.filtered_count = 0

    def advance(self) -> Step[T]:
        while True:
            step = self.source.advance()

            if step.done:
                if step.has_value and self.condition(step.value):
                    return Step.last(step.value)
                if step.has_value:
                    self.filtered_count += 1
                return Step.END

            if self.condition(step.value):
                return Step.more(step.value)
            self.filtered_count += 1
