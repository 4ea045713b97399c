"""Pull-based cursors for LayoutTreeLib.

A Cursor is an explicit state machine with a single ``advance`` operation.
Each advance returns a Step, which is one of three shapes:

- a value, more to come        (Step.more(value))
- a value, and it is the last  (Step.last(value))
- no value, sequence finished  (Step.END)

The middle shape matters: a sequence may hand over its final element
together with the completion signal, and wrappers such as FilteringCursor
have to look at that element instead of discarding it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Iterable, Iterator, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class Step(Generic[T]):
    """Result of a single Cursor.advance() call."""

    value: Any = None
    done: bool = False
    has_value: bool = False

    # Completion without a value; assigned below the class
    END: ClassVar['Step[Any]']

    @classmethod
    def more(cls, value: T) -> 'Step[T]':
        """A value with more values possibly following."""
        return cls(value=value, done=False, has_value=True)

    @classmethod
    def last(cls, value: T) -> 'Step[T]':
        """The final value of the sequence."""
        return cls(value=value, done=True, has_value=True)


Step.END = Step(done=True)


class Cursor(ABC, Generic[T]):
    """Abstract stateful cursor over a lazily produced sequence.

    Subclasses implement ``advance``. Once a cursor has reported
    completion, further advances must return Step.END.

    Cursors are also ordinary Python iterators. Iteration yields every value
    the cursor produces, including one delivered together with the
    completion signal.
    """

    _exhausted = False

    @abstractmethod
    def advance(self) -> Step[T]:
        """Produce the next step of the sequence.

        Returns:
            Step describing the produced value (if any) and completion
        """
        pass

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._exhausted:
            raise StopIteration
        step = self.advance()
        if step.done:
            self._exhausted = True
        if step.has_value:
            return step.value
        raise StopIteration


class IteratorCursor(Cursor[T]):
    """Cursor over an ordinary Python iterable.

    A plain iterator cannot announce its last element in advance, so every
    value comes back as Step.more and completion is reported as Step.END.
    """

    def __init__(self, iterable: Iterable[T]):
        self._iterator = iter(iterable)
        self._finished = False

    def advance(self) -> Step[T]:
        if self._finished:
            return Step.END
        try:
            value = next(self._iterator)
        except StopIteration:
            self._finished = True
            return Step.END
        return Step.more(value)


def as_cursor(source: Any) -> Cursor:
    """Return ``source`` as a Cursor, wrapping plain iterables."""
    if isinstance(source, Cursor):
        return source
    return IteratorCursor(source)
