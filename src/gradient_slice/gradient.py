"""Lazy enumeration of every contiguous window of a sequence.

Windows come out length-major, start-minor: all windows of length 1 from left
to right, then all windows of length 2, and so on up to the full sequence::

    >>> [w.join() for w in Gradient(" abc ", max_width=2)]
    [' ', 'a', 'b', 'c', ' ', ' a', 'ab', 'bc', 'c ']

Each produced item is a view into the source (see :func:`make_view`), so the
source must not be mutated while a :class:`Gradient` or any of its views is in
use. This is not checked.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any, Iterator

from .indexing import total_windows, validate_width, width_limit
from .views import WindowSpan, make_view

logger = logging.getLogger(__name__)


class Gradient:
    """Forward-only iterator over the windows of ``source``.

    ``max_width`` caps the window length; windows longer than it are never
    produced. A spent enumerator stays spent: build a new one to start over.
    """

    def __init__(self, source: Any, max_width: int | None = None) -> None:
        if isinstance(source, Mapping) or not hasattr(source, "__getitem__"):
            raise TypeError(f"source must be an indexable sequence (got {type(source).__name__})")
        try:
            size = len(source)
        except TypeError as exc:
            raise TypeError(f"source must be a sized sequence (got {type(source).__name__})") from exc

        self._source = source
        self._size = size
        self._max_width = validate_width(max_width)
        # next window to produce
        self._length = 1
        self._start = 0
        # last window produced
        self._last: WindowSpan | None = None
        self._produced = 0
        self._reported = False
        logger.debug("gradient created over %s of length %d (max_width=%s)", type(source).__name__, size, max_width)

    @property
    def source(self) -> Any:
        return self._source

    @property
    def size(self) -> int:
        """Length of the source sequence."""
        return self._size

    @property
    def max_width(self) -> int | None:
        return self._max_width

    @property
    def width(self) -> int:
        return self._last.length if self._last else 0

    @property
    def start(self) -> int:
        return self._last.start if self._last else 0

    @property
    def end(self) -> int:
        return self._last.stop if self._last else 0

    def range(self) -> range:
        return range(self.start, self.end)

    def window(self) -> Any:
        """View of the most recently produced window (empty before the first one)."""

        return make_view(self._source, self.start, self.width)

    def finished(self) -> bool:
        return self._length > width_limit(self._size, self._max_width)

    def with_max_width(self, width: int) -> Gradient:
        """Copy this enumerator, progress included, with a new width cap."""

        gradient = copy.copy(self)
        gradient._max_width = validate_width(width)
        return gradient

    def spans(self) -> Iterator[WindowSpan]:
        """Advance through the remaining windows yielding only their positions."""

        while not self.finished():
            yield self._step()
        self._report_exhausted()

    def _step(self) -> WindowSpan:
        span = WindowSpan(self._start, self._length)
        if self._start + self._length < self._size:
            self._start += 1
        else:
            self._start = 0
            self._length += 1
        self._last = span
        self._produced += 1
        return span

    def _report_exhausted(self) -> None:
        if not self._reported:
            self._reported = True
            logger.debug("gradient exhausted after %d windows", self._produced)

    def __iter__(self) -> Gradient:
        return self

    def __next__(self) -> Any:
        if self.finished():
            self._report_exhausted()
            raise StopIteration
        span = self._step()
        return make_view(self._source, span.start, span.length)

    def __length_hint__(self) -> int:
        if self.finished():
            return 0
        done = total_windows(self._size, self._length - 1) if self._length > 1 else 0
        return total_windows(self._size, self._max_width) - done - self._start

    def __repr__(self) -> str:
        return (
            f"Gradient(n={self._size}, max_width={self._max_width}, "
            f"next=(length={self._length}, start={self._start}), finished={self.finished()})"
        )
