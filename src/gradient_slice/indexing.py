"""Counting and random access over the length-major window enumeration."""

from __future__ import annotations

from typing import Any

from .views import WindowSpan, make_view


def validate_width(max_width: int | None) -> int | None:
    """Return ``max_width`` unchanged or raise ``ValueError`` if it is unusable."""

    if max_width is None:
        return None
    if isinstance(max_width, bool) or not isinstance(max_width, int):
        raise ValueError(f"max_width must be an integer (got {type(max_width).__name__})")
    if max_width < 1:
        raise ValueError(f"max_width must be >= 1 (got {max_width})")
    return max_width


def width_limit(n: int, max_width: int | None = None) -> int:
    """Longest window length produced for a source of ``n`` elements."""

    max_width = validate_width(max_width)
    return n if max_width is None else min(n, max_width)


def windows_of_length(n: int, length: int) -> int:
    return max(n - length + 1, 0)


def total_windows(n: int, max_width: int | None = None) -> int:
    """Number of windows enumerated over ``n`` elements.

    Without a width cap this is ``n * (n + 1) / 2``; with a cap ``w`` it is the
    sum of ``n - l + 1`` for ``l`` in ``1..w``.
    """

    if n < 0:
        raise ValueError(f"sequence length cannot be negative (got {n})")
    w = width_limit(n, max_width)
    return w * n - w * (w - 1) // 2


def span_at(n: int, index: int, max_width: int | None = None) -> WindowSpan:
    """Return the span produced at position ``index`` of the enumeration.

    Negative indices count back from the last window, like list indexing.
    """

    total = total_windows(n, max_width)
    if index < 0:
        index += total
    if not 0 <= index < total:
        raise IndexError(f"window index out of range for {total} windows")

    length = 1
    while index >= windows_of_length(n, length):
        index -= windows_of_length(n, length)
        length += 1
    return WindowSpan(start=index, length=length)


def window_at(source: Any, index: int, max_width: int | None = None) -> Any:
    """Return the view at position ``index`` without enumerating the windows before it."""

    span = span_at(len(source), index, max_width)
    return make_view(source, span.start, span.length)
