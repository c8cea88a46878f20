"""Zero-copy window views over caller-owned sequences."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class WindowSpan:
    """Position of a window inside a source of known length."""

    start: int
    length: int

    @property
    def stop(self) -> int:
        return self.start + self.length

    def as_slice(self) -> slice:
        return slice(self.start, self.stop)

    def as_dict(self) -> dict[str, int]:
        return {"start": self.start, "length": self.length}


def _same_element(a: Any, b: Any) -> bool:
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    return bool(a == b)


class WindowView(Sequence):
    """Read-only view of ``source[start:start + length]``.

    The view keeps a reference to the source and reads through it on every
    access; nothing is copied. Mutating the source while a view is alive is a
    logic error: the view will silently reflect the new contents (or raise
    ``IndexError`` if the source shrank).
    """

    __slots__ = ("_source", "_reader", "_start", "_length")

    def __init__(self, source: Any, start: int, length: int) -> None:
        if start < 0 or length < 0:
            raise ValueError(f"start and length must be non-negative (got {start}, {length})")
        if start + length > len(source):
            raise ValueError(
                f"window [{start}, {start + length}) exceeds source of length {len(source)}"
            )
        self._source = source
        # positional access; pandas [] is label-based
        self._reader = source.iloc if isinstance(source, (pd.Series, pd.DataFrame)) else source
        self._start = start
        self._length = length

    @property
    def source(self) -> Any:
        return self._source

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._start + self._length

    @property
    def span(self) -> WindowSpan:
        return WindowSpan(self._start, self._length)

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            lo, hi, step = index.indices(self._length)
            if step != 1:
                raise ValueError("window views only support contiguous slices")
            return WindowView(self._source, self._start + lo, max(hi - lo, 0))
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("window index out of range")
        return self._reader[self._start + index]

    def __iter__(self) -> Iterator[Any]:
        source = self._reader
        for i in range(self._start, self._start + self._length):
            yield source[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Sequence, np.ndarray)):
            return NotImplemented
        if len(other) != self._length:
            return False
        return all(_same_element(a, b) for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"WindowView({self.to_list()!r}, start={self._start}, length={self._length})"

    def to_list(self) -> list[Any]:
        return list(self)

    def join(self, sep: str = "") -> str:
        """Concatenate a view over characters (or strings) into one string."""

        return sep.join(self)

    def tobytes(self) -> bytes:
        return bytes(self)

    def to_numpy(self) -> np.ndarray:
        """Return the window as an array; a true numpy view for ndarray sources."""

        if isinstance(self._source, np.ndarray):
            return self._source[self._start : self.stop]
        return np.asarray(self.to_list())


def make_view(source: Any, start: int, length: int) -> Any:
    """Build the cheapest read-only view of ``[start, start + length)``.

    ``numpy.ndarray`` and ``memoryview`` slicing already share memory with the
    source, so those are sliced natively. pandas objects are sliced by
    position through ``iloc``, since their ``[]`` looks up index labels.
    Everything else is wrapped in a :class:`WindowView`, since slicing a list,
    str or bytes would copy.
    """

    if isinstance(source, (np.ndarray, memoryview)):
        return source[start : start + length]
    if isinstance(source, (pd.Series, pd.DataFrame)):
        return source.iloc[start : start + length]
    return WindowView(source, start, length)
