from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, List, Optional, Sequence, TypeVar, Union, overload

T = TypeVar("T")

# Hard ceiling on page size, applied whatever the caller asks for.
MAX_PAGE_LIMIT = 50


class SliceView(Sequence[T]):
    """Read-only window ``[start, stop)`` over another sequence. Nothing is copied."""

    __slots__ = ("_items", "_start", "_stop")

    def __init__(self, items: Sequence[T], start: int, stop: int):
        self._items = items
        self._start = min(max(start, 0), len(items))
        self._stop = min(max(self._start, stop), len(items))

    def __len__(self) -> int:
        return self._stop - self._start

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> List[T]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[T, List[T]]:
        span = range(self._start, self._stop)
        if isinstance(index, slice):
            return [self._items[i] for i in span[index]]
        return self._items[span[index]]

    def __iter__(self) -> Iterator[T]:
        items = self._items
        for i in range(self._start, self._stop):
            yield items[i]

    def __repr__(self) -> str:
        return f"SliceView({list(self)!r})"


@dataclass(frozen=True)
class Page(Generic[T]):
    total: int
    has_more: bool
    remaining: int
    data: SliceView[T]


def paginate(
    items: Sequence[T],
    offset: Optional[int] = None,
    limit: Optional[int] = None,
) -> Page[T]:
    """
    Window ``items`` by offset/limit. Inputs are clamped, never rejected:
    - offset defaults to 0 and is clamped to [0, total]
    - limit defaults to everything after offset, then capped at MAX_PAGE_LIMIT
    """
    total = len(items)
    start = min(max(offset or 0, 0), total)
    requested = total - start if limit is None else max(limit, 0)
    end = min(start + min(requested, MAX_PAGE_LIMIT), total)

    return Page(
        total=total,
        has_more=end < total,
        remaining=total - end,
        data=SliceView(items, start, end),
    )
