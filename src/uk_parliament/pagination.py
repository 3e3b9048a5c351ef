"""Lazy pagination over offset/size based page fetches.

Every paged Parliament endpoint is reduced to a ``fetch(offset, page_size)``
callable returning a :class:`PageResult`. :func:`paginate` turns repeated
calls into one iterator of items, fetching strictly one page at a time and
only when the consumer asks for more.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from uk_parliament.cancellation import CancellationToken, check_cancelled
from uk_parliament.logging_setup import get_logger

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20

logger = get_logger(__name__)


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One page of items plus the total the API reported, if any."""

    items: Sequence[T] = field(default_factory=tuple)
    total_count: int | None = None


PageFetcher = Callable[[int, int], PageResult[T]]


def paginate(
    fetch: PageFetcher[T],
    *,
    page_size: int = DEFAULT_PAGE_SIZE,
    initial_offset: int = 0,
    cancel: CancellationToken | None = None,
) -> Iterator[T]:
    """Yield every item produced by successive calls to ``fetch``.

    Iteration stops after an empty page, after a page shorter than
    ``page_size`` or once ``offset + page_size`` reaches a reported total.
    Errors raised by ``fetch`` reach the consumer on the ``next()`` call
    that needed the page.

    Args:
        fetch: Callable receiving ``(offset, page_size)``.
        page_size: Requested number of items per page.
        initial_offset: Offset of the first page.
        cancel: Token checked before each page fetch.

    Raises:
        ValueError: If ``page_size`` is below one or ``initial_offset`` is negative.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    if initial_offset < 0:
        raise ValueError(f"initial_offset must be >= 0, got {initial_offset}")
    return _iterate(fetch, page_size, initial_offset, cancel)


def _iterate(
    fetch: PageFetcher[T],
    page_size: int,
    offset: int,
    cancel: CancellationToken | None,
) -> Iterator[T]:
    while True:
        check_cancelled(cancel, "paginate")
        page = fetch(offset, page_size)
        items = list(page.items)
        logger.debug("page_fetched", offset=offset, page_size=page_size, count=len(items), total=page.total_count)
        if not items:
            return
        yield from items
        # a server may cap the page size silently, so compare the actual count
        if len(items) < page_size:
            return
        if page.total_count is not None and offset + page_size >= page.total_count:
            return
        offset += page_size


def collect_all(
    fetch: PageFetcher[T],
    *,
    page_size: int = DEFAULT_PAGE_SIZE,
    initial_offset: int = 0,
    cancel: CancellationToken | None = None,
) -> list[T]:
    """Drain :func:`paginate` into a list."""
    return list(paginate(fetch, page_size=page_size, initial_offset=initial_offset, cancel=cancel))


def page_number(offset: int, page_size: int) -> int:
    """Convert an offset into the 1-based page number used by page/page_size APIs."""
    return offset // page_size + 1


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "PageFetcher",
    "PageResult",
    "collect_all",
    "page_number",
    "paginate",
]
