"""
History Paginator — Page slicing for the payment history view.
"""
import math
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from paysim.schemas.schemas import Payment

DEFAULT_PAGE_SIZE = 5
PAGE_SIZE_OPTIONS: Tuple[int, ...] = (5, 10, 20, 50)


@dataclass(frozen=True)
class Page:
    items: Tuple[Payment, ...]
    page: int
    page_size: int
    total_pages: int
    total_items: int

    @property
    def page_numbers(self) -> List[int]:
        return page_numbers(self.total_pages)


def sort_by_date_desc(payments: Sequence[Payment]) -> List[Payment]:
    """Newest first. Stable, so same-instant payments keep insertion order."""
    return sorted(payments, key=lambda payment: payment.date, reverse=True)


def total_pages(count: int, page_size: int) -> int:
    _check_page_size(page_size)
    return max(1, math.ceil(count / page_size))


def clamp_page(page_index: int, pages: int) -> int:
    return min(max(1, page_index), max(1, pages))


def page_numbers(pages: int) -> List[int]:
    return list(range(1, max(1, pages) + 1))


def paginate(payments: Sequence[Payment], page_size: int, page_index: int) -> Page:
    """Slice ``payments`` into the 1-based page ``page_index``, clamped to range."""
    pages = total_pages(len(payments), page_size)
    page = clamp_page(page_index, pages)
    start = (page - 1) * page_size
    return Page(
        items=tuple(payments[start:start + page_size]),
        page=page,
        page_size=page_size,
        total_pages=pages,
        total_items=len(payments),
    )


def _check_page_size(page_size: int) -> None:
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        raise ValueError(f"page_size must be a positive integer, got {page_size!r}")


@dataclass
class HistoryPager:
    """Pagination state for one history view, fed by ledger snapshots."""

    page_size: int = DEFAULT_PAGE_SIZE
    page_size_options: Tuple[int, ...] = PAGE_SIZE_OPTIONS
    current_page: int = 1
    payments: List[Payment] = field(default_factory=list)
    _unsubscribe: Optional[Callable[[], None]] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        if self.page_size not in self.page_size_options:
            raise ValueError(f"Unsupported page size {self.page_size}; choose from {self.page_size_options}")

    def attach(self, ledger) -> None:
        """Follow a ledger's snapshots until ``detach`` is called."""
        self.detach()
        self._unsubscribe = ledger.subscribe(self.update)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def update(self, payments: Sequence[Payment]) -> None:
        self.payments = sort_by_date_desc(payments)
        self.current_page = clamp_page(self.current_page, self.total_pages)

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.payments), self.page_size)

    @property
    def current(self) -> Page:
        return paginate(self.payments, self.page_size, self.current_page)

    @property
    def page_numbers(self) -> List[int]:
        return page_numbers(self.total_pages)

    def next_page(self) -> None:
        if self.current_page < self.total_pages:
            self.current_page += 1

    def previous_page(self) -> None:
        if self.current_page > 1:
            self.current_page -= 1

    def go_to_page(self, page: int) -> None:
        if 1 <= page <= self.total_pages:
            self.current_page = page

    def change_page_size(self, page_size: int) -> None:
        if page_size not in self.page_size_options:
            raise ValueError(f"Unsupported page size {page_size}; choose from {self.page_size_options}")
        self.page_size = page_size
        self.current_page = 1
