"""
History Routes — Paginated, newest-first view of the payment ledger.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from paysim.config import get_settings
from paysim.dependencies import get_ledger
from paysim.schemas.schemas import HistoryPageResponse
from paysim.services.ledger import PaymentLedger
from paysim.services.paginator import paginate, sort_by_date_desc
from paysim.services.presenter import to_views

settings = get_settings()

router = APIRouter(prefix="/api/history", tags=["History"])


@router.get("", response_model=HistoryPageResponse)
def get_history(
    page: int = Query(1, ge=1, description="1-based page index; clamped to the last page"),
    page_size: Optional[int] = Query(None, description="One of PAGE_SIZE_OPTIONS"),
    ledger: PaymentLedger = Depends(get_ledger),
):
    """Return one page of completed payments, newest first."""
    size = page_size or settings.DEFAULT_PAGE_SIZE
    if size not in settings.PAGE_SIZE_OPTIONS:
        raise HTTPException(
            status_code=422,
            detail=f"page_size must be one of {settings.PAGE_SIZE_OPTIONS}",
        )

    result = paginate(sort_by_date_desc(ledger.snapshot()), size, page)

    return HistoryPageResponse(
        items=to_views(result.items),
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
        total_items=result.total_items,
        page_numbers=result.page_numbers,
        page_size_options=settings.PAGE_SIZE_OPTIONS,
    )
