"""
Admin Routes — Administrative ledger maintenance.
"""
from fastapi import APIRouter, Depends

from paysim.dependencies import get_ledger
from paysim.schemas.schemas import LedgerResetResponse
from paysim.services.ledger import PaymentLedger

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.post("/ledger/reset", response_model=LedgerResetResponse)
def reset_ledger(ledger: PaymentLedger = Depends(get_ledger)):
    """Bulk-clear every recorded payment. Not reversible."""
    cleared = ledger.clear()
    return LedgerResetResponse(
        success=True,
        cleared=cleared,
        message=f"Cleared {cleared} payment(s) from storage key '{ledger.storage_key}'",
    )
