from paysim.services.blob_store import BlobStore
from paysim.services.checkout import CheckoutService, PaymentValidationError
from paysim.services.gateway import GatewaySimulator
from paysim.services.ledger import PaymentLedger, LedgerError
from paysim.services.paginator import HistoryPager, paginate

__all__ = [
    "BlobStore", "CheckoutService", "PaymentValidationError", "GatewaySimulator",
    "PaymentLedger", "LedgerError", "HistoryPager", "paginate",
]
