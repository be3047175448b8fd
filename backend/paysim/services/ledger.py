"""
Payment Ledger — Append-only, change-notifying store of completed payments.

The in-memory list is authoritative for the running process. Every append
rewrites the whole list into a single durable blob; if that write fails the
fault is logged and the process carries on with its in-memory state.
"""
import json
import logging
import threading
from typing import Callable, Iterable, List, Tuple

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from paysim.schemas.schemas import Payment
from paysim.services.blob_store import BlobStore
from paysim.services.methods import PaymentMethod

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "payments"

Snapshot = Tuple[Payment, ...]
Subscriber = Callable[[Snapshot], None]


class LedgerError(Exception):
    """Raised when the ledger cannot serialize its contents."""


def serialize_payments(payments: Iterable[Payment]) -> str:
    try:
        return json.dumps([payment.to_storage() for payment in payments])
    except (TypeError, ValueError) as exc:
        raise LedgerError(f"Unable to serialize payments: {exc}") from exc


def deserialize_payments(raw: str) -> List[Payment]:
    """Parse a stored blob. Raises ValueError on any malformed content."""
    records = json.loads(raw)
    if not isinstance(records, list):
        raise ValueError(f"Expected a JSON array, got {type(records).__name__}")

    payments = []
    for record in records:
        if not isinstance(record, dict):
            raise ValueError(f"Expected a JSON object, got {type(record).__name__}")
        # Records written before multi-method support carry no method tag
        record.setdefault("paymentMethod", PaymentMethod.CREDIT_CARD.value)
        payments.append(Payment.model_validate(record))
    return payments


class PaymentLedger:
    """Process-wide ledger; construct once at startup and pass it around."""

    def __init__(self, store: BlobStore, storage_key: str = DEFAULT_STORAGE_KEY):
        self._store = store
        self._storage_key = storage_key
        self._payments: Snapshot = ()
        self._subscribers: List[Subscriber] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._payments)

    @property
    def storage_key(self) -> str:
        return self._storage_key

    # ─── Reads ───────────────────────────────────────────────────────

    def snapshot(self) -> Snapshot:
        """Current payments in insertion order."""
        return self._payments

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback``; it immediately receives the current snapshot.

        Returns a function that unsubscribes the callback.
        """
        with self._lock:
            self._subscribers.append(callback)
            self._deliver(callback, self._payments)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    # ─── Writes ──────────────────────────────────────────────────────

    def load(self) -> Snapshot:
        """Restore the ledger from durable storage, or start empty."""
        payments: List[Payment] = []
        try:
            raw = self._store.get(self._storage_key)
        except SQLAlchemyError:
            logger.exception("Error reading saved payments from storage key %r", self._storage_key)
            raw = None

        if raw:
            try:
                payments = deserialize_payments(raw)
            except (ValueError, ValidationError):
                logger.exception("Error parsing saved payments under storage key %r", self._storage_key)
                payments = []

        with self._lock:
            self._payments = tuple(payments)
            self._notify()
        logger.info("Ledger loaded with %d payment(s)", len(payments))
        return self._payments

    def append(self, payment: Payment) -> Snapshot:
        """Append a completed payment and persist the whole list."""
        with self._lock:
            updated = self._payments + (payment,)
            blob = serialize_payments(updated)

            self._payments = updated
            self._notify()
            self._persist(blob)
            return updated

    def clear(self) -> int:
        """Administrative reset: drop every record, in memory and on disk."""
        with self._lock:
            cleared = len(self._payments)
            self._payments = ()
            self._notify()
            try:
                self._store.delete(self._storage_key)
            except SQLAlchemyError:
                logger.exception("Error clearing saved payments under storage key %r", self._storage_key)
            logger.warning("Ledger reset: %d payment(s) cleared", cleared)
            return cleared

    def close(self) -> None:
        with self._lock:
            self._subscribers.clear()

    # ─── Internals ───────────────────────────────────────────────────

    def _persist(self, blob: str) -> None:
        try:
            self._store.put(self._storage_key, blob)
        except (SQLAlchemyError, OSError):
            logger.exception("Error saving payments to storage key %r", self._storage_key)

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            self._deliver(callback, self._payments)

    @staticmethod
    def _deliver(callback: Subscriber, payments: Snapshot) -> None:
        try:
            callback(payments)
        except Exception:
            logger.exception("Ledger subscriber %r failed", callback)

