"""
Pydantic Schemas — Domain records and API request/response models.
"""
from datetime import datetime
from typing import Optional, Dict, List, Any
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


# ──────────────── Payment records ────────────────

class Payment(BaseModel):
    """A captured payment. Serialized with camelCase keys in the ledger blob."""

    id: str
    payment_method: str  # creditCard | paypal | razorpay | netbanking

    # Credit card
    cardholder_name: Optional[str] = None
    card_number: Optional[str] = None
    expiry_date: Optional[str] = None  # MM/YY
    cvv: Optional[str] = None

    # PayPal
    paypal_email: Optional[str] = None

    # RazorPay
    razorpay_id: Optional[str] = None

    # Net banking
    bank_name: Optional[str] = None
    account_number: Optional[str] = None

    # Common
    amount: float = Field(..., ge=0.01)
    description: str = ""
    date: datetime

    transaction_id: Optional[str] = None  # Set once, on gateway success

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True

    def to_storage(self) -> Dict[str, Any]:
        """JSON-ready dict in the persisted shape (absent fields omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PaymentResponse(BaseModel):
    success: bool
    transaction_id: Optional[str] = None
    message: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


# ──────────────── Payment form ────────────────

class PaymentMethodInfo(BaseModel):
    method: str
    name: str
    transaction_prefix: str
    fields: List[str]


class FieldRuleInfo(BaseModel):
    code: str
    message: str


class PaymentFormRulesResponse(BaseModel):
    method: str
    fields: Dict[str, List[FieldRuleInfo]]


class PaymentFormRequest(BaseModel):
    fields: Dict[str, Any] = Field(..., description="Raw form values keyed by field name (camelCase)")


class ValidationResult(BaseModel):
    valid: bool
    errors: Dict[str, List[str]] = {}


class PaymentView(BaseModel):
    """Display-safe projection of a Payment: masked card number, no CVV."""
    id: str
    payment_method: str
    method_name: str
    cardholder_name: Optional[str] = None
    masked_card_number: str = ""
    expiry_date: Optional[str] = None
    paypal_email: Optional[str] = None
    razorpay_id: Optional[str] = None
    bank_name: Optional[str] = None
    account_number: Optional[str] = None
    amount: float
    description: str = ""
    date: datetime
    transaction_id: Optional[str] = None


class PaymentConfirmation(BaseModel):
    payment: PaymentView
    response: PaymentResponse


# ──────────────── History ────────────────

class HistoryPageResponse(BaseModel):
    items: List[PaymentView]
    page: int
    page_size: int
    total_pages: int
    total_items: int
    page_numbers: List[int]
    page_size_options: List[int]


# ──────────────── Admin ────────────────

class LedgerResetResponse(BaseModel):
    success: bool
    cleared: int
    message: str = ""


# ──────────────── Generic ────────────────

class HealthResponse(BaseModel):
    status: str
    storage: str
    ledger_size: int
    uptime_seconds: float
    version: str


class ErrorResponse(BaseModel):
    detail: str
    errors: Optional[Dict[str, List[str]]] = None
