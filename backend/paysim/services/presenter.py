"""
Presenter — Display projections handed to confirmation and history consumers.
"""
from typing import Iterable, List

from paysim.schemas.schemas import Payment, PaymentView
from paysim.services.methods import method_name
from paysim.utils.formatting import mask_card_number


def to_view(payment: Payment) -> PaymentView:
    """Masked, CVV-free view of a payment with its readable method name."""
    return PaymentView(
        id=payment.id,
        payment_method=payment.payment_method,
        method_name=method_name(payment.payment_method),
        cardholder_name=payment.cardholder_name,
        masked_card_number=mask_card_number(payment.card_number),
        expiry_date=payment.expiry_date,
        paypal_email=payment.paypal_email,
        razorpay_id=payment.razorpay_id,
        bank_name=payment.bank_name,
        account_number=payment.account_number,
        amount=payment.amount,
        description=payment.description,
        date=payment.date,
        transaction_id=payment.transaction_id,
    )


def to_views(payments: Iterable[Payment]) -> List[PaymentView]:
    return [to_view(payment) for payment in payments]
