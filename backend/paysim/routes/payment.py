"""
Payment Routes — Form rules, inline validation and payment submission.
Handles: Credit Card, PayPal, RazorPay, Net Banking.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from paysim.dependencies import get_checkout
from paysim.schemas.schemas import (
    ErrorResponse, FieldRuleInfo, PaymentConfirmation, PaymentFormRequest,
    PaymentFormRulesResponse, PaymentMethodInfo, ValidationResult,
)
from paysim.services.checkout import CheckoutService, PaymentValidationError
from paysim.services.methods import (
    METHOD_FIELDS, PaymentMethod, is_known_method, method_name, transaction_prefix,
)
from paysim.services.presenter import to_view
from paysim.services.rule_selector import form_rules, normalize_fields, validate_form
from paysim.utils.submission_guard import single_submission

router = APIRouter(prefix="/api/payment", tags=["Payment"])


@router.get("/methods", response_model=list[PaymentMethodInfo])
def list_methods():
    """List supported payment methods and the fields each one needs."""
    return [
        PaymentMethodInfo(
            method=method.value,
            name=method_name(method),
            transaction_prefix=transaction_prefix(method),
            fields=list(METHOD_FIELDS[method.value]),
        )
        for method in PaymentMethod
    ]


@router.get("/rules/{method}", response_model=PaymentFormRulesResponse)
def get_form_rules(method: str):
    """Rules the form must enforce while ``method`` is selected."""
    if not is_known_method(method):
        raise HTTPException(status_code=404, detail=f"Unknown payment method: {method}")

    return PaymentFormRulesResponse(
        method=method,
        fields={
            name: [FieldRuleInfo(code=rule.code, message=rule.message) for rule in rules]
            for name, rules in form_rules(method).items()
        },
    )


@router.post("/validate", response_model=ValidationResult)
def validate_payment_form(payload: PaymentFormRequest):
    """Inline validation of raw form values; nothing is processed."""
    errors = validate_form(normalize_fields(payload.fields))
    return ValidationResult(valid=not errors, errors=errors)


@router.post(
    "/submit",
    response_model=PaymentConfirmation,
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def submit_payment(
    payload: PaymentFormRequest,
    checkout: CheckoutService = Depends(get_checkout),
    _form_id: Optional[str] = Depends(single_submission),
):
    """Validate and process a payment. Declines return success=false, not an error."""
    try:
        payment, response = await checkout.submit(payload.fields)
    except PaymentValidationError as exc:
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(detail=str(exc), errors=exc.errors).model_dump(),
        )

    return PaymentConfirmation(payment=to_view(payment), response=response)
