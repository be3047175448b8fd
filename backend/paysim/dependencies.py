"""
FastAPI dependencies exposing the objects built at startup.
The app owns one instance of each; handlers receive them explicitly.
"""
from fastapi import Request

from paysim.services.checkout import CheckoutService
from paysim.services.gateway import GatewaySimulator
from paysim.services.ledger import PaymentLedger


def get_ledger(request: Request) -> PaymentLedger:
    return request.app.state.ledger


def get_gateway(request: Request) -> GatewaySimulator:
    return request.app.state.gateway


def get_checkout(request: Request) -> CheckoutService:
    return CheckoutService(gateway=get_gateway(request), ledger=get_ledger(request))
