# lawyer_point/routers/payments_routes.py

from typing import List

from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from ..db import get_session
from ..deps import require_self
from ..schemas import PaymentCreate, PaymentIntentCreate, PaymentIntentPublic, PaymentPublic, PaymentResult
from ..services import payments
from ..services.payments import PaymentGateway

router = APIRouter(
    tags=["payments"],
)


def get_payment_gateway(request: Request) -> PaymentGateway:
    return request.app.state.payment_gateway


@router.post("/create-payment-intent", response_model=PaymentIntentPublic)
def create_payment_intent(
    body: PaymentIntentCreate,
    gateway: PaymentGateway = Depends(get_payment_gateway),
):
    return {"client_secret": payments.create_intent(gateway, body.price)}


@router.post("/payments", response_model=PaymentResult)
def create_payment(
    payment: PaymentCreate,
    session: Session = Depends(get_session),
):
    return payments.record_payment(session, payment)


@router.get("/completedPayments", response_model=List[PaymentPublic])
def completed_payments(
    email: str = Depends(require_self),
    session: Session = Depends(get_session),
):
    return payments.list_completed(session, email)
