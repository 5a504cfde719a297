# lawyer_point/services/payments.py

import logging
from typing import List, Protocol

import stripe
from sqlmodel import Session, select

from ..models import Payment
from ..schemas import PaymentCreate, PaymentResult
from . import reservations

logger = logging.getLogger(__name__)


class PaymentGateway(Protocol):
    def create_intent(self, amount: int) -> str:
        """Create a card payment for ``amount`` minor units and return its client secret."""


class StripeGateway:
    def __init__(self, api_key: str, currency: str = "usd"):
        self.api_key = api_key
        self.currency = currency

    def create_intent(self, amount: int) -> str:
        try:
            intent = stripe.PaymentIntent.create(
                amount=amount,
                currency=self.currency,
                payment_method_types=["card"],
                api_key=self.api_key,
            )
        except stripe.StripeError:
            logger.exception("Stripe API error while creating payment intent for %s", amount)
            raise
        return intent.client_secret


def to_minor_units(price: float) -> int:
    return int(round(price * 100))


def create_intent(gateway: PaymentGateway, price: float) -> str:
    # no sign check, the gateway rejects what it cannot charge
    amount = to_minor_units(price)
    client_secret = gateway.create_intent(amount)
    logger.info("Created payment intent for %s minor units", amount)
    return client_secret


def record_payment(session: Session, payment: PaymentCreate) -> PaymentResult:
    """Store the payment and flag its reservation paid in one transaction."""
    db_payment = Payment(**payment.model_dump())
    session.add(db_payment)
    modified = reservations.mark_paid(session, payment.reservation_id, payment.transaction_id)
    session.commit()
    session.refresh(db_payment)

    if not modified:
        logger.warning(
            "Payment %s recorded for unknown reservation %s",
            db_payment.id, payment.reservation_id,
        )
    return PaymentResult(inserted_id=db_payment.id, modified_count=modified)


def list_completed(session: Session, email: str) -> List[Payment]:
    return session.exec(
        select(Payment)
        .where(Payment.email == email)
        .order_by(Payment.created_at.desc())
    ).all()
