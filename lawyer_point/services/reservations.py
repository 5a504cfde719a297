# lawyer_point/services/reservations.py

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..models import Reservation
from ..schemas import ReservationCreate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReservationCreated:
    inserted_id: str


@dataclass(frozen=True)
class ReservationConflict:
    message: str


CreateResult = Union[ReservationCreated, ReservationConflict]


def create(session: Session, reserve: ReservationCreate) -> CreateResult:
    """Insert a reservation; the table's unique constraints decide conflicts.

    One client gets one reservation per lawsuit per date, and a lawsuit's time
    slot on a date belongs to one client. Both are enforced by the INSERT
    itself, so concurrent requests cannot both succeed.
    """
    db_reserve = Reservation(**reserve.model_dump(), paid=False)
    session.add(db_reserve)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        message = _conflict_message(session, reserve)
        logger.info("Reservation rejected for %s: %s", reserve.email, message)
        return ReservationConflict(message=message)

    session.refresh(db_reserve)
    return ReservationCreated(inserted_id=db_reserve.id)


def _conflict_message(session: Session, reserve: ReservationCreate) -> str:
    own = session.exec(
        select(Reservation)
        .where(Reservation.lawsuit == reserve.lawsuit)
        .where(Reservation.email == reserve.email)
        .where(Reservation.appointment_date == reserve.appointment_date)
    ).first()
    if own is not None:
        return f"You have reserved an appointment on {reserve.appointment_date}"
    return f"{reserve.time} on {reserve.appointment_date} is already booked for {reserve.lawsuit}"


def mark_paid(session: Session, reservation_id: str, transaction_id: str) -> int:
    """Flag a reservation paid. Not committed here; returns the matched count."""
    target = session.get(Reservation, reservation_id)
    if target is None:
        return 0
    target.paid = True
    target.transaction_id = transaction_id
    session.add(target)
    return 1


def get(session: Session, reservation_id: str) -> Optional[Reservation]:
    return session.get(Reservation, reservation_id)


def list_for_client(session: Session, email: str) -> List[Reservation]:
    return session.exec(
        select(Reservation).where(Reservation.email == email)
    ).all()
