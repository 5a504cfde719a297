# lawyer_point/services/availability.py

from typing import Iterable, List

from sqlmodel import Session, select

from ..models import AppointmentOption, Reservation
from ..schemas import AvailableAppointment


def remaining_times(times: Iterable[str], reserved: Iterable[str]) -> List[str]:
    """Template times minus the reserved ones, in template order."""
    taken = set(reserved)
    return [t for t in times if t not in taken]


def resolve(session: Session, date: str) -> List[AvailableAppointment]:
    """Open slots per appointment option on ``date``.

    The date is matched verbatim against ``Reservation.appointment_date``, so a
    malformed date matches nothing and every option comes back full.
    Reservations for a lawsuit with no option row are ignored.
    """
    options = session.exec(select(AppointmentOption)).all()
    reserved = session.exec(
        select(Reservation).where(Reservation.appointment_date == date)
    ).all()

    available = []
    for option in options:
        reserved_times = [r.time for r in reserved if r.lawsuit == option.name]
        available.append(
            AvailableAppointment(
                id=option.id,
                name=option.name,
                times=remaining_times(option.times, reserved_times),
                price=option.price,
            )
        )
    return available


def specialties(session: Session) -> List[str]:
    names = session.exec(select(AppointmentOption.name).distinct()).all()
    return sorted(names)
