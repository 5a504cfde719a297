# lawyer_point/routers/appointments_routes.py

from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ..db import get_session
from ..schemas import AvailableAppointment
from ..services import availability

router = APIRouter(
    tags=["appointments"],
)


@router.get("/availableAppointments", response_model=List[AvailableAppointment])
def available_appointments(
    date: str,
    session: Session = Depends(get_session),
):
    return availability.resolve(session, date)


@router.get("/specialistIn", response_model=List[str])
def specialist_in(session: Session = Depends(get_session)):
    return availability.specialties(session)
