# lawyer_point/routers/reserves_routes.py

from typing import List, Optional, Union

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ..db import get_session
from ..deps import ObjectId, require_self
from ..schemas import InsertResult, Rejection, ReservationCreate, ReservationPublic
from ..services import reservations
from ..services.reservations import ReservationConflict

router = APIRouter(
    prefix="/reserves",
    tags=["reserves"],
)


@router.get("", response_model=List[ReservationPublic])
def my_reserves(
    email: str = Depends(require_self),
    session: Session = Depends(get_session),
):
    return reservations.list_for_client(session, email)


@router.get("/{reserve_id}", response_model=Optional[ReservationPublic])
def get_reserve(
    reserve_id: ObjectId,
    session: Session = Depends(get_session),
):
    # unknown ids answer null with a 200, the web client relies on it
    return reservations.get(session, reserve_id)


# a conflict is still a 200: clients must check "acknowledged"
@router.post("", response_model=Union[InsertResult, Rejection])
def create_reserve(
    reserve: ReservationCreate,
    session: Session = Depends(get_session),
):
    result = reservations.create(session, reserve)
    if isinstance(result, ReservationConflict):
        return Rejection(message=result.message)
    return InsertResult(inserted_id=result.inserted_id)
