# lawyer_point/routers/lawyers_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from ..db import get_session
from ..deps import ObjectId, require_admin
from ..models import Lawyer
from ..schemas import DeleteResult, InsertResult, LawyerCreate, LawyerPublic, LawyerUpdate

logger = logging.getLogger(__name__)

# every lawyer route is admin-only
router = APIRouter(
    prefix="/lawyers",
    tags=["lawyers"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=List[LawyerPublic])
def list_lawyers(session: Session = Depends(get_session)):
    return session.exec(select(Lawyer)).all()


@router.get("/{lawyer_id}", response_model=LawyerPublic)
def get_lawyer(
    lawyer_id: ObjectId,
    session: Session = Depends(get_session),
):
    lawyer = session.get(Lawyer, lawyer_id)
    if lawyer is None:
        raise HTTPException(status_code=404, detail="Lawyer not found")
    return lawyer


@router.post("", response_model=InsertResult)
def create_lawyer(
    lawyer: LawyerCreate,
    session: Session = Depends(get_session),
):
    db_lawyer = Lawyer(**lawyer.model_dump())
    session.add(db_lawyer)
    session.commit()
    session.refresh(db_lawyer)
    return {"inserted_id": db_lawyer.id}


@router.put("/{lawyer_id}", response_model=LawyerPublic)
def update_lawyer(
    lawyer_id: ObjectId,
    changes: LawyerUpdate,
    session: Session = Depends(get_session),
):
    db_lawyer = session.get(Lawyer, lawyer_id)
    if db_lawyer is None:
        raise HTTPException(status_code=404, detail="Lawyer not found")

    for field, value in changes.model_dump(exclude_unset=True).items():
        setattr(db_lawyer, field, value)
    session.add(db_lawyer)
    session.commit()
    session.refresh(db_lawyer)
    return db_lawyer


@router.delete("/{lawyer_id}", response_model=DeleteResult)
def delete_lawyer(
    lawyer_id: ObjectId,
    session: Session = Depends(get_session),
):
    db_lawyer = session.get(Lawyer, lawyer_id)
    if db_lawyer is None:
        return {"deleted_count": 0}

    name = db_lawyer.name
    session.delete(db_lawyer)
    session.commit()
    logger.info("Deleted lawyer %s (%s)", lawyer_id, name)
    return {"deleted_count": 1}
