# lawyer_point/routers/users_routes.py

from typing import List, Union

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ..db import get_session
from ..deps import ObjectId, require_admin
from ..schemas import AdminStatus, InsertResult, UpdateResult, UserCreate, UserPublic, UserRole
from ..services import users

router = APIRouter(
    prefix="/users",
    tags=["users"],
)


@router.post("", response_model=Union[InsertResult, UserCreate])
def create_user(
    user: UserCreate,
    session: Session = Depends(get_session),
):
    return users.ensure_user(session, user)


@router.get("", response_model=List[UserPublic])
def list_users(session: Session = Depends(get_session)):
    return users.list_users(session)


@router.get("/admin/{email}", response_model=AdminStatus)
def admin_status(
    email: str,
    session: Session = Depends(get_session),
):
    return {"is_admin": users.is_admin(session, email)}


@router.put("/admin/{user_id}", response_model=UpdateResult)
def make_admin(
    user_id: ObjectId,
    session: Session = Depends(get_session),
    _admin: str = Depends(require_admin),
):
    return users.set_role(session, user_id, UserRole.admin)


@router.put("/user/{user_id}", response_model=UpdateResult)
def make_user(
    user_id: ObjectId,
    session: Session = Depends(get_session),
    _admin: str = Depends(require_admin),
):
    return users.set_role(session, user_id, UserRole.user)
