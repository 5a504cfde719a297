# lawyer_point/services/users.py

import logging
from typing import List, Optional, Union

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..models import User
from ..schemas import InsertResult, UpdateResult, UserCreate, UserRole

logger = logging.getLogger(__name__)


def get_by_email(session: Session, email: str) -> Optional[User]:
    return session.exec(
        select(User).where(User.email == email)
    ).first()


def list_users(session: Session) -> List[User]:
    return session.exec(select(User)).all()


def ensure_user(session: Session, user: UserCreate) -> Union[InsertResult, UserCreate]:
    """Insert the user unless the email is taken.

    An existing user gets the submitted payload echoed back, not the stored row.
    """
    if get_by_email(session, user.email) is not None:
        return user

    db_user = User(email=user.email, name=user.name)
    session.add(db_user)
    try:
        session.commit()
    except IntegrityError:
        # another sign-in inserted the same email first
        session.rollback()
        return user
    session.refresh(db_user)
    return InsertResult(inserted_id=db_user.id)


def set_role(session: Session, user_id: str, role: UserRole) -> UpdateResult:
    target = session.get(User, user_id)
    if target is None:
        return UpdateResult(matched_count=0, modified_count=0)
    if target.role == role.value:
        return UpdateResult(matched_count=1, modified_count=0)

    target.role = role.value
    session.add(target)
    session.commit()
    logger.info("User %s is now %s", target.email, role.value)
    return UpdateResult(matched_count=1, modified_count=1)


def is_admin(session: Session, email: str) -> bool:
    user = get_by_email(session, email)
    return user is not None and user.role == UserRole.admin.value
