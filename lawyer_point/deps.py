# lawyer_point/deps.py

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Path
from sqlmodel import Session

from .auth import get_current_email
from .db import get_session
from .models import User
from .services import users

# path ids use the document-store object id shape
ObjectId = Annotated[str, Path(pattern="^[0-9a-f]{24}$")]


def require_role(user: Optional[User], role: str):
    if user is None or user.role != role:
        raise HTTPException(status_code=403, detail="forbidden access")


def require_admin(
    email: str = Depends(get_current_email),
    session: Session = Depends(get_session),
) -> str:
    # looked up on every request, roles change between requests
    require_role(users.get_by_email(session, email), "admin")
    return email


def require_self(
    email: Optional[str] = None,
    decoded_email: str = Depends(get_current_email),
) -> str:
    if email != decoded_email:
        raise HTTPException(status_code=403, detail="forbidden access")
    return email
