# lawyer_point/routers/auth_routes.py

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlmodel import Session

from ..auth import create_access_token
from ..db import get_session
from ..schemas import Token
from ..services import users

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["auth"],
)


@router.get("/jwt", response_model=Token)
def issue_token(
    email: str,
    request: Request,
    session: Session = Depends(get_session),
):
    # tokens only go to users that signed up through POST /users
    if users.get_by_email(session, email) is None:
        logger.info("Token refused for unknown email %s", email)
        raise HTTPException(status_code=403, detail="Unauthorized")

    settings = request.app.state.settings
    token = create_access_token(
        email,
        settings.access_token_secret,
        expires_minutes=settings.access_token_expire_minutes,
    )
    return {"access_token": token, "token_type": "bearer"}
