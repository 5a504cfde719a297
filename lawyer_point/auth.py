# lawyer_point/auth.py

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, Request
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = 60

# auto_error=False: a missing header is a 401, a bad token a 403
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="jwt", auto_error=False)


class InvalidToken(Exception):
    """Token signature is wrong, the token is expired, or it carries no email."""


def create_access_token(email: str, secret: str, expires_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    to_encode = {"email": email, "exp": expire}
    return jwt.encode(to_encode, secret, algorithm=ALGORITHM)


def decode_access_token(token: str, secret: str) -> str:
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise InvalidToken(str(exc)) from exc

    email = payload.get("email")
    if not email:
        raise InvalidToken("token has no email claim")
    return email


def get_current_email(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
) -> str:
    if token is None:
        raise HTTPException(
            status_code=401,
            detail="unauthorized access",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return decode_access_token(token, request.app.state.settings.access_token_secret)
    except InvalidToken as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise HTTPException(status_code=403, detail="forbidden access")
