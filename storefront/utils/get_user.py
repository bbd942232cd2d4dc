# storefront/utils/get_user.py
from typing import Optional

from fastapi import Request, Depends, HTTPException, Header
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from storefront.models.user_models import User
from storefront.core.db import get_db
from storefront.core.security import decode_token


def extract_token(token: Optional[str], authorization: Optional[str]) -> Optional[str]:
    """Raw `token` header wins; otherwise a `Bearer` authorization header."""
    if token:
        return token
    scheme, _, credentials = (authorization or "").partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


async def get_current_user(
    request: Request,
    token: str | None = Header(default=None),
    authorization: str | None = Header(default=None),
    db: AsyncSession = Depends(get_db),
) -> User:
    raw_token = extract_token(token, authorization)
    if not raw_token:
        raise HTTPException(status_code=401, detail="Missing access token")

    try:
        payload = decode_token(raw_token)
    except ValueError as e:
        raise HTTPException(status_code=401, detail=str(e))

    user_id = payload.get("user_id")
    token_version = payload.get("token_version")
    if user_id is None or token_version is None or payload.get("type") != "access":
        raise HTTPException(status_code=401, detail="Invalid token payload")

    user = (await db.execute(select(User).where(User.id == user_id))).scalars().first()
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    # bumped on sign-out
    if user.token_version != token_version:
        raise HTTPException(status_code=401, detail="Token invalidated. Please sign in again.")
    if not user.is_active:
        raise HTTPException(status_code=403, detail="User account is inactive.")

    request.state.user = user
    return user
