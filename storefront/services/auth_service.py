# storefront/services/auth_service.py
from datetime import timedelta, datetime, timezone
import logging

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from storefront.models.user_models import User, Profile
from storefront.core.security import hash_password, verify_password, create_access_token
from storefront.core.config import ACCESS_TOKEN_EXPIRE_MINUTES, ADMIN_ACCESS_TOKEN_EXPIRE_MINUTES
from storefront.schemas.auth_schemas import SignUp, SessionOut, ProfileOut
from storefront.utils.activity_helpers import log_user_activity

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str):
    result = await db.execute(select(User).where(User.email == email.lower()))
    return result.scalars().first()


async def sign_up(db: AsyncSession, data: SignUp) -> User:
    if await get_user_by_email(db, data.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="This email is already registered. Please sign in instead.",
        )

    user = User(
        email=data.email.lower(),
        password_hash=hash_password(data.password),
        profile=Profile(full_name=data.full_name, phone=data.phone, company=data.company),
        roles=[],
    )
    db.add(user)
    await db.flush()

    await log_user_activity(db, user, f"User '{user.email}' signed up.")
    await db.commit()
    logger.info("New account %s", user.email)
    return user


async def authenticate_user(db: AsyncSession, email: str, password: str) -> User:
    user = await get_user_by_email(db, email)
    if not user or not verify_password(password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid login credentials"
        )
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account is inactive.")
    return user


def create_tokens(user: User) -> str:
    """
    Access token carrying token_version, so sign-out invalidates it at once.
    """
    expire_minutes = (
        ADMIN_ACCESS_TOKEN_EXPIRE_MINUTES if user.is_admin else ACCESS_TOKEN_EXPIRE_MINUTES
    )
    return create_access_token(
        {"sub": user.email, "user_id": user.id, "roles": user.role_names},
        token_version=user.token_version,
        expires_delta=timedelta(minutes=expire_minutes),
    )


async def sign_in(db: AsyncSession, email: str, password: str) -> tuple[User, str]:
    user = await authenticate_user(db, email, password)
    user.last_login = datetime.now(timezone.utc)
    access_token = create_tokens(user)

    await log_user_activity(db, user, f"User '{user.email}' signed in.")
    await db.commit()
    return user, access_token


async def sign_out(db: AsyncSession, user: User):
    user.token_version += 1
    await log_user_activity(db, user, f"User '{user.email}' signed out.")
    await db.commit()
    return {"message": "Signed out successfully"}


def build_session(user: User) -> SessionOut:
    return SessionOut(
        id=user.id,
        email=user.email,
        roles=user.role_names,
        is_admin=user.is_admin,
        profile=ProfileOut.model_validate(user.profile) if user.profile else None,
    )
