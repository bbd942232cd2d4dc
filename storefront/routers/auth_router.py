# storefront/routers/auth_router.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.db import get_db
from storefront.schemas.auth_schemas import SignUp, SignIn, TokenResponse, SessionOut
from storefront.schemas.product_schemas import MessageResponse
from storefront.services.auth_service import sign_up, sign_in, sign_out, build_session
from storefront.utils.get_user import get_current_user

router = APIRouter(prefix="/auth", tags=["Auth"])


# --------------------------
# SIGN UP
# --------------------------
@router.post("/sign-up", response_model=SessionOut, status_code=status.HTTP_201_CREATED)
async def sign_up_route(data: SignUp, db: AsyncSession = Depends(get_db)):
    """Create an account with its customer profile. New accounts carry no roles."""
    user = await sign_up(db, data)
    return build_session(user)


# --------------------------
# SIGN IN
# --------------------------
@router.post("/sign-in", response_model=TokenResponse)
async def sign_in_route(data: SignIn, db: AsyncSession = Depends(get_db)):
    user, access_token = await sign_in(db, data.email, data.password)
    return TokenResponse(access_token=access_token, is_admin=user.is_admin)


# --------------------------
# SIGN OUT
# --------------------------
@router.post("/sign-out", response_model=MessageResponse)
async def sign_out_route(db: AsyncSession = Depends(get_db), current_user=Depends(get_current_user)):
    """Invalidates every token issued to the user so far."""
    return await sign_out(db, current_user)


# --------------------------
# CURRENT SESSION
# --------------------------
@router.get("/session", response_model=SessionOut)
async def read_session(current_user=Depends(get_current_user)):
    return build_session(current_user)
