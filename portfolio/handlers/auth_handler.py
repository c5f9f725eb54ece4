"""Admin sign-in endpoints."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from portfolio.handlers.dependencies import get_auth, require_user
from portfolio.models import AuthUser, LoginRequest, Session
from portfolio.services.auth import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/login", response_model=Session)
async def login(body: LoginRequest, auth: AuthService = Depends(get_auth)):
    return await auth.sign_in(body.email, body.password)


@router.post("/logout")
async def logout(user: AuthUser = Depends(require_user), auth: AuthService = Depends(get_auth)):
    await auth.sign_out(user)
    return {"status": "signed_out"}


@router.get("/me", response_model=AuthUser)
def me(user: AuthUser = Depends(require_user)):
    return user
