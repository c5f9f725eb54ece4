"""Admin profile settings and dashboard summary."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from portfolio.handlers.dependencies import get_db, get_profile_service, require_admin
from portfolio.models import AuthUser, DashboardSummary, ProfileSettings, ProfileSettingsInput
from portfolio.services.dashboard import build_dashboard
from portfolio.services.firestore_db import FirestoreDB
from portfolio.services.profile import ProfileService

router = APIRouter(prefix="/api/admin", tags=["settings"], dependencies=[Depends(require_admin)])


@router.get("/settings", response_model=ProfileSettings)
def read_settings(service: ProfileService = Depends(get_profile_service)):
    return service.get_or_default()


@router.put("/settings", response_model=ProfileSettings)
def save_settings(
    body: ProfileSettingsInput,
    user: AuthUser = Depends(require_admin),
    service: ProfileService = Depends(get_profile_service),
):
    return service.save(body, user)


@router.get("/dashboard", response_model=DashboardSummary)
def dashboard(db: FirestoreDB = Depends(get_db)):
    return build_dashboard(db)
