"""Shared FastAPI dependencies: client handles, services and auth guards."""
from __future__ import annotations

import logging

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from portfolio.config import get_settings
from portfolio.models import AuthUser
from portfolio.services.auth import AuthService, get_auth_service
from portfolio.services.content import CertificateService, ExperienceService, SkillService
from portfolio.services.firestore_db import FirestoreDB, get_firestore_db
from portfolio.services.messages import MessageService
from portfolio.services.profile import ProfileService
from portfolio.services.projects import ProjectService

logger = logging.getLogger(__name__)
settings = get_settings()

_bearer = HTTPBearer(auto_error=False)


def get_db() -> FirestoreDB:
    return get_firestore_db()


def get_auth() -> AuthService:
    return get_auth_service()


# ---------------------------------------------------------------------------
# Auth guards
# ---------------------------------------------------------------------------


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    auth: AuthService = Depends(get_auth),
) -> AuthUser | None:
    if credentials is None:
        return None
    return auth.current_user(credentials.credentials)


def require_user(user: AuthUser | None = Depends(get_current_user)) -> AuthUser:
    if user is None:
        raise HTTPException(status_code=401, detail="Not authenticated", headers={"WWW-Authenticate": "Bearer"})
    return user


def require_admin(user: AuthUser = Depends(require_user)) -> AuthUser:
    if settings.require_admin_claim and not user.is_admin:
        logger.warning("Non-admin uid=%s tried to reach an admin route", user.uid)
        raise HTTPException(status_code=403, detail="Admin access required")
    return user


# ---------------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------------


def get_project_service(db: FirestoreDB = Depends(get_db)) -> ProjectService:
    return ProjectService(db)


def get_skill_service(db: FirestoreDB = Depends(get_db)) -> SkillService:
    return SkillService(db)


def get_certificate_service(db: FirestoreDB = Depends(get_db)) -> CertificateService:
    return CertificateService(db)


def get_experience_service(db: FirestoreDB = Depends(get_db)) -> ExperienceService:
    return ExperienceService(db)


def get_message_service(db: FirestoreDB = Depends(get_db)) -> MessageService:
    return MessageService(db)


def get_profile_service(db: FirestoreDB = Depends(get_db)) -> ProfileService:
    return ProfileService(db)
