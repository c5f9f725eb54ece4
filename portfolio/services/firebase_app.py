"""Firebase Admin SDK initialisation shared by Firestore and Auth."""
from __future__ import annotations

import json
import logging

import firebase_admin
from firebase_admin import credentials

from portfolio.config import get_settings

logger = logging.getLogger(__name__)


def _load_credentials(raw: str | None) -> credentials.Base:
    if not raw:
        # Workload identity on Cloud Run, or `gcloud auth application-default login` locally
        return credentials.ApplicationDefault()
    if raw.lstrip().startswith("{"):
        return credentials.Certificate(json.loads(raw))
    return credentials.Certificate(raw)


def get_firebase_app() -> firebase_admin.App:
    """Return the default Firebase app, initialising it on first use.

    Safe to call repeatedly and after a module reload: an app that already
    exists is reused.
    """

    if firebase_admin._apps:  # type: ignore[attr-defined]
        return firebase_admin.get_app()

    settings = get_settings()
    try:
        options = {"projectId": settings.project_id} if settings.project_id else None
        app = firebase_admin.initialize_app(_load_credentials(settings.firebase_credentials_json), options)
    except (ValueError, OSError) as exc:
        logger.exception("Failed to initialise Firebase Admin SDK: %s", exc)
        raise
    logger.info("Firebase Admin SDK initialised for project %s", settings.project_id or "<default>")
    return app
