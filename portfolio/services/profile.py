"""The ``settings/profile`` singleton behind the hero and about sections."""
from __future__ import annotations

import logging

from portfolio.errors import NotFoundError
from portfolio.models import AuthUser, ProfileSettings, ProfileSettingsInput
from portfolio.services.firestore_db import COLLECTIONS, SETTINGS_DOC_ID, FirestoreDB
from portfolio.services.images import ensure_document_fits

logger = logging.getLogger(__name__)


class ProfileService:
    collection = COLLECTIONS["settings"]

    def __init__(self, db: FirestoreDB) -> None:
        self._db = db

    def get(self) -> ProfileSettings:
        doc = self._db.get_one(self.collection, SETTINGS_DOC_ID)
        if doc is None:
            raise NotFoundError(self.collection, SETTINGS_DOC_ID)
        return ProfileSettings.model_validate(doc)

    def get_or_default(self) -> ProfileSettings:
        try:
            return self.get()
        except NotFoundError:
            return ProfileSettings()

    def save(self, payload: ProfileSettingsInput, user: AuthUser | None = None) -> ProfileSettings:
        """Overwrite the profile document with ``payload``."""

        fields = payload.to_document()
        if not payload.social_links.email and user is not None and user.email:
            fields["socialLinks"]["email"] = user.email
        ensure_document_fits(fields)
        self._db.set(self.collection, SETTINGS_DOC_ID, fields)
        logger.info("Saved profile settings")
        return self.get()
