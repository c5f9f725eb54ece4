from __future__ import annotations

from datetime import datetime

from .base import DocumentModel


class Education(DocumentModel):
    degree: str = ""
    university: str = ""
    period: str = ""
    gpa: str | None = None
    coursework: list[str] = []


class SocialLinks(DocumentModel):
    github: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    instagram: str | None = None
    email: str | None = None


class ProfileSettingsInput(DocumentModel):
    display_name: str = ""
    title: str = ""
    location: str = ""
    bio: str = ""
    hero_tagline: str | None = None
    hero_description: str | None = None
    bio_extended: str | None = None
    bio_passion: str | None = None
    cv_url: str | None = None
    hero_image: str | None = None  # inline data URL
    about_image: str | None = None  # inline data URL
    education: Education | None = None
    social_links: SocialLinks = SocialLinks()


class ProfileSettings(ProfileSettingsInput):
    updated_at: datetime | None = None
