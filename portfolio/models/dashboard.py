from __future__ import annotations

from .base import DocumentModel
from .experience import Experience
from .project import Project


class CategoryCount(DocumentModel):
    category: str
    count: int


class DashboardSummary(DocumentModel):
    total_projects: int
    total_skills: int
    total_experiences: int
    unread_messages: int
    skills_by_category: list[CategoryCount]
    recent_projects: list[Project]
    recent_experiences: list[Experience]
