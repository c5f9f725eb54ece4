"""Admin dashboard summary."""
from __future__ import annotations

from collections import Counter

from portfolio.models import CategoryCount, DashboardSummary
from portfolio.services.content import ExperienceService, SkillService
from portfolio.services.firestore_db import FirestoreDB
from portfolio.services.messages import MessageService
from portfolio.services.projects import ProjectService

RECENT_PROJECTS = 5
RECENT_EXPERIENCES = 3


def build_dashboard(db: FirestoreDB) -> DashboardSummary:
    projects = ProjectService(db).list()
    skills = SkillService(db).list()
    experiences = ExperienceService(db).list()
    inbox = MessageService(db).inbox()

    by_category = Counter(skill.category for skill in skills)
    return DashboardSummary(
        total_projects=len(projects),
        total_skills=len(skills),
        total_experiences=len(experiences),
        unread_messages=inbox.unread_count,
        skills_by_category=[CategoryCount(category=c, count=n) for c, n in by_category.items()],
        recent_projects=projects[:RECENT_PROJECTS],
        recent_experiences=experiences[:RECENT_EXPERIENCES],
    )
