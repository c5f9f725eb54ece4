#!/usr/bin/env python
"""Script to insert the starter projects into an empty Firestore collection."""
from __future__ import annotations

import argparse

from portfolio.models import ProjectInput, ProjectLink
from portfolio.services.firestore_db import get_firestore_db
from portfolio.services.projects import ProjectService

STARTER_PROJECTS = [
    ProjectInput(
        title="Campus Market",
        description="A platform for buying and selling used student goods, built with React Native and Firebase.",
        long_description=(
            "A mobile marketplace for university students with real-time messaging "
            "and location-based listings."
        ),
        category="Mobile",
        tech_stack=["React Native", "Firebase", "Expo", "TypeScript"],
        status="published",
        featured=True,
        images=["https://images.unsplash.com/photo-1556742049-0cfed4f6a45d?w=800&h=600&fit=crop"],
        links=[ProjectLink(type="github", url="https://github.com/Gzaa19/CollectaMarket.git")],
    ),
    ProjectInput(
        title="Smart Irrigation System IoT",
        description="Irrigation controller using DHT22 and soil moisture sensors to save water.",
        category="IoT",
        tech_stack=["Arduino", "C++", "IoT", "Sensors"],
        status="published",
        featured=True,
        images=["https://images.unsplash.com/photo-1558618666-fcd25c85cd64?w=800&h=600&fit=crop"],
        links=[
            ProjectLink(type="github", url="https://wokwi.com/projects/448745969429353473"),
            ProjectLink(type="youtube", url="https://youtu.be/ycO6V3W7Beg"),
        ],
    ),
    ProjectInput(
        title="E-Voting System",
        description="Electronic voting system with real-time vote counting and an admin dashboard.",
        category="Web",
        tech_stack=["Next.js", "PostgreSQL", "TypeScript", "Tailwind CSS"],
        status="published",
        images=["https://images.unsplash.com/photo-1540910419892-4a36d2c3266c?w=800&h=600&fit=crop"],
        links=[ProjectLink(type="github", url="https://github.com/daffapandora/e-voting")],
    ),
    ProjectInput(
        title="ML Image Classifier",
        description="Image classification with a convolutional network trained in TensorFlow.",
        category="Machine Learning",
        tech_stack=["Python", "TensorFlow", "Keras", "NumPy"],
        status="published",
        links=[ProjectLink(type="github", url="https://github.com/daffapandora/ml-classifier")],
    ),
]


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed starter projects")
    parser.add_argument("--force", action="store_true", help="Seed even if projects already exist")
    args = parser.parse_args()

    service = ProjectService(get_firestore_db())
    existing = service.list()
    if existing and not args.force:
        print(f"Skipped: {len(existing)} project(s) already exist (use --force to add anyway).")
        return

    for payload in STARTER_PROJECTS:
        project = service.create(payload)
        print(f"Created {project.id}: {project.title}")


if __name__ == "__main__":
    main()
