"""Project link list <-> legacy ``githubUrl``/``demoUrl`` reconciliation.

Older project documents only carry the two scalar URL fields. Newer ones carry
a typed ``links`` list as well, and still write the scalars so older readers
keep working.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, NamedTuple

from portfolio.models import ProjectLink


class ReconciledLinks(NamedTuple):
    links: list[ProjectLink]
    github_url: str
    demo_url: str

    def to_fields(self) -> dict[str, Any]:
        """Document fields written together in the same update."""
        return {
            "links": [link.to_document() for link in self.links],
            "githubUrl": self.github_url,
            "demoUrl": self.demo_url,
        }


def links_for_editing(record: Mapping[str, Any]) -> list[ProjectLink]:
    """Return the editable link list for a stored project document."""

    links = record.get("links")
    if isinstance(links, list):
        return [ProjectLink.from_stored(link) for link in links]

    converted: list[ProjectLink] = []
    if record.get("githubUrl"):
        converted.append(ProjectLink(type="github", url=record["githubUrl"], visible=True))
    if record.get("demoUrl"):
        converted.append(ProjectLink(type="demo", url=record["demoUrl"], visible=True))
    return converted


def reconcile_links(links: Iterable[ProjectLink]) -> ReconciledLinks:
    """Drop blank links and derive the legacy scalar fields from the rest.

    Only the first link of each type feeds ``github_url``/``demo_url``;
    duplicates stay in ``links``.
    """

    valid = [link for link in links if link.url.strip()]
    github = next((link.url for link in valid if link.type == "github"), "")
    demo = next((link.url for link in valid if link.type == "demo"), "")
    return ReconciledLinks(links=valid, github_url=github, demo_url=demo)
