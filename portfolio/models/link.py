from __future__ import annotations

from typing import Any, Literal, Mapping, get_args

from .base import DocumentModel

LinkType = Literal["github", "demo", "youtube", "figma", "documentation", "video", "other"]
LINK_TYPES: tuple[str, ...] = get_args(LinkType)


class ProjectLink(DocumentModel):
    type: LinkType
    url: str = ""  # may be blank while editing, never persisted blank
    visible: bool = True

    @classmethod
    def from_stored(cls, data: Mapping[str, Any]) -> "ProjectLink":
        """Load a link read back from Firestore.

        Types outside ``LINK_TYPES`` (written by other clients) load as
        ``other`` instead of failing the whole record.
        """

        data = dict(data)
        if data.get("type") not in LINK_TYPES:
            data["type"] = "other"
        return cls.model_validate(data)
