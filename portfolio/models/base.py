from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DocumentModel(BaseModel):
    """Base for Firestore-backed records.

    Python attributes are snake_case; documents and JSON bodies use the
    camelCase names the portfolio front end has always written.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self, *, exclude: Iterable[str] = (), **kwargs: Any) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude={"id", *exclude}, **kwargs)
