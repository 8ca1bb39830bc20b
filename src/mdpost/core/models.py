"""Post metadata schema and the render-ready Document"""

import datetime as dt
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


REQUIRED_FIELDS = ('title', 'date')


class PostMetadata(BaseModel):
    """Typed view of the recognized front matter keys; unknown keys are kept as extras."""
    model_config = ConfigDict(frozen=True, extra='allow', populate_by_name=True)

    title:        str
    date:         dt.date
    authors:      list[str] = Field(default_factory=list)
    excerpt:      str = ""
    hero:         str = ""                  # may be empty; posts without a hero image
    draft:        bool = False
    time_to_read: Optional[int] = Field(default=None, alias='timeToRead', ge=0, description="Minutes")

    @field_validator('date', mode='before')
    @classmethod
    def _date_only(cls, v: Any) -> Any:
        # YAML loads '2021-03-04T10:00:00' as a datetime; keep the calendar date
        if isinstance(v, dt.datetime):
            return v.date()
        return v

    @field_validator('authors', mode='before')
    @classmethod
    def _single_author(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v

    @field_validator('excerpt', 'hero', mode='before')
    @classmethod
    def _blank(cls, v: Any) -> Any:
        return "" if v is None else v


class Document(BaseModel):
    """One content file: literal front matter, typed metadata, markup body and rendered HTML.

    Constructed once per source file and immutable thereafter.
    """
    model_config = ConfigDict(frozen=True)

    metadata:      Mapping[str, Any]        # read-only; key/value pairs exactly as written in the block
    meta:          PostMetadata
    body:          str                      # markup text after the closing marker
    rendered_body: str                      # HTML fragment for the templating layer
    slug:          str
    path:          Optional[str] = None
    hash:          str                      # sha256 of the full source text
    time_to_read:  int                      # timeToRead, or estimated from the word count

    @field_validator('metadata', mode='after')
    @classmethod
    def _read_only(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(v))

    @field_serializer('metadata')
    def _plain_metadata(self, v: Mapping[str, Any]) -> dict[str, Any]:
        return dict(v)

    @property
    def title(self) -> str:
        return self.meta.title

    @property
    def date(self) -> dt.date:
        return self.meta.date

    @property
    def draft(self) -> bool:
        return self.meta.draft

    def to_dict(self) -> dict[str, Any]:
        """The {metadata, rendered_body} pair handed to the templating layer."""
        return {"metadata": dict(self.metadata), "rendered_body": self.rendered_body}
