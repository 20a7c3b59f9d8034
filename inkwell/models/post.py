import datetime
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from inkwell.utils import normalize_path

MARKDOWN = "markdown"
ASCIIDOC = "asciidoc"


def parse_timestamp(value: Any) -> datetime.datetime:
    """Read a front matter date as authored (dates become midnight, offsets kept)."""
    if isinstance(value, str):
        value = datetime.datetime.fromisoformat(value.strip())
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime(value.year, value.month, value.day)
    raise ValueError(f"Unsupported date value: {value!r}")


def coerce_datetime(value: Any) -> datetime.datetime:
    """Like parse_timestamp, but always an aware UTC datetime. Naive values are taken as UTC."""
    value = parse_timestamp(value)
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


class Post(BaseModel):
    """A single authored post: front matter metadata plus its markup body."""

    model_config = ConfigDict(frozen=True)

    title: str
    date: datetime.datetime
    slug: str
    address: str
    categories: Tuple[str, ...] = ()
    aliases: Tuple[str, ...] = ()
    description: Optional[str] = None
    draft: bool = False
    body: str = ""
    source: str = ""
    markup: str = MARKDOWN

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value):
        return coerce_datetime(value)

    @field_validator("categories", mode="before")
    @classmethod
    def _dedupe_categories(cls, value):
        seen = {}
        for item in _as_list(value):
            if item is None:
                continue
            name = str(item).strip()
            if name and name not in seen:
                seen[name] = None
        return tuple(seen)

    @field_validator("aliases", mode="before")
    @classmethod
    def _normalize_aliases(cls, value, info: ValidationInfo):
        own = info.data.get("address")
        own = normalize_path(own) if own else None
        seen = {}
        for item in _as_list(value):
            if item is None or not str(item).strip():
                continue
            alias = normalize_path(str(item))
            if alias != own:
                seen.setdefault(alias, None)
        return tuple(seen)

    @property
    def canonical_key(self) -> str:
        return normalize_path(self.address)

    @property
    def categories_folded(self) -> frozenset:
        return frozenset(c.casefold() for c in self.categories)
