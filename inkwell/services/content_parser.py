import logging
import os

import frontmatter
from pydantic import ValidationError

from inkwell.models.post import ASCIIDOC, MARKDOWN, Post, parse_timestamp
from inkwell.utils import expand_permalink, slugify

logger = logging.getLogger(__name__)

MARKUP_BY_EXTENSION = {
    ".md": MARKDOWN,
    ".markdown": MARKDOWN,
    ".adoc": ASCIIDOC,
    ".asciidoc": ASCIIDOC,
}

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0", ""}


class PostParseError(ValueError):
    """A single source document could not be turned into a Post."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


def markup_for(source: str) -> str:
    _, ext = os.path.splitext(source)
    return MARKUP_BY_EXTENSION.get(ext.lower(), MARKDOWN)


def coerce_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"Not a boolean: {value!r}")


class ContentParser:
    def __init__(self, permalink_pattern: str = "/:year/:month/:day/:slug/"):
        self.permalink_pattern = permalink_pattern

    def parse(self, text: str, source: str) -> Post:
        """Split front matter from the body and build a Post."""
        try:
            parsed = frontmatter.loads(text)
        except Exception as e:
            raise PostParseError(source, f"unreadable front matter ({e})") from e

        metadata = parsed.metadata or {}

        title = metadata.get("title")
        if title is None or not str(title).strip():
            raise PostParseError(source, "missing title")
        title = str(title).strip()

        raw_date = metadata.get("date")
        if raw_date is None or raw_date == "":
            raise PostParseError(source, "missing date")
        try:
            authored_date = parse_timestamp(raw_date)
        except ValueError as e:
            raise PostParseError(source, f"invalid date {raw_date!r}") from e

        # An explicit slug is used exactly as written
        explicit_slug = metadata.get("slug")
        slug = str(explicit_slug).strip() if explicit_slug is not None else ""
        slug = slug or slugify(title)
        if not slug:
            raise PostParseError(source, f"cannot derive a slug from {title!r}")

        try:
            draft = coerce_bool(metadata.get("draft", False))
        except ValueError as e:
            raise PostParseError(source, str(e)) from e

        # The address uses the calendar date as authored, not the UTC one.
        address = expand_permalink(self.permalink_pattern, authored_date, slug)

        description = metadata.get("description")
        try:
            return Post(
                title=title,
                date=authored_date,
                slug=slug,
                address=address,
                categories=metadata.get("categories"),
                aliases=metadata.get("aliases"),
                description=str(description) if description is not None else None,
                draft=draft,
                body=parsed.content,
                source=source,
                markup=markup_for(source),
            )
        except ValidationError as e:
            raise PostParseError(source, f"invalid metadata ({e})") from e
