import datetime
import textwrap

import pytest

from inkwell.models.post import Post
from inkwell.utils import expand_permalink, slugify


def make_post(
    title: str,
    date,
    *,
    slug: str | None = None,
    pattern: str = "/:year/:month/:day/:slug/",
    **fields,
) -> Post:
    """
    Build a Post the way ContentParser would, without going through front matter.
    """
    if isinstance(date, str):
        date = datetime.date.fromisoformat(date)
    if not isinstance(date, datetime.datetime):
        date = datetime.datetime(date.year, date.month, date.day)
    slug = slug or slugify(title)
    fields.setdefault("source", f"{slug}.md")
    return Post(
        title=title,
        date=date,
        slug=slug,
        address=expand_permalink(pattern, date, slug),
        **fields,
    )


def write_post(root, relative: str, text: str):
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def ruby_posts():
    """Three published Ruby posts, a draft and an unrelated post."""
    return [
        make_post(
            "Affordance for Errors, part 1",
            "2020-01-29",
            slug="affordance-for-errors-pt1",
            categories=["Ruby"],
            aliases=["/ruby/2020/01/29/affordance-for-errors-pt1.html"],
            description="Designing APIs that make mistakes obvious",
            body="Errors are part of the interface. " * 50,
        ),
        make_post(
            "Affordance for Errors, part 2",
            "2020-02-16",
            slug="affordance-for-errors-pt2",
            categories=["Ruby", "API design"],
            aliases=["/ruby/2020/02/16/affordance-for-errors-pt2.html"],
        ),
        make_post(
            "The Singleton Class",
            "2020-02-18",
            categories=["ruby"],
            aliases=["/ruby/2020/02/18/singleton-class.html", "/singleton"],
        ),
        make_post(
            "Half-written thoughts on variance",
            "2020-03-01",
            categories=["Ruby"],
            aliases=["/drafts/variance.html"],
            draft=True,
        ),
        make_post(
            "A Story About a Typo",
            "2019-11-05",
            categories=["Anecdotes"],
        ),
    ]


class FakeRepo:
    """
    Minimal repo stand-in: maps source names to raw text (or an exception to raise).
    """

    def __init__(self, files: dict, root: str = "content"):
        self.files = files
        self.root = root

    def list_post_files(self):
        return sorted(self.files)

    def relative_source(self, path):
        return path

    def read_post_file(self, path):
        value = self.files[path]
        if isinstance(value, Exception):
            raise value
        return textwrap.dedent(value).lstrip()


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        list_posts_return=None,
        get_post_return=None,
        categories_return=None,
        resolve_return=None,
    ):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._categories_return = categories_return or []
        self._resolve_return = resolve_return
        self.calls = []

    def list_posts(self, order="desc"):
        self.calls.append(("list_posts", order))
        return self._list_posts_return

    def list_category(self, category, order="desc"):
        self.calls.append(("list_category", category, order))
        return self._list_posts_return

    def list_categories(self):
        return self._categories_return

    def get_post(self, address: str):
        self.calls.append(("get_post", address))
        return self._get_post_return

    def resolve_alias(self, path: str):
        self.calls.append(("resolve_alias", path))
        return self._resolve_return
