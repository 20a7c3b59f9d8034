import logging
from typing import List, Optional

from inkwell.models.post import Post
from inkwell.schemas.blog import AliasResolution, CategoryCount, PostDetail, PostSummary
from inkwell.services.document_store import DocumentStore, SortOrder
from inkwell.utils import calculate_reading_time, normalize_path

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, store: DocumentStore, reading_wpm: int = 200):
        self.store = store
        self.reading_wpm = reading_wpm

    def list_posts(self, order: SortOrder | str = SortOrder.DESC) -> List[PostSummary]:
        return [self._summary(p) for p in self.store.list_published(order)]

    def list_category(
        self, category: str, order: SortOrder | str = SortOrder.DESC
    ) -> List[PostSummary]:
        return [self._summary(p) for p in self.store.filter_by_category(category, order)]

    def list_categories(self) -> List[CategoryCount]:
        return [
            CategoryCount(name=name, count=count)
            for name, count in self.store.categories().items()
        ]

    def get_post(self, address: str) -> Optional[PostDetail]:
        post = self.store.get(address)
        if not post:
            return None
        return PostDetail(**post_data(post, self.reading_wpm), body=post.body)

    def resolve_alias(self, path: str) -> Optional[AliasResolution]:
        post = self.store.resolve_alias(path)
        if not post:
            logger.debug(f"No post claims alias {path}")
            return None
        return AliasResolution(
            path=normalize_path(path), canonical=post.address, title=post.title
        )

    def _summary(self, post: Post) -> PostSummary:
        return PostSummary(**post_data(post, self.reading_wpm))


def post_data(post: Post, reading_wpm: int = 200) -> dict:
    """Standardized post data shared by summaries and details."""
    return {
        "address": post.address,
        "slug": post.slug,
        "title": post.title,
        "description": post.description,
        "date": post.date.isoformat(),
        "categories": list(post.categories),
        "aliases": list(post.aliases),
        "draft": post.draft,
        "readingTime": calculate_reading_time(post.body, reading_wpm),
        "markup": post.markup,
        "source": post.source or None,
    }
