"""
Read-only index over a fixed corpus of posts.

The store is built once from the loaded posts and never mutated. Drafts are
kept for uniqueness checks but are invisible to every query.
"""

import logging
from collections import defaultdict
from enum import Enum
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from inkwell.models.post import Post
from inkwell.utils import normalize_path

logger = logging.getLogger(__name__)


class SortOrder(str, Enum):
    DESC = "desc"
    ASC = "asc"

    @classmethod
    def coerce(cls, value: "SortOrder | str") -> "SortOrder":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown sort order {value!r}, expected 'asc' or 'desc'"
            ) from None


class Collision(NamedTuple):
    address: str
    kind: str  # "canonical", "alias" or "alias-canonical"
    sources: Tuple[str, ...]

    def __str__(self) -> str:
        return f"{self.kind} collision on {self.address}: {', '.join(self.sources)}"


class AddressCollisionError(ValueError):
    def __init__(self, collisions: Sequence[Collision]):
        self.collisions = list(collisions)
        lines = "\n".join(f"  {c}" for c in self.collisions)
        super().__init__(f"{len(self.collisions)} address collision(s):\n{lines}")


def _label(post: Post) -> str:
    return post.source or post.address


def find_collisions(posts: Sequence[Post]) -> List[Collision]:
    """Every canonical/alias clash in the corpus, drafts included."""
    posts = list(posts)
    canonical_owners: Dict[str, List[int]] = defaultdict(list)
    alias_owners: Dict[str, List[int]] = defaultdict(list)

    for i, post in enumerate(posts):
        canonical_owners[post.canonical_key].append(i)
        for alias in post.aliases:
            alias_owners[alias].append(i)

    collisions: List[Collision] = []

    for address, owners in canonical_owners.items():
        if len(owners) > 1:
            collisions.append(
                Collision(address, "canonical", tuple(_label(posts[i]) for i in owners))
            )

    for alias, owners in alias_owners.items():
        if len(owners) > 1:
            collisions.append(
                Collision(alias, "alias", tuple(_label(posts[i]) for i in owners))
            )
        others = [i for i in canonical_owners.get(alias, []) if i not in owners]
        if others:
            collisions.append(
                Collision(
                    alias,
                    "alias-canonical",
                    tuple(_label(posts[i]) for i in others + owners),
                )
            )

    return collisions


def _by_date(posts: Iterable[Post], order: SortOrder) -> Tuple[Post, ...]:
    ordered = sorted(posts, key=lambda p: p.canonical_key)
    ordered.sort(key=lambda p: p.date, reverse=order is SortOrder.DESC)
    return tuple(ordered)


class DocumentStore:
    def __init__(self, posts: Iterable[Post]):
        self._posts: Tuple[Post, ...] = tuple(posts)

        collisions = find_collisions(self._posts)
        if collisions:
            raise AddressCollisionError(collisions)

        published = [p for p in self._posts if not p.draft]
        self._ordered = {order: _by_date(published, order) for order in SortOrder}
        self._by_address: Dict[str, Post] = {p.canonical_key: p for p in published}
        self._by_alias: Dict[str, Post] = {
            alias: p for p in published for alias in p.aliases
        }
        logger.debug(
            f"Indexed {len(published)} published posts, "
            f"{len(self._posts) - len(published)} drafts, "
            f"{len(self._by_alias)} aliases"
        )

    def __len__(self) -> int:
        return len(self._ordered[SortOrder.ASC])

    @property
    def posts(self) -> Tuple[Post, ...]:
        """All loaded posts, drafts included, in load order."""
        return self._posts

    def list_published(self, sort_order: SortOrder | str = SortOrder.DESC) -> List[Post]:
        return list(self._ordered[SortOrder.coerce(sort_order)])

    def filter_by_category(
        self, category: str, sort_order: SortOrder | str = SortOrder.DESC
    ) -> List[Post]:
        wanted = category.strip().casefold()
        return [
            p
            for p in self._ordered[SortOrder.coerce(sort_order)]
            if wanted in p.categories_folded
        ]

    def resolve_alias(self, path: str) -> Optional[Post]:
        return self._by_alias.get(normalize_path(path))

    def get(self, address: str) -> Optional[Post]:
        return self._by_address.get(normalize_path(address))

    def resolve(self, path: str) -> Optional[Post]:
        """Canonical address first, then legacy alias."""
        return self.get(path) or self.resolve_alias(path)

    def categories(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        names: Dict[str, str] = {}
        for post in self._ordered[SortOrder.ASC]:
            seen = set()
            for category in post.categories:
                key = category.casefold()
                if key in seen:
                    continue
                seen.add(key)
                names.setdefault(key, category)
                counts[key] = counts.get(key, 0) + 1
        return {names[key]: counts[key] for key in sorted(counts)}
