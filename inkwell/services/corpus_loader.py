import logging
from typing import List, NamedTuple

from inkwell.models.post import Post
from inkwell.services.content_parser import PostParseError

logger = logging.getLogger(__name__)


class LoadResult(NamedTuple):
    posts: List[Post]
    errors: List[PostParseError]


def load_corpus(repo, parser) -> LoadResult:
    """Read every post file from the repo; bad files are logged and collected, not fatal."""
    posts: List[Post] = []
    errors: List[PostParseError] = []

    for path in repo.list_post_files():
        source = repo.relative_source(path)
        try:
            text = repo.read_post_file(path)
        except (OSError, UnicodeDecodeError) as e:
            error = PostParseError(source, f"unreadable file ({e})")
            logger.warning(f"Skipping post {source}: {error.reason}")
            errors.append(error)
            continue

        try:
            posts.append(parser.parse(text, source))
        except PostParseError as e:
            logger.warning(f"Skipping post {source}: {e.reason}")
            errors.append(e)

    logger.info(f"Loaded {len(posts)} posts ({len(errors)} skipped) from {repo.root}")
    return LoadResult(posts, errors)
