import logging
import sys

from inkwell.repos.posts_repo import FilesystemPostsRepo
from inkwell.services.content_parser import ContentParser
from inkwell.services.corpus_loader import load_corpus
from inkwell.services.document_store import find_collisions
from inkwell.settings import settings

logger = logging.getLogger(__name__)


def validate(content_dir: str, permalink_pattern: str) -> int:
    """Number of problems (unparseable posts plus address collisions) in the corpus."""
    repo = FilesystemPostsRepo(content_dir)
    result = load_corpus(repo, ContentParser(permalink_pattern))

    for error in result.errors:
        logger.error(f"Invalid post {error.source}: {error.reason}")

    collisions = find_collisions(result.posts)
    for collision in collisions:
        logger.error(str(collision))

    drafts = sum(1 for p in result.posts if p.draft)
    logger.info(
        f"Checked {len(result.posts)} posts ({drafts} drafts): "
        f"{len(result.errors)} invalid, {len(collisions)} collisions"
    )
    return len(result.errors) + len(collisions)


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    content_dir = sys.argv[1] if len(sys.argv) > 1 else settings.CONTENT_DIR
    try:
        problems = validate(content_dir, settings.PERMALINK_PATTERN)
    except FileNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)
    sys.exit(1 if problems else 0)
