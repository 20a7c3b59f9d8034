import logging
from functools import lru_cache

from fastapi import Depends

from inkwell.repos.posts_repo import FilesystemPostsRepo
from inkwell.security import get_settings
from inkwell.services.content_parser import ContentParser
from inkwell.services.corpus_loader import load_corpus
from inkwell.services.document_store import DocumentStore
from inkwell.services.posts_service import PostsService
from inkwell.settings import Settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=4)
def build_store(content_dir: str, permalink_pattern: str) -> DocumentStore:
    """Load the corpus once per (directory, pattern); the content is static."""
    repo = FilesystemPostsRepo(content_dir)
    result = load_corpus(repo, ContentParser(permalink_pattern))
    return DocumentStore(result.posts)


def get_store(current_settings: Settings = Depends(get_settings)) -> DocumentStore:
    return build_store(current_settings.CONTENT_DIR, current_settings.PERMALINK_PATTERN)


def get_posts_service(
    store: DocumentStore = Depends(get_store),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(store=store, reading_wpm=current_settings.READING_WPM)
