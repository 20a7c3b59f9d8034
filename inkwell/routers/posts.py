import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from inkwell import dependencies as deps
from inkwell.schemas.blog import CategoryCount, PostDetail, PostSummary
from inkwell.security import get_settings
from inkwell.services.document_store import SortOrder
from inkwell.services.posts_service import PostsService
from inkwell.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _order(order: Optional[SortOrder], current_settings: Settings) -> SortOrder:
    return order or SortOrder.coerce(current_settings.DEFAULT_SORT_ORDER)


@router.get("/posts", response_model=List[PostSummary])
def list_posts(
    order: Optional[SortOrder] = None,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    """Get all published posts, newest first unless asked otherwise."""
    try:
        return service.list_posts(_order(order, current_settings))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{address:path}", response_model=PostDetail)
def get_post(
    address: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by its canonical address."""
    try:
        post = service.get_post(f"/{address}")
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {address}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/categories", response_model=List[CategoryCount])
def list_categories(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return service.list_categories()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing categories: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve categories")


@router.get("/categories/{category}", response_model=List[PostSummary])
def list_category(
    category: str,
    order: Optional[SortOrder] = None,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    """Published posts in one category; unknown categories are simply empty."""
    try:
        return service.list_category(category, _order(order, current_settings))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing category {category}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
