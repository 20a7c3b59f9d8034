import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse

from inkwell import dependencies as deps
from inkwell.schemas.blog import AliasResolution
from inkwell.security import get_settings
from inkwell.services.posts_service import PostsService
from inkwell.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _resolve(path: str, service: PostsService) -> AliasResolution:
    try:
        resolution = service.resolve_alias(path)
    except Exception as e:
        logger.error(f"Unexpected error resolving alias {path}: {e}")
        raise HTTPException(status_code=500, detail="Failed to resolve alias")
    if not resolution:
        raise HTTPException(status_code=404, detail="Alias not found")
    return resolution


@router.get("/resolve", response_model=AliasResolution)
def resolve_alias(
    path: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Map a legacy path to the canonical address of the post that claims it."""
    return _resolve(path, service)


@router.get("/redirect")
def redirect_alias(
    path: str,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    resolution = _resolve(path, service)
    return RedirectResponse(
        url=current_settings.absolute_url(resolution.canonical), status_code=301
    )
