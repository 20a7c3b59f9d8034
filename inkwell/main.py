import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from inkwell.dependencies import build_store
from inkwell.routers import aliases, posts
from inkwell.security import get_api_key
from inkwell.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Load and validate the corpus up front so collisions fail the startup
    store = build_store(settings.CONTENT_DIR, settings.PERMALINK_PATTERN)
    logger.info(f"Serving {len(store)} published posts from {settings.CONTENT_DIR}")
    yield


app = FastAPI(
    title="Inkwell API",
    description="Read-only queries over the blog's post corpus",
    lifespan=lifespan,
)

app.include_router(posts.router, dependencies=[Depends(get_api_key)])
app.include_router(aliases.router, dependencies=[Depends(get_api_key)])


@app.get("/")
async def root():
    return {"message": "Inkwell API is running"}
