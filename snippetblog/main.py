import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from snippetblog.routers import pages, posts, run
from snippetblog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.SITE_TITLE, description=settings.SITE_DESCRIPTION)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.http_client = httpx.AsyncClient()
    logger.info(f"Serving posts from {settings.posts_path.resolve()}")

    try:
        yield
    finally:
        await app.state.http_client.aclose()
        logger.info("HTTP client closed")


app.router.lifespan_context = lifespan

app.include_router(posts.router)
app.include_router(pages.router)
app.include_router(run.router)
