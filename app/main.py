import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.routers import posts, site
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="brophy.org API", description="Matt Brophy's personal website")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.posts_path.is_dir():
        logger.info(f"Serving posts from {settings.posts_path.resolve()}")
    else:
        logger.warning(f"Posts directory {settings.posts_path} does not exist")

    try:
        yield
    finally:
        logger.info("Site API shut down")


app.router.lifespan_context = lifespan

app.include_router(site.router)
app.include_router(posts.router)
