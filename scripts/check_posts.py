import asyncio
import logging
import sys

from app.repos.posts_repo import FilesystemPostsRepo
from app.services.posts_service import load_posts
from app.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main(posts_dir: str | None = None) -> int:
    repo = FilesystemPostsRepo(posts_dir or settings.posts_path)
    try:
        posts = asyncio.run(
            load_posts(repo, permalink_prefix=settings.PERMALINK_PREFIX)
        )
    except Exception as e:
        logger.error(f"Post check failed: {e}", exc_info=True)
        return 1

    for post in posts:
        logger.info(f"{post.postDate or '----------'}  {post.permalink}  {post.title}")
    logger.info(f"{len(posts)} posts OK.")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
