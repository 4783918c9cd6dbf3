import asyncio
import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

POST_EXTENSION = ".md"


class FilesystemPostsRepo:
    def __init__(self, posts_dir: Path | str):
        self.posts_dir = Path(posts_dir)

    def list_post_files(self) -> List[str]:
        """Every entry directly inside the posts directory, by name."""
        return sorted(entry.name for entry in self.posts_dir.iterdir())

    def path_for(self, filename: str) -> Path:
        return self.posts_dir / filename

    def filename_for_slug(self, slug: str) -> Optional[str]:
        filename = f"{slug}{POST_EXTENSION}"
        # Slugs map to direct children only
        if Path(filename).name != filename:
            return None
        if not self.path_for(filename).is_file():
            return None
        return filename

    async def read_post_file(self, filename: str) -> str:
        logger.debug(f"Reading post file {filename}")
        return await asyncio.to_thread(
            self.path_for(filename).read_text, encoding="utf-8"
        )
