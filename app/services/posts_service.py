import asyncio
import datetime
import logging
from typing import Iterable, List, Optional

import frontmatter
import yaml
from pydantic import ValidationError

from app.exceptions import InvalidPostError
from app.repos.posts_repo import POST_EXTENSION
from app.schemas.blog import Post, PostAttributes, PostDetail
from app.services.content_renderer import ContentRenderer
from app.utils import calculate_reading_time, relative_date

logger = logging.getLogger(__name__)

DEFAULT_PERMALINK_PREFIX = "/post/"


class PostsService:
    def __init__(
        self,
        repo,
        renderer: Optional[ContentRenderer] = None,
        permalink_prefix: str = DEFAULT_PERMALINK_PREFIX,
        clock=None,
    ):
        self.repo = repo
        self.renderer = renderer or ContentRenderer()
        self.permalink_prefix = permalink_prefix
        self.clock = clock

    async def list_posts(self, tag: Optional[str] = None) -> List[Post]:
        posts = await load_posts(
            self.repo,
            renderer=self.renderer,
            permalink_prefix=self.permalink_prefix,
            now=self._now(),
        )
        if tag is None:
            return posts
        return filter_by_tag(posts, tag)

    async def get_post(self, slug: str) -> Optional[PostDetail]:
        filename = self.repo.filename_for_slug(slug)
        if filename is None:
            return None
        return await read_post(
            filename,
            repo=self.repo,
            renderer=self.renderer,
            permalink_prefix=self.permalink_prefix,
            now=self._now(),
        )

    async def list_tags(self) -> List[str]:
        posts = await self.list_posts()
        return sorted({tag for post in posts for tag in post.tags})

    def _now(self) -> Optional[datetime.datetime]:
        return self.clock() if self.clock else None


async def load_posts(
    repo,
    *,
    renderer: Optional[ContentRenderer] = None,
    permalink_prefix: str = DEFAULT_PERMALINK_PREFIX,
    now: Optional[datetime.datetime] = None,
) -> List[PostDetail]:
    """Read every post file at once, drop drafts, newest first."""
    renderer = renderer or ContentRenderer()
    filenames = repo.list_post_files()
    posts = await asyncio.gather(
        *(
            read_post(
                filename,
                repo=repo,
                renderer=renderer,
                permalink_prefix=permalink_prefix,
                now=now,
            )
            for filename in filenames
        )
    )
    published = sort_posts(p for p in posts if not p.draft)
    logger.info(
        f"Loaded {len(published)} posts ({len(posts) - len(published)} drafts skipped)"
    )
    return published


async def read_post(
    filename: str,
    *,
    repo,
    renderer: Optional[ContentRenderer] = None,
    permalink_prefix: str = DEFAULT_PERMALINK_PREFIX,
    now: Optional[datetime.datetime] = None,
) -> PostDetail:
    text = await repo.read_post_file(filename)
    return parse_post(
        filename,
        text,
        renderer=renderer or ContentRenderer(),
        permalink_prefix=permalink_prefix,
        now=now,
    )


def parse_post(
    filename: str,
    text: str,
    *,
    renderer: ContentRenderer,
    permalink_prefix: str = DEFAULT_PERMALINK_PREFIX,
    now: Optional[datetime.datetime] = None,
) -> PostDetail:
    """Build a post from a file's raw text. Raises InvalidPostError on bad front matter."""
    try:
        parsed = frontmatter.loads(text)
    except yaml.YAMLError as e:
        raise InvalidPostError(filename, f"has unreadable front matter: {e}") from e

    try:
        attributes = PostAttributes.model_validate(parsed.metadata or {})
    except ValidationError as e:
        raise InvalidPostError(filename) from e

    try:
        relative = relative_date(attributes.postDate, now=now)
    except ValueError as e:
        raise InvalidPostError(
            filename, f"has an invalid postDate: {attributes.postDate!r}"
        ) from e

    slug = slug_from_filename(filename)
    html = renderer.render(parsed.content)

    return PostDetail(
        slug=slug,
        title=attributes.title,
        author=attributes.author,
        postDate=attributes.postDate,
        tags=parse_tags(attributes.tags),
        draft=attributes.draft,
        permalink=f"{permalink_prefix}{slug}",
        excerpt=renderer.excerpt(html),
        readingTime=calculate_reading_time(parsed.content),
        relativeDate=relative,
        html=html,
    )


def slug_from_filename(filename: str) -> str:
    return filename.removesuffix(POST_EXTENSION)


def parse_tags(raw: str) -> List[str]:
    """
    Split a comma separated tag string into trimmed tags.
    An empty string gives no tags rather than a single empty tag.
    """
    if not raw or not raw.strip():
        return []
    return [tag.strip() for tag in raw.split(",")]


def sort_posts(posts: Iterable[Post]) -> List[Post]:
    # Reverse chronological order
    return sorted(posts, key=lambda p: p.postDate, reverse=True)


def filter_by_tag(posts: Iterable[Post], tag: str) -> List[Post]:
    return [p for p in posts if tag in p.tags]
