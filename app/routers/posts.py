import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.schemas.blog import Post, PostDetail, TagListing
from app.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[Post])
async def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all published posts, newest first."""
    try:
        return await service.list_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostDetail)
async def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        post = await service.get_post(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/tags", response_model=List[str])
async def list_tags(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return await service.list_tags()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/tags/{tag}", response_model=TagListing)
async def list_posts_for_tag(
    tag: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get published posts carrying the given tag."""
    try:
        posts = await service.list_posts(tag=tag)
        return TagListing(tag=tag, posts=posts)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts tagged {tag}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
