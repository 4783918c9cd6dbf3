from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from app import dependencies as deps
from app.schemas.links import CircleLinks
from app.schemas.site import Homepage
from app.services.site_service import SITE_LINKS, get_homepage, render_circle_links
from app.settings import Settings

router = APIRouter()


@router.get("/", response_model=Homepage)
async def homepage(current_settings: Settings = Depends(deps.get_settings)):
    return get_homepage(current_settings)


@router.get("/links", response_class=HTMLResponse)
async def circle_links(className: Optional[str] = None):
    """
    Render the site's circle links as an HTML fragment
    """
    widget = CircleLinks(links=SITE_LINKS, className=className)
    return HTMLResponse(content=render_circle_links(widget))
