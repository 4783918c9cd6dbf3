from typing import Iterable, Optional

from bs4 import BeautifulSoup

from app.schemas.links import CircleLink, CircleLinks
from app.schemas.site import Homepage
from app.settings import Settings

SITE_LINKS = [
    CircleLink(url="/posts", title="Blog", icon="pencil"),
    CircleLink(
        url="https://github.com/brophdawg11",
        title="GitHub",
        icon="github",
        external=True,
    ),
    CircleLink(
        url="https://twitter.com/brophdawg11",
        title="Twitter",
        icon="twitter",
        external=True,
    ),
    CircleLink(
        url="https://www.linkedin.com/in/mattbrophy",
        title="LinkedIn",
        icon="linkedin",
        external=True,
    ),
]


def render_circle_links(widget: CircleLinks) -> str:
    """
    Render the circle-links widget: a <nav> holding one icon + label anchor
    per link. External links open in a new tab.
    """
    soup = BeautifulSoup("", "html.parser")
    nav = soup.new_tag("nav")
    nav["class"] = f"circle-links {widget.className or ''}".strip()

    for link in widget.links:
        anchor = soup.new_tag("a", href=link.url, title=link.title)
        anchor["class"] = "circle-links__a"
        if link.external:
            anchor["target"] = "_blank"
            anchor["rel"] = "noopener noreferrer"

        icon = soup.new_tag("span")
        icon["class"] = f"fa fa-{link.icon}"
        label = soup.new_tag("span")
        label["class"] = "circle-links__p"
        label.string = link.title

        anchor.append(icon)
        anchor.append(label)
        nav.append(anchor)

    soup.append(nav)
    return str(soup)


def get_homepage(
    current_settings: Settings, links: Optional[Iterable[CircleLink]] = None
) -> Homepage:
    return Homepage(
        title=current_settings.SITE_TITLE,
        descriptions=[
            current_settings.SITE_DESCRIPTION,
            "enjoys sports, beer, coffee, and coding",
            "order of preference depends on day and time",
        ],
        logo="/images/logo.png",
        links=list(SITE_LINKS if links is None else links),
    )
