"""Page layout: header, routed outlet, footer."""

from datetime import datetime

from markupsafe import Markup

from gitcard.views.templating import render_template

SITE_NAME = "gitcard"

NAV = (
    ("Home", "/"),
    ("Github", "/github"),
)


def render_layout(
    outlet_html: str,
    *,
    title: str = SITE_NAME,
    nav: tuple[tuple[str, str], ...] = NAV,
    active: str | None = None,
) -> str:
    """
    Compose a full page around an already-rendered outlet fragment.

    Args:
        outlet_html: Markup produced by a route's view; inserted unescaped
        title: Document title
        nav: (label, href) pairs for the header
        active: href of the current route, marked with aria-current

    Returns:
        Complete HTML document
    """
    return render_template(
        "layout.html",
        title=title,
        outlet=Markup(outlet_html),
        nav=nav,
        active=active,
        site_name=SITE_NAME,
        year=datetime.now().year,
    )


def render_home(username: str) -> str:
    """Index route outlet."""
    return render_template("home.html", site_name=SITE_NAME, username=username)
