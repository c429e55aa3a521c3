"""HTML views rendered with Jinja2."""

from gitcard.views.github import render_github_card, render_profile_state
from gitcard.views.layout import render_home, render_layout

__all__ = [
    "render_github_card",
    "render_profile_state",
    "render_home",
    "render_layout",
]
