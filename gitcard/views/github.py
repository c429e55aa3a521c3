"""Profile views: the raw card projection and the three-state render."""

from collections.abc import Mapping
from typing import Any

from gitcard.models.profile import Profile
from gitcard.models.result import ProfileFailed, ProfileLoaded, ProfileLoading, ProfileState
from gitcard.views.templating import render_template

AVATAR_WIDTH = 300

# Rendered in place of a field the payload does not carry.
MISSING = "undefined"


def render_github_card(data: Any, width: int = AVATAR_WIDTH) -> str:
    """
    Render follower count and avatar of a profile payload.

    Fields are projected verbatim. A payload without ``followers`` shows
    ``Github: undefined``, an explicit ``null`` shows nothing, and one
    without ``avatar_url`` yields an image with no ``src`` attribute, so
    error bodies render instead of raising. Anything that is not an object
    (a JSON array, a string) carries no fields.

    Args:
        data: Decoded profile body, or a validated Profile
        width: Width attribute of the avatar image

    Returns:
        HTML fragment
    """
    if isinstance(data, Profile):
        data = data.model_dump(mode="json")
    if not isinstance(data, Mapping):
        data = {}

    if "followers" not in data:
        followers = MISSING
    elif data["followers"] is None:
        followers = ""
    else:
        followers = data["followers"]

    return render_template(
        "github_card.html",
        followers=followers,
        avatar_url=data.get("avatar_url") or None,
        width=width,
    )


def render_profile_state(state: ProfileState, width: int = AVATAR_WIDTH) -> str:
    """Render a loading placeholder, the profile card, or a visible error."""
    if isinstance(state, ProfileLoading):
        return render_template("loading.html", username=state.username)
    if isinstance(state, ProfileLoaded):
        return render_github_card(state.profile, width=width)
    if isinstance(state, ProfileFailed):
        return render_template(
            "error.html",
            username=state.username,
            error=state.error.value,
            message=state.message,
        )
    raise TypeError(f"Unsupported profile state: {type(state).__name__}")
