"""gitcard - GitHub profile card."""

__version__ = "0.1.0"

from gitcard.models.profile import Profile
from gitcard.models.result import (
    ErrorKind,
    LoadResult,
    ProfileFailed,
    ProfileLoaded,
    ProfileLoading,
    ProfileState,
)
from gitcard.config import GitCardConfig
from gitcard.core.loader import ProfileLoader, fetch_profile_payload, load_profile
from gitcard.core.exporter import to_json, to_dict, save_json, load_json
from gitcard.views import render_github_card, render_profile_state, render_layout

__all__ = [
    # Main interface
    "ProfileLoader",
    "GitCardConfig",
    "load_profile",
    "fetch_profile_payload",
    # Models
    "Profile",
    "ErrorKind",
    "LoadResult",
    "ProfileFailed",
    "ProfileLoaded",
    "ProfileLoading",
    "ProfileState",
    # Views
    "render_github_card",
    "render_profile_state",
    "render_layout",
    # Export utilities
    "to_json",
    "to_dict",
    "save_json",
    "load_json",
    "__version__",
]
