"""Pydantic models for gitcard."""

from gitcard.models.profile import Profile
from gitcard.models.result import (
    ErrorKind,
    LoadResult,
    ProfileFailed,
    ProfileLoaded,
    ProfileLoading,
    ProfileState,
)

__all__ = [
    "Profile",
    "ErrorKind",
    "LoadResult",
    "ProfileFailed",
    "ProfileLoaded",
    "ProfileLoading",
    "ProfileState",
]
