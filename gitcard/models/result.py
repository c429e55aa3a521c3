"""Tagged load result models."""

from datetime import datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from gitcard.models.profile import Profile


class ErrorKind(str, Enum):
    """Why a profile could not be loaded."""
    NETWORK = "network"
    TIMEOUT = "timeout"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    HTTP_STATUS = "http_status"
    MALFORMED_BODY = "malformed_body"
    INVALID_PROFILE = "invalid_profile"


class ProfileLoading(BaseModel):
    """Profile has been requested but not resolved yet."""

    status: Literal["loading"] = "loading"
    username: str


class ProfileLoaded(BaseModel):
    """Profile was fetched and validated."""

    status: Literal["loaded"] = "loaded"
    username: str
    profile: Profile
    loaded_at: datetime
    duration_ms: float


class ProfileFailed(BaseModel):
    """Profile could not be fetched or did not validate."""

    status: Literal["failed"] = "failed"
    username: str
    error: ErrorKind
    message: str
    status_code: int | None = None
    loaded_at: datetime
    duration_ms: float


LoadResult = Annotated[
    Union[ProfileLoaded, ProfileFailed],
    Field(discriminator="status"),
]

ProfileState = Annotated[
    Union[ProfileLoading, ProfileLoaded, ProfileFailed],
    Field(discriminator="status"),
]
