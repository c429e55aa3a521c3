"""GitHub user profile model."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, HttpUrl, TypeAdapter, ValidationError

_http_url = TypeAdapter(HttpUrl)


def _check_http_url(value: str) -> str:
    try:
        _http_url.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"not an http(s) URL: {value!r}") from e
    return value


# http(s) URL kept verbatim, without trailing-slash normalisation.
RawHttpUrl = Annotated[str, AfterValidator(_check_http_url)]


class Profile(BaseModel):
    """Public fields of a GitHub user as returned by ``GET /users/{username}``."""

    model_config = {"extra": "ignore"}

    followers: int
    avatar_url: RawHttpUrl
    login: str | None = None
    name: str | None = None
    html_url: HttpUrl | None = None
    bio: str | None = None
    public_repos: int | None = None
    following: int | None = None
