"""httpx-based loader for GitHub user profiles."""

from datetime import datetime
from typing import Any

import httpx
from pydantic import ValidationError

from gitcard.config import GitCardConfig
from gitcard.exceptions import (
    FetchError,
    GitCardError,
    MalformedBodyError,
    ProfileValidationError,
    RequestTimeoutError,
)
from gitcard.logging import get_logger
from gitcard.models.profile import Profile
from gitcard.models.result import ErrorKind, LoadResult, ProfileFailed, ProfileLoaded

RATE_LIMIT_STATUSES = (403, 429)


async def _get(client: httpx.AsyncClient, url: str) -> httpx.Response:
    """Issue a single GET, following redirects and translating failures into FetchError."""
    try:
        return await client.get(url, follow_redirects=True)
    except httpx.TimeoutException as e:
        raise RequestTimeoutError(f"Timed out requesting {url}") from e
    except (httpx.TransportError, httpx.TooManyRedirects) as e:
        raise FetchError(f"Request to {url} failed: {e}") from e


def _decode(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise MalformedBodyError(
            f"Response from {response.request.url} is not valid JSON"
        ) from e


async def fetch_profile_payload(client: httpx.AsyncClient, url: str) -> Any:
    """
    Fetch a profile endpoint and return the decoded JSON body as-is.

    The status code is not inspected: an error body such as a rate-limit
    payload is returned exactly like a profile would be.

    Args:
        client: httpx client used for the request
        url: Profile endpoint, e.g. ``https://api.github.com/users/octocat``

    Returns:
        Whatever the response body deserializes to

    Raises:
        FetchError: If the request fails before a response arrives
        RequestTimeoutError: If the request times out
        MalformedBodyError: If the body is not JSON
    """
    response = await _get(client, url)
    return _decode(response)


def parse_profile(payload: Any) -> Profile:
    """
    Validate a decoded body against the Profile schema.

    Raises:
        ProfileValidationError: If required fields are missing or mistyped
    """
    try:
        return Profile.model_validate(payload)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) or "body" for err in e.errors()})
        raise ProfileValidationError(
            f"Response is not a user profile (invalid: {', '.join(fields)})"
        ) from e


def _is_rate_limited(response: httpx.Response, payload: Any) -> bool:
    if response.status_code not in RATE_LIMIT_STATUSES:
        return False
    if response.headers.get("x-ratelimit-remaining") == "0":
        return True
    message = payload.get("message", "") if isinstance(payload, dict) else ""
    return "rate limit" in str(message).lower()


def _error_message(response: httpx.Response, payload: Any) -> str:
    if isinstance(payload, dict) and payload.get("message"):
        return f"HTTP {response.status_code}: {payload['message']}"
    return f"HTTP {response.status_code}"


class ProfileLoader:
    """
    Loads one GitHub profile per call and returns a tagged result.

    Nothing is cached: every ``load()`` issues its own request.

    Example:
        async with ProfileLoader(GitCardConfig(username="octocat")) as loader:
            result = await loader.load()
            if result.status == "loaded":
                print(result.profile.followers)
    """

    def __init__(
        self,
        config: GitCardConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize loader with optional configuration.

        Args:
            config: GitCardConfig instance, uses defaults if None
            transport: Transport for the owned client (tests pass httpx.MockTransport)
            client: Externally managed client; takes precedence over transport
        """
        self.config = config or GitCardConfig()
        self._transport = transport
        self._client = client
        self._owns_client = client is None
        self._log = get_logger("loader")

    async def __aenter__(self) -> "ProfileLoader":
        """Async context manager entry - open the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={
                    "Accept": "application/vnd.github+json",
                    "User-Agent": self.config.user_agent,
                },
                timeout=httpx.Timeout(self.config.request_timeout_seconds),
                follow_redirects=True,
                transport=self._transport,
            )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close the HTTP client if we own it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch_payload(self) -> Any:
        """Fetch the configured profile without status or schema checks."""
        return await fetch_profile_payload(self._require_client(), self.config.profile_url)

    async def load(self) -> LoadResult:
        """
        Load the configured user's profile.

        Returns:
            ProfileLoaded on a 2xx response with a valid profile body,
            ProfileFailed otherwise
        """
        client = self._require_client()
        username = self.config.username
        url = self.config.profile_url
        self._log.info("load_start", username=username, url=url)
        start = datetime.now()

        try:
            response = await _get(client, url)
        except RequestTimeoutError as e:
            return self._failed(ErrorKind.TIMEOUT, str(e), start)
        except FetchError as e:
            return self._failed(ErrorKind.NETWORK, str(e), start)

        status_code = response.status_code
        try:
            payload = _decode(response)
        except MalformedBodyError as e:
            if response.is_success:
                return self._failed(ErrorKind.MALFORMED_BODY, str(e), start, status_code)
            payload = None

        if status_code == 404:
            return self._failed(
                ErrorKind.NOT_FOUND,
                f"GitHub user {username!r} not found",
                start,
                status_code,
            )
        if _is_rate_limited(response, payload):
            return self._failed(
                ErrorKind.RATE_LIMITED,
                _error_message(response, payload),
                start,
                status_code,
            )
        if not response.is_success:
            return self._failed(
                ErrorKind.HTTP_STATUS,
                _error_message(response, payload),
                start,
                status_code,
            )

        try:
            profile = parse_profile(payload)
        except ProfileValidationError as e:
            return self._failed(ErrorKind.INVALID_PROFILE, str(e), start, status_code)

        duration_ms = (datetime.now() - start).total_seconds() * 1000
        self._log.info(
            "load_complete",
            username=username,
            followers=profile.followers,
            duration_ms=duration_ms,
        )
        return ProfileLoaded(
            username=username,
            profile=profile,
            loaded_at=datetime.now(),
            duration_ms=duration_ms,
        )

    def _require_client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise GitCardError("ProfileLoader must be entered with 'async with' before use")
        return self._client

    def _failed(
        self,
        error: ErrorKind,
        message: str,
        start: datetime,
        status_code: int | None = None,
    ) -> ProfileFailed:
        duration_ms = (datetime.now() - start).total_seconds() * 1000
        self._log.error(
            "load_failed",
            username=self.config.username,
            error=error.value,
            status_code=status_code,
            message=message,
        )
        return ProfileFailed(
            username=self.config.username,
            error=error,
            message=message,
            status_code=status_code,
            loaded_at=datetime.now(),
            duration_ms=duration_ms,
        )


async def load_profile(
    config: GitCardConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> LoadResult:
    """Open a ProfileLoader, load once, and close it."""
    async with ProfileLoader(config, transport=transport) as loader:
        return await loader.load()
