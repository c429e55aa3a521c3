"""httpx.MockTransport helpers - no test touches the network."""

from collections.abc import Callable, Iterable

import httpx


API_BASE = "https://api.test"

PROFILE_BODY = {
    "login": "octocat",
    "name": "The Octocat",
    "followers": 42,
    "following": 9,
    "public_repos": 8,
    "avatar_url": "https://example.com/a.png",
    "html_url": "https://github.com/octocat",
    "bio": None,
}

RATE_LIMIT_BODY = {
    "message": "API rate limit exceeded",
    "documentation_url": "https://docs.github.com/rest/overview/resources-in-the-rest-api#rate-limiting",
}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def json_transport(body, status_code: int = 200, headers: dict | None = None) -> RecordingTransport:
    """Answer every request with the same JSON body."""
    return RecordingTransport(
        lambda request: httpx.Response(status_code, json=body, headers=headers)
    )


def sequence_transport(bodies: Iterable) -> RecordingTransport:
    """Answer successive requests with successive JSON bodies."""
    remaining = iter(bodies)
    return RecordingTransport(lambda request: httpx.Response(200, json=next(remaining)))


def raising_transport(exc_type: type[httpx.TransportError]) -> RecordingTransport:
    """Fail every request at the transport level."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_type("simulated failure", request=request)

    return RecordingTransport(handler)


def text_transport(text: str, status_code: int = 200) -> RecordingTransport:
    """Answer every request with a non-JSON body."""
    return RecordingTransport(
        lambda request: httpx.Response(
            status_code, text=text, headers={"content-type": "text/html"}
        )
    )


def redirect_transport(body, moved_from: str, moved_to: str) -> RecordingTransport:
    """Answer ``moved_from`` with a 301 to ``moved_to``, which serves ``body``."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == moved_from:
            return httpx.Response(
                301,
                json={"message": "Moved Permanently", "url": f"{API_BASE}{moved_to}"},
                headers={"location": moved_to},
            )
        return httpx.Response(200, json=body)

    return RecordingTransport(handler)


def redirect_loop_transport() -> RecordingTransport:
    """Redirect every request back to itself."""
    return RecordingTransport(
        lambda request: httpx.Response(301, headers={"location": request.url.path})
    )
