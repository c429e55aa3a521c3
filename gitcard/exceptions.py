"""Custom exception hierarchy for gitcard."""


class GitCardError(Exception):
    """Base exception for all gitcard errors."""


class FetchError(GitCardError):
    """Request to the GitHub API failed at the transport level."""


class RequestTimeoutError(FetchError):
    """Request to the GitHub API timed out."""


class ParseError(GitCardError):
    """Failed to parse the response body."""


class MalformedBodyError(ParseError):
    """Response body is not valid JSON."""


class ProfileValidationError(GitCardError):
    """Response body does not look like a GitHub user profile."""
