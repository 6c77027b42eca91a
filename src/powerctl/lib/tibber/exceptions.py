"""Errors raised by the Tibber GraphQL client."""

from __future__ import annotations

from collections.abc import Sequence

from powerctl.lib.tibber.models import GraphQLErrorDetail


class TibberApiError(Exception):
    """Base class for every client failure."""


class TibberTransportError(TibberApiError):
    """The request never produced a response (network failure or timeout)."""


class TibberHttpError(TibberApiError):
    """The server answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        message = f"HTTP {status_code}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class TibberAuthenticationError(TibberHttpError):
    """The token was rejected (401/403)."""


class TibberGraphQLError(TibberApiError):
    """The envelope carried errors. Only the first message is reported."""

    def __init__(self, errors: Sequence[GraphQLErrorDetail]) -> None:
        self.errors = list(errors)
        first = self.errors[0].message if self.errors else "unknown error"
        super().__init__(f"GraphQL error: {first}")


class TibberDataError(TibberApiError):
    """The response was well-formed but lacked the data the call needs."""


class HomeNotFoundError(TibberDataError):
    def __init__(self, home_id: str) -> None:
        self.home_id = home_id
        super().__init__(f"home {home_id!r} not found for this token")


class NoPriceInfoError(TibberDataError):
    def __init__(self, home_id: str) -> None:
        self.home_id = home_id
        super().__init__(f"no price information available for home {home_id!r}")
