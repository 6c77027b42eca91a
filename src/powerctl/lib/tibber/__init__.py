"""Client for the Tibber GraphQL API."""

from powerctl.lib.tibber.client import GRAPHQL_ENDPOINT, TibberClient
from powerctl.lib.tibber.exceptions import (
    HomeNotFoundError,
    NoPriceInfoError,
    TibberApiError,
    TibberAuthenticationError,
    TibberDataError,
    TibberGraphQLError,
    TibberHttpError,
    TibberTransportError,
)
from powerctl.lib.tibber.models import Home, PriceInfo, PriceLevel, PricePoint

__all__ = [
    "GRAPHQL_ENDPOINT",
    "Home",
    "HomeNotFoundError",
    "NoPriceInfoError",
    "PriceInfo",
    "PriceLevel",
    "PricePoint",
    "TibberApiError",
    "TibberAuthenticationError",
    "TibberClient",
    "TibberDataError",
    "TibberGraphQLError",
    "TibberHttpError",
    "TibberTransportError",
]
