from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, JsonValue, ValidationError

from powerctl.lib.tibber.exceptions import (
    HomeNotFoundError,
    NoPriceInfoError,
    TibberAuthenticationError,
    TibberDataError,
    TibberGraphQLError,
    TibberHttpError,
    TibberTransportError,
)
from powerctl.lib.tibber.models import (
    GraphQLRequest,
    GraphQLResponse,
    Home,
    HomesData,
    PriceData,
    PriceInfo,
)
from powerctl.lib.tibber.queries import HOMES_QUERY, PRICE_INFO_QUERY

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

GRAPHQL_ENDPOINT = "https://api.tibber.com/v1-beta/gql"


class TibberClient:
    """Stateless client for the Tibber GraphQL API.

    Each call opens its own connection, so separate instances (or concurrent
    calls on one instance) never share request state. Calls are cancelled the
    asyncio way: wrap them in ``asyncio.timeout()`` and the in-flight request
    is aborted with ``TimeoutError``.
    """

    def __init__(
        self,
        token: str,
        *,
        endpoint: str = GRAPHQL_ENDPOINT,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.token = token
        self.endpoint = endpoint
        self._timeout = timeout_seconds
        self._transport = transport

    async def get_homes(self) -> list[Home]:
        data = await self.execute(HOMES_QUERY)
        return _parse_data(HomesData, data, "homes").viewer.homes

    async def get_prices(self, home_id: str) -> PriceInfo:
        data = await self.execute(PRICE_INFO_QUERY)
        homes = _parse_data(PriceData, data, "price info").viewer.homes

        home = next((candidate for candidate in homes if candidate.id == home_id), None)
        if home is None:
            raise HomeNotFoundError(home_id)
        subscription = home.current_subscription
        if subscription is None or subscription.price_info is None:
            raise NoPriceInfoError(home_id)
        return subscription.price_info

    async def execute(
        self,
        query: str,
        variables: dict[str, JsonValue] | None = None,
    ) -> dict[str, Any]:
        """Send one GraphQL request and return the envelope's ``data``."""
        request = GraphQLRequest(query=query, variables=variables or {})
        logger.debug("POST %s", self.endpoint)

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self.endpoint,
                    headers=self._build_headers(),
                    content=request.model_dump_json(),
                )
        except httpx.TimeoutException as exc:
            raise TibberTransportError(f"Request to {self.endpoint} timed out") from exc
        except httpx.TransportError as exc:
            raise TibberTransportError(f"Request to {self.endpoint} failed: {exc}") from exc

        logger.debug("Response status %s from %s", response.status_code, self.endpoint)
        if response.status_code in (401, 403):
            raise TibberAuthenticationError(response.status_code, response.reason_phrase)
        if not response.is_success:
            raise TibberHttpError(response.status_code, response.reason_phrase)

        try:
            envelope = GraphQLResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise TibberDataError("Malformed GraphQL response") from exc

        if envelope.errors:
            logger.debug("GraphQL response carried %d error(s)", len(envelope.errors))
            raise TibberGraphQLError(envelope.errors)
        if envelope.data is None:
            raise TibberDataError("GraphQL response contained no data")
        return envelope.data

    def _build_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }


def _parse_data(model: type[T], data: dict[str, Any], label: str) -> T:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise TibberDataError(f"Unexpected {label} response shape") from exc
