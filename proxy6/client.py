"""Asynchronous client for the proxy rental API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

import httpx

from proxy6 import params as p
from proxy6 import response as responses
from proxy6.error import (
    DocumentedError,
    DocumentedErrorCode,
    RequestError,
    SuccessButCannotParse,
    TooManyRequests,
    UnknownError,
)
from proxy6.method import method_name

DEFAULT_BASE_URL = "https://px6.link"

_T = TypeVar("_T")


class ClientBuildError(ValueError):
    """The client cannot be built from the settings given."""

    def __init__(self) -> None:
        super().__init__("API key must be set")


class ClientBuilder:
    """Collects the settings of a :class:`Client`."""

    def __init__(self) -> None:
        self._base_url: str | None = None
        self._api_key: str | None = None
        self._requester: httpx.AsyncClient | None = None

    def base_url(self, base_url: str) -> ClientBuilder:
        """Use ``base_url`` instead of the default API address."""
        self._base_url = str(base_url)
        return self

    def api_key(self, api_key: str) -> ClientBuilder:
        """Set the API key; it is required."""
        self._api_key = str(api_key)
        return self

    def requester(self, requester: httpx.AsyncClient) -> ClientBuilder:
        """Send requests through ``requester`` instead of a fresh HTTP client."""
        self._requester = requester
        return self

    def build(self) -> Client:
        """Build the client; raises :class:`ClientBuildError` without an API key."""
        if self._api_key is None:
            raise ClientBuildError()
        return Client(
            base_url=self._base_url if self._base_url is not None else DEFAULT_BASE_URL,
            api_key=self._api_key,
            requester=self._requester,
        )


@dataclass(frozen=True)
class Client:
    """Calls the API methods and turns the answers into response objects."""

    base_url: str
    api_key: str = field(repr=False)
    requester: httpx.AsyncClient | None = None

    @classmethod
    def builder(cls) -> ClientBuilder:
        return ClientBuilder()

    def _url(self, params: p.ApiParams) -> str:
        return (
            f"{self.base_url}/api/{self.api_key}/{method_name(params)}"
            f"?{params.to_query_string()}"
        )

    async def _fetch(self, url: str) -> tuple[httpx.Response, str]:
        try:
            if self.requester is None:
                async with httpx.AsyncClient() as requester:
                    reply = await requester.get(url)
            else:
                reply = await self.requester.get(url)
            return reply, reply.text
        except httpx.HTTPError as err:
            raise RequestError(err) from err

    async def _call(
        self, params: p.ApiParams, parse: Callable[[Any], _T]
    ) -> _T:
        reply, text = await self._fetch(self._url(params))

        if reply.status_code == httpx.codes.TOO_MANY_REQUESTS:
            raise TooManyRequests(text)

        code = DocumentedErrorCode.parse_from_response_body(text)
        if code is not None:
            raise DocumentedError(code, text)

        if not reply.is_success:
            raise UnknownError(text)

        try:
            return parse(json.loads(text))
        except (ValueError, TypeError) as err:
            raise SuccessButCannotParse(err, text) from err

    async def get_price(self, params: p.GetPrice) -> responses.GetPrice:
        """Get the cost of an order for a version, period and number of proxies."""
        return await self._call(params, responses.GetPrice.from_json)

    async def get_count(self, params: p.GetCount) -> responses.GetCount:
        """Get how many proxies can be bought for a country."""
        return await self._call(params, responses.GetCount.from_json)

    async def get_country(self, params: p.GetCountry) -> responses.GetCountry:
        """Get the countries proxies can be bought for."""
        return await self._call(params, responses.GetCountry.from_json)

    async def get_proxy(self, params: p.GetProxy) -> responses.GetProxy:
        """Get the list of the account's proxies."""
        return await self._call(params, responses.GetProxy.from_json)

    async def set_type(self, params: p.SetType) -> responses.SuccessResponse:
        """Change the protocol of proxies.

        If every proxy already has the requested type, the API answers with
        the documented ``UNKNOWN`` error code.
        """
        return await self._call(params, responses.SuccessResponse.from_json)

    async def set_description(
        self, params: p.SetDescription
    ) -> responses.SetDescription:
        """Update the technical comment of proxies."""
        return await self._call(params, responses.SetDescription.from_json)

    async def buy(self, params: p.Buy) -> responses.Buy:
        """Purchase proxies."""
        return await self._call(params, responses.Buy.from_json)

    async def prolong(self, params: p.Prolong) -> responses.Prolong:
        """Extend existing proxies."""
        return await self._call(params, responses.Prolong.from_json)

    async def delete(self, params: p.Delete) -> responses.Delete:
        """Delete existing proxies."""
        return await self._call(params, responses.Delete.from_json)

    async def check(self, params: p.Check) -> responses.Check:
        """Check whether a proxy works."""
        return await self._call(params, responses.Check.from_json)

    async def ip_auth(self, params: p.IpAuth) -> responses.SuccessResponse:
        """Attach IP address authorisation to proxies, or remove it."""
        return await self._call(params, responses.SuccessResponse.from_json)