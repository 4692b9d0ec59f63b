"""Errors returned by API calls."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any


class DocumentedErrorCode(Enum):
    """Error codes listed in the API documentation."""

    UNKNOWN = 30
    KEY = 100
    IP = 105
    METHOD = 110
    COUNT = 200
    PERIOD = 210
    COUNTRY = 220
    IDS = 230
    VERSION = 240
    DESCRIPTION = 250
    TYPE = 260
    PORT = 270
    PROXY_STRING = 280
    ACTIVE_PROXY_ALLOW = 300
    NO_MONEY = 400
    NOT_FOUND = 404
    PRICE = 410

    @property
    def code(self) -> int:
        return self.value

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.description

    @classmethod
    def parse_from_response_body(cls, body: str | bytes) -> DocumentedErrorCode | None:
        """Return the documented code in ``body``'s ``error_id``, if there is one."""
        try:
            decoded: Any = json.loads(body)
        except ValueError:
            return None
        if not isinstance(decoded, dict):
            return None
        code = decoded.get("error_id")
        if isinstance(code, bool) or not isinstance(code, int) or code < 0:
            return None
        try:
            return cls(code)
        except ValueError:
            return None


_DESCRIPTIONS = {
    DocumentedErrorCode.UNKNOWN: "Unknown error",
    DocumentedErrorCode.KEY: "Authorization error, wrong key",
    DocumentedErrorCode.IP: (
        "The API was accessed from an incorrect IP (if the restriction is enabled), "
        "or an incorrect IP address format"
    ),
    DocumentedErrorCode.METHOD: "Wrong method",
    DocumentedErrorCode.COUNT: "Wrong proxies quantity, wrong amount or no quantity input",
    DocumentedErrorCode.PERIOD: "Period error, wrong period input (days) or no input",
    DocumentedErrorCode.COUNTRY: (
        "Country error, wrong country input (iso2 for country input) or no input"
    ),
    DocumentedErrorCode.IDS: (
        "Error of the list of the proxy numbers. Proxy numbers have to divided with comas"
    ),
    DocumentedErrorCode.VERSION: "The proxy version is specified incorrectly",
    DocumentedErrorCode.DESCRIPTION: "Technical description error",
    DocumentedErrorCode.TYPE: "Proxy type (protocol) error. Incorrect or missing",
    DocumentedErrorCode.PORT: "Proxy port error, incorrectly specified or missing",
    DocumentedErrorCode.PROXY_STRING: (
        "Proxy string error for the check method, incorrectly specified"
    ),
    DocumentedErrorCode.ACTIVE_PROXY_ALLOW: (
        "Proxy amount error. Appears after attempt of purchase of more proxies "
        "than available on the service"
    ),
    DocumentedErrorCode.NO_MONEY: "Balance error. Zero or low balance on your account",
    DocumentedErrorCode.NOT_FOUND: "Element error. The requested item was not found",
    DocumentedErrorCode.PRICE: (
        "Error calculating the cost. The total cost is less than or equal to zero"
    ),
}


class ApiError(Exception):
    """Base class for every error an API call can raise."""


class DocumentedError(ApiError):
    """The API answered with an error code from its documentation."""

    def __init__(self, code: DocumentedErrorCode, response: str) -> None:
        self.code = code
        self.response = response
        super().__init__(
            f"Documented error occurred: {code.name}, response body: {response}"
        )


class RequestError(ApiError):
    """The HTTP request failed: network, TLS, proxy and similar errors."""

    def __init__(self, source: BaseException) -> None:
        self.source = source
        super().__init__(f"Request error: {source}")


class TooManyRequests(ApiError):
    """The API rate limit of 3 requests per second was exceeded."""

    def __init__(self, response: str) -> None:
        self.response = response
        super().__init__("Too many requests")


class UnknownError(ApiError):
    """The API reported an error that is not documented."""

    def __init__(self, response: str) -> None:
        self.response = response
        super().__init__(f"Unknown API error: {response}")


class SuccessButCannotParse(ApiError):
    """The API reported success but the body could not be read."""

    def __init__(self, source: BaseException, response: str) -> None:
        self.source = source
        self.response = response
        super().__init__(
            f"Success response but cannot parse body: {source}, response: {response}"
        )