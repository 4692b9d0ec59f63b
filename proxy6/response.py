"""Bodies of successful API responses."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from typing import Any

from proxy6.deserializer import (
    DeserializeError,
    _expect_bool,
    _expect_f64,
    _expect_ip,
    _expect_list,
    _expect_str,
    _expect_u64,
    _field,
    parse_proxy_status,
    to_u16,
    to_usize,
)
from proxy6.value_object import (
    Country,
    Price,
    Proxy,
    ProxyId,
    ProxyPeriod,
    ProxyType,
)

# JSON field that carries the second half of a proxy's login pair.
_SECOND_LOGIN_FIELD = "pass"


def _account(data: Any) -> dict[str, str]:
    return {
        "status": _expect_str(_field(data, "status")),
        "user_id": _expect_str(_field(data, "user_id")),
        "balance": _expect_str(_field(data, "balance")),
        "currency": _expect_str(_field(data, "currency")),
    }


def _optional_field(data: Any, key: str) -> Any:
    if not isinstance(data, dict):
        raise DeserializeError("invalid type: expected a JSON object")
    return data.get(key)


@dataclass(frozen=True)
class SuccessResponse:
    """Account details sent with every successful response."""

    status: str
    user_id: str
    balance: str
    currency: str

    @classmethod
    def from_json(cls, data: Any) -> SuccessResponse:
        return cls(**_account(data))


@dataclass(frozen=True)
class GetPrice:
    """Response of ``getprice``."""

    status: str
    user_id: str
    balance: str
    currency: str
    price: Price
    price_single: Price
    period: ProxyPeriod
    count: int

    @classmethod
    def from_json(cls, data: Any) -> GetPrice:
        return cls(
            **_account(data),
            price=Price.from_json(_field(data, "price")),
            price_single=Price.from_json(_field(data, "price_single")),
            period=ProxyPeriod.from_json(_field(data, "period")),
            count=_expect_u64(_field(data, "count")),
        )


@dataclass(frozen=True)
class GetCount:
    """Response of ``getcount``."""

    status: str
    user_id: str
    balance: str
    currency: str
    count: int

    @classmethod
    def from_json(cls, data: Any) -> GetCount:
        return cls(**_account(data), count=_expect_u64(_field(data, "count")))


@dataclass(frozen=True)
class GetCountry:
    """Response of ``getcountry``."""

    status: str
    user_id: str
    balance: str
    currency: str
    list: tuple[Country, ...]

    @classmethod
    def from_json(cls, data: Any) -> GetCountry:
        return cls(
            **_account(data),
            list=tuple(
                Country.from_json(item) for item in _expect_list(_field(data, "list"))
            ),
        )


@dataclass(frozen=True)
class GetProxy:
    """Response of ``getproxy``."""

    status: str
    user_id: str
    balance: str
    currency: str
    list_count: int
    list: tuple[Proxy, ...]

    @classmethod
    def from_json(cls, data: Any) -> GetProxy:
        return cls(
            **_account(data),
            list_count=_expect_u64(_field(data, "list_count")),
            list=tuple(
                Proxy.from_json(item) for item in _expect_list(_field(data, "list"))
            ),
        )


@dataclass(frozen=True)
class SetDescription:
    """Response of ``setdescr``."""

    status: str
    user_id: str
    balance: str
    currency: str
    count: int

    @classmethod
    def from_json(cls, data: Any) -> SetDescription:
        return cls(**_account(data), count=_expect_u64(_field(data, "count")))


@dataclass(frozen=True)
class BoughtProxy:
    """A proxy created by a purchase."""

    id: ProxyId
    ip: ipaddress.IPv4Address | ipaddress.IPv6Address
    host: ipaddress.IPv4Address | ipaddress.IPv6Address
    port: int
    user: str
    password: str = field(repr=False)
    type: ProxyType
    date: str
    date_end: str
    unixtime: int
    unixtime_end: int
    active: bool

    @classmethod
    def from_json(cls, data: Any) -> BoughtProxy:
        return cls(
            id=ProxyId.from_json(_field(data, "id")),
            ip=_expect_ip(_field(data, "ip")),
            host=_expect_ip(_field(data, "host")),
            port=to_u16(_field(data, "port")),
            user=_expect_str(_field(data, "user")),
            password=_expect_str(_field(data, _SECOND_LOGIN_FIELD)),
            type=ProxyType.from_json(_field(data, "type")),
            date=_expect_str(_field(data, "date")),
            date_end=_expect_str(_field(data, "date_end")),
            unixtime=_expect_u64(_field(data, "unixtime")),
            unixtime_end=_expect_u64(_field(data, "unixtime_end")),
            active=parse_proxy_status(_field(data, "active")),
        )


@dataclass(frozen=True)
class Buy:
    """Response of ``buy``."""

    status: str
    user_id: str
    balance: str
    currency: str
    order_id: int
    count: int
    price: Price
    period: ProxyPeriod
    country: str
    list: tuple[BoughtProxy, ...]

    @classmethod
    def from_json(cls, data: Any) -> Buy:
        return cls(
            **_account(data),
            order_id=_expect_u64(_field(data, "order_id")),
            count=to_usize(_field(data, "count")),
            price=Price.from_json(_field(data, "price")),
            period=ProxyPeriod.from_json(_field(data, "period")),
            country=_expect_str(_field(data, "country")),
            list=tuple(
                BoughtProxy.from_json(item)
                for item in _expect_list(_field(data, "list"))
            ),
        )


@dataclass(frozen=True)
class ProlongedProxy:
    """A proxy whose rental was extended."""

    id: ProxyId
    date_end: str
    unixtime_end: int

    @classmethod
    def from_json(cls, data: Any) -> ProlongedProxy:
        return cls(
            id=ProxyId.from_json(_field(data, "id")),
            date_end=_expect_str(_field(data, "date_end")),
            unixtime_end=_expect_u64(_field(data, "unixtime_end")),
        )


@dataclass(frozen=True)
class Prolong:
    """Response of ``prolong``."""

    status: str
    user_id: str
    balance: str
    currency: str
    order_id: int
    price: Price
    period: ProxyPeriod
    count: int
    list: tuple[ProlongedProxy, ...]

    @classmethod
    def from_json(cls, data: Any) -> Prolong:
        return cls(
            **_account(data),
            order_id=_expect_u64(_field(data, "order_id")),
            price=Price.from_json(_field(data, "price")),
            period=ProxyPeriod.from_json(_field(data, "period")),
            count=to_usize(_field(data, "count")),
            list=tuple(
                ProlongedProxy.from_json(item)
                for item in _expect_list(_field(data, "list"))
            ),
        )


@dataclass(frozen=True)
class Delete:
    """Response of ``delete``."""

    status: str
    user_id: str
    balance: str
    currency: str
    count: int

    @classmethod
    def from_json(cls, data: Any) -> Delete:
        return cls(**_account(data), count=_expect_u64(_field(data, "count")))


@dataclass(frozen=True)
class Check:
    """Response of ``check``."""

    status: str
    user_id: str
    balance: str
    currency: str
    proxy_id: ProxyId | None
    proxy_status: bool
    proxy_time: float

    @classmethod
    def from_json(cls, data: Any) -> Check:
        account = _account(data)
        raw_id = _optional_field(data, "proxy_id")
        return cls(
            **account,
            proxy_id=None if raw_id is None else ProxyId.from_json(raw_id),
            proxy_status=_expect_bool(_field(data, "proxy_status")),
            proxy_time=_expect_f64(_field(data, "proxy_time")),
        )