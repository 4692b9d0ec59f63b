"""Validated values used in API requests and responses."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from proxy6.deserializer import (
    DeserializeError,
    _expect_ip,
    _expect_str,
    _expect_u64,
    _field,
    parse_proxy_status,
    to_f64,
    to_string,
    to_u16,
    to_usize,
)

_MAX_DESCRIPTION_BYTES = 50
_MAX_PAGE_LIMIT = 1000
# JSON field that carries the second half of a proxy's login pair.
_SECOND_LOGIN_FIELD = "pass"


class BuildError(ValueError):
    """A value given to build a request is not valid."""


class ProxyPeriodTooLow(BuildError):
    def __init__(self) -> None:
        super().__init__("Proxy period must be greater than zero")


class CountryMustBeIso2(BuildError):
    def __init__(self) -> None:
        super().__init__("Country must be ISO2 format")


class PageLimitTooLow(BuildError):
    def __init__(self) -> None:
        super().__init__("Page limit must be greater than zero")


class PageLimitTooHigh(BuildError):
    def __init__(self) -> None:
        super().__init__("Page limit must be less than or equal to 1000")


class ProxyDescriptionTooLong(BuildError):
    def __init__(self) -> None:
        super().__init__("Proxy description must be less than or equal to 50 symbols")


class ProxyStringIncorrectFormat(BuildError):
    def __init__(self) -> None:
        super().__init__(
            "Proxy string format must be `ip:port:user:pass`, "
            "user and password must be non-empty"
        )


def _unchecked(cls: type, **fields: Any) -> Any:
    """Build a frozen value from trusted server data, skipping client-side checks."""
    obj = object.__new__(cls)
    for name, value in fields.items():
        object.__setattr__(obj, name, value)
    return obj


@dataclass(frozen=True)
class ProxyPeriod:
    """Proxy rental period in days."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ProxyPeriodTooLow()

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value

    @classmethod
    def from_json(cls, value: Any) -> ProxyPeriod:
        return _unchecked(cls, value=to_usize(value))


@dataclass(frozen=True)
class Country:
    """Lower-case two-letter ISO country code."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value.encode("utf-8")) != 2:
            raise CountryMustBeIso2()
        object.__setattr__(self, "value", self.value.lower())

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_json(cls, value: Any) -> Country:
        return _unchecked(cls, value=_expect_str(value))


@dataclass(frozen=True)
class PageLimit:
    """Number of proxies returned per page, from 1 to 1000."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise PageLimitTooLow()
        if self.value > _MAX_PAGE_LIMIT:
            raise PageLimitTooHigh()

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class ProxyDescription:
    """Technical comment attached to proxies, at most 50 bytes."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value.encode("utf-8")) > _MAX_DESCRIPTION_BYTES:
            raise ProxyDescriptionTooLong()

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_json(cls, value: Any) -> ProxyDescription:
        return _unchecked(cls, value=_expect_str(value))


@dataclass(frozen=True)
class ProxyId:
    """Identifier of a proxy."""

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_json(cls, value: Any) -> ProxyId:
        return cls(to_string(value))


@dataclass(frozen=True)
class ProxyString:
    """Proxy in the form ``ip:port:user:pass``."""

    value: str

    def __post_init__(self) -> None:
        parts = self.value.split(":")
        if len(parts) != 4:
            raise ProxyStringIncorrectFormat()
        ip, port, user, secret = parts
        try:
            ipaddress.ip_address(ip)
            to_u16(port)
        except (ValueError, DeserializeError):
            raise ProxyStringIncorrectFormat() from None
        if not user or not secret:
            raise ProxyStringIncorrectFormat()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class IpsToConnect:
    """IP addresses to authorise on proxies, or ``None`` to remove authorisation."""

    ips: tuple[ipaddress.IPv4Address | ipaddress.IPv6Address, ...] | None = None

    def __post_init__(self) -> None:
        if self.ips is not None:
            object.__setattr__(
                self, "ips", tuple(ipaddress.ip_address(ip) for ip in self.ips)
            )

    @classmethod
    def delete(cls) -> IpsToConnect:
        return cls(None)

    @classmethod
    def connect(cls, ips: Iterable[Any]) -> IpsToConnect:
        return cls(tuple(ips))

    @property
    def is_delete(self) -> bool:
        return self.ips is None

    def __str__(self) -> str:
        if self.ips is None:
            return "delete"
        return ",".join(str(ip) for ip in self.ips)


class ProxyType(str, Enum):
    """Proxy protocol."""

    HTTP = "http"
    SOCKS5 = "socks"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_json(cls, value: Any) -> ProxyType:
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise DeserializeError(
            f"unknown variant {value!r}, expected one of 'http', 'socks'"
        )


class ProxyStatus(str, Enum):
    """Filter for proxy state."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    EXPIRING = "expiring"
    ALL = "all"

    def __str__(self) -> str:
        return self.value


class ProxyVersion(str, Enum):
    """Proxy IP version as the API encodes it."""

    IPV4 = "4"
    IPV6 = "6"
    IPV4_SHARED = "3"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Price:
    """Monetary amount."""

    value: float

    def __float__(self) -> float:
        return self.value

    @classmethod
    def from_json(cls, value: Any) -> Price:
        return cls(to_f64(value))


@dataclass(frozen=True)
class Proxy:
    """A proxy owned by the account."""

    id: ProxyId
    ip: ipaddress.IPv4Address | ipaddress.IPv6Address
    host: ipaddress.IPv4Address | ipaddress.IPv6Address
    port: int
    user: str
    password: str = field(repr=False)
    type: ProxyType
    country: Country
    date: str
    date_end: str
    unixtime: int
    unixtime_end: int
    description: ProxyDescription
    active: bool

    @classmethod
    def from_json(cls, data: Any) -> Proxy:
        return cls(
            id=ProxyId.from_json(_field(data, "id")),
            ip=_expect_ip(_field(data, "ip")),
            host=_expect_ip(_field(data, "host")),
            port=to_u16(_field(data, "port")),
            user=_expect_str(_field(data, "user")),
            password=_expect_str(_field(data, _SECOND_LOGIN_FIELD)),
            type=ProxyType.from_json(_field(data, "type")),
            country=Country.from_json(_field(data, "country")),
            date=_expect_str(_field(data, "date")),
            date_end=_expect_str(_field(data, "date_end")),
            unixtime=_expect_u64(_field(data, "unixtime")),
            unixtime_end=_expect_u64(_field(data, "unixtime_end")),
            description=ProxyDescription.from_json(_field(data, "descr")),
            active=parse_proxy_status(_field(data, "active")),
        )