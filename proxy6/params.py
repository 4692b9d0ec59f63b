"""Parameters of the API methods and their query-string encoding."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from proxy6.value_object import (
    Country,
    IpsToConnect,
    PageLimit,
    ProxyDescription,
    ProxyId,
    ProxyPeriod,
    ProxyStatus,
    ProxyString,
    ProxyType,
    ProxyVersion,
)

QueryTuple = list[tuple[str, Optional[str]]]


def _optional(value: object | None) -> str | None:
    return None if value is None else str(value)


def _join_ids(ids: Iterable[ProxyId]) -> str:
    return ",".join(str(proxy_id) for proxy_id in ids)


def _optional_ids(ids: Iterable[ProxyId] | None) -> str | None:
    return None if ids is None else _join_ids(ids)


class ApiParams(ABC):
    """Parameters of one API method."""

    @abstractmethod
    def to_query_tuple(self) -> QueryTuple:
        """Return the query pairs in order; ``None`` leaves a key out, ``""`` sends it bare."""

    def to_query_string(self) -> str:
        """Encode the parameters as the query string the API expects."""
        parts = []
        for key, value in self.to_query_tuple():
            if value is None:
                continue
            parts.append(key if value == "" else f"{key}={value}")
        return "&".join(parts)


@dataclass(frozen=True)
class GetPrice(ApiParams):
    """Parameters of ``getprice``."""

    count: int
    period: ProxyPeriod
    version: ProxyVersion | None = None

    def to_query_tuple(self) -> QueryTuple:
        return [
            ("count", str(self.count)),
            ("period", str(self.period)),
            ("version", _optional(self.version)),
        ]


@dataclass(frozen=True)
class GetCount(ApiParams):
    """Parameters of ``getcount``."""

    country: Country
    version: ProxyVersion | None = None

    def to_query_tuple(self) -> QueryTuple:
        return [
            ("country", str(self.country)),
            ("version", _optional(self.version)),
        ]


@dataclass(frozen=True)
class GetCountry(ApiParams):
    """Parameters of ``getcountry``."""

    version: ProxyVersion | None = None

    def to_query_tuple(self) -> QueryTuple:
        return [("version", _optional(self.version))]


@dataclass(frozen=True)
class GetProxy(ApiParams):
    """Parameters of ``getproxy``."""

    state: ProxyStatus | None = None
    description: ProxyDescription | None = None
    page: int | None = None
    limit: PageLimit | None = None

    def to_query_tuple(self) -> QueryTuple:
        return [
            ("state", _optional(self.state)),
            ("descr", _optional(self.description)),
            ("page", _optional(self.page)),
            ("limit", _optional(self.limit)),
            ("nokey", ""),
        ]


@dataclass(frozen=True)
class SetType(ApiParams):
    """Parameters of ``settype``."""

    ids: Sequence[ProxyId]
    type: ProxyType

    def to_query_tuple(self) -> QueryTuple:
        return [
            ("ids", _join_ids(self.ids)),
            ("type", str(self.type)),
        ]


@dataclass(frozen=True)
class SetDescription(ApiParams):
    """Parameters of ``setdescr``; the API requires ``old`` or ``ids``."""

    new: ProxyDescription
    old: ProxyDescription | None = None
    ids: Sequence[ProxyId] | None = None

    def to_query_tuple(self) -> QueryTuple:
        return [
            ("new", str(self.new)),
            ("old", _optional(self.old)),
            ("ids", _optional_ids(self.ids)),
        ]


@dataclass(frozen=True)
class Buy(ApiParams):
    """Parameters of ``buy``."""

    count: int
    period: ProxyPeriod
    country: Country
    version: ProxyVersion | None = None
    type: ProxyType | None = None
    description: ProxyDescription | None = None
    auto_prolong: bool = False

    def to_query_tuple(self) -> QueryTuple:
        return [
            ("count", str(self.count)),
            ("period", str(self.period)),
            ("country", str(self.country)),
            ("version", _optional(self.version)),
            ("type", _optional(self.type)),
            ("descr", _optional(self.description)),
            ("auto_prolong", "" if self.auto_prolong else None),
            ("nokey", ""),
        ]


@dataclass(frozen=True)
class Prolong(ApiParams):
    """Parameters of ``prolong``."""

    period: ProxyPeriod
    ids: Sequence[ProxyId]

    def to_query_tuple(self) -> QueryTuple:
        return [
            ("period", str(self.period)),
            ("ids", _join_ids(self.ids)),
            ("nokey", ""),
        ]


@dataclass(frozen=True)
class Delete(ApiParams):
    """Parameters of ``delete``; the API requires ``ids`` or ``description``."""

    ids: Sequence[ProxyId] | None = None
    description: ProxyDescription | None = None

    def to_query_tuple(self) -> QueryTuple:
        return [
            ("ids", _optional_ids(self.ids)),
            ("descr", _optional(self.description)),
        ]


@dataclass(frozen=True)
class Check(ApiParams):
    """Parameters of ``check``; the API requires ``ids`` or ``proxy_string``."""

    ids: Sequence[ProxyId] | None = None
    proxy_string: ProxyString | None = None

    def to_query_tuple(self) -> QueryTuple:
        return [
            ("ids", _optional_ids(self.ids)),
            ("proxy", _optional(self.proxy_string)),
        ]


@dataclass(frozen=True)
class IpAuth(ApiParams):
    """Parameters of ``ipauth``."""

    ip: IpsToConnect

    def to_query_tuple(self) -> QueryTuple:
        return [("ip", str(self.ip))]