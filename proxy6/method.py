"""Names of the API methods, keyed by their parameter types."""

from __future__ import annotations

from proxy6 import params as p

_METHOD_NAMES: dict[type[p.ApiParams], str] = {
    p.GetPrice: "getprice",
    p.GetCount: "getcount",
    p.GetCountry: "getcountry",
    p.GetProxy: "getproxy",
    p.SetType: "settype",
    p.SetDescription: "setdescr",
    p.Buy: "buy",
    p.Prolong: "prolong",
    p.Delete: "delete",
    p.Check: "check",
    p.IpAuth: "ipauth",
}


def method_name(params: p.ApiParams) -> str:
    """Return the name of the API method that ``params`` belong to."""
    try:
        return _METHOD_NAMES[type(params)]
    except KeyError:
        raise TypeError(
            f"no API method takes parameters of type {type(params).__name__}"
        ) from None