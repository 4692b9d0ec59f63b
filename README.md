# proxy6

An asynchronous Python client for the Proxy6 proxy service API, built on
`httpx`.

## Installation

```
pip install proxy6
```

## Usage

Build a client with your API key, then call the API methods with parameter
objects from `proxy6.params`. Every client method is a coroutine and returns a
frozen dataclass from `proxy6.response`.

```python
import asyncio

from proxy6.client import Client
from proxy6.params import GetPrice, GetProxy
from proxy6.value_object import PageLimit, ProxyPeriod, ProxyStatus, ProxyVersion


async def main():
    client = Client.builder().api_key("placeholder").build()

    price = await client.get_price(
        GetPrice(count=10, period=ProxyPeriod(30), version=ProxyVersion.IPV6)
    )
    print(price.price.value, price.price_single.value)

    proxies = await client.get_proxy(
        GetProxy(state=ProxyStatus.ACTIVE, limit=PageLimit(100))
    )
    for proxy in proxies.list:
        print(proxy.ip, proxy.port, proxy.type)


asyncio.run(main())
```

`ClientBuilder` also accepts `base_url(...)` to point at another API host
(the default is `https://px6.link`) and `requester(...)` to supply your own
`httpx.AsyncClient`. Without a requester, a new `httpx.AsyncClient` is opened
and closed for each request.

Requests are sent as `GET {base_url}/api/{api_key}/{method}?{query}`. The
method name for a parameter object is given by `proxy6.method.method_name`,
and the query string by the object's `to_query_string()`:

```python
from proxy6.params import Buy
from proxy6.value_object import Country, ProxyPeriod

params = Buy(count=100, period=ProxyPeriod(30), country=Country("US"), auto_prolong=True)
params.to_query_string()  # "count=100&period=30&country=us&auto_prolong&nokey"
```

### Available methods

| Client method     | Parameters              | Response                    |
|-------------------|-------------------------|-----------------------------|
| `get_price`       | `params.GetPrice`       | `response.GetPrice`         |
| `get_count`       | `params.GetCount`       | `response.GetCount`         |
| `get_country`     | `params.GetCountry`     | `response.GetCountry`       |
| `get_proxy`       | `params.GetProxy`       | `response.GetProxy`         |
| `set_type`        | `params.SetType`        | `response.SuccessResponse`  |
| `set_description` | `params.SetDescription` | `response.SetDescription`   |
| `buy`             | `params.Buy`            | `response.Buy`              |
| `prolong`         | `params.Prolong`        | `response.Prolong`          |
| `delete`          | `params.Delete`         | `response.Delete`           |
| `check`           | `params.Check`          | `response.Check`            |
| `ip_auth`         | `params.IpAuth`         | `response.SuccessResponse`  |

If every proxy passed to `set_type` already has the requested type, the API
answers with the documented `UNKNOWN` error code.

### Validated values

Value objects in `proxy6.value_object` check their input when constructed and
raise a subclass of `BuildError` (itself a `ValueError`):

- `ProxyPeriod(0)` raises `ProxyPeriodTooLow`.
- `Country("usa")` raises `CountryMustBeIso2`; valid codes are lower-cased.
- `PageLimit(0)` raises `PageLimitTooLow`, `PageLimit(1001)` raises `PageLimitTooHigh`.
- `ProxyDescription` longer than 50 bytes raises `ProxyDescriptionTooLong`.
- `ProxyString` not of the form `ip:port:user:pass` raises `ProxyStringIncorrectFormat`.

`IpsToConnect.connect([...])` lists the IP addresses to authorise;
`IpsToConnect.delete()` removes IP authorisation. `ProxyType`, `ProxyStatus`
and `ProxyVersion` are enums whose values are what the API expects.

### Errors

Failed calls raise a subclass of `proxy6.error.ApiError`:

- `DocumentedError` — the body held one of the documented `error_id` codes;
  `code` holds a `DocumentedErrorCode` and `response` the body.
- `TooManyRequests` — the server answered HTTP 429 (the API allows
  3 requests per second).
- `UnknownError` — a non-success status with no documented error code.
- `SuccessButCannotParse` — a success status whose body could not be read
  into the response type; `source` holds the cause.
- `RequestError` — an `httpx` transport failure; `source` holds the cause.

Building a client without an API key raises `proxy6.client.ClientBuildError`.

## What it does not do

The package is a library only: it has no command-line tool and no
synchronous interface, and it does not retry or throttle requests itself.

## Running the tests

```
pip install -e ".[test]"
pytest
```