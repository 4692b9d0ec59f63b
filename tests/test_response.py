import ipaddress

import pytest

from proxy6.deserializer import DeserializeError
from proxy6.response import (
    BoughtProxy,
    Buy,
    Check,
    Delete,
    GetCount,
    GetCountry,
    GetPrice,
    GetProxy,
    Prolong,
    ProlongedProxy,
    SetDescription,
    SuccessResponse,
)
from proxy6.value_object import Country, Price, ProxyId, ProxyPeriod, ProxyType

ACCOUNT = {
    "status": "yes",
    "user_id": "1",
    "balance": "42.5",
    "currency": "RUB",
}


def _with_account(**extra):
    return {**ACCOUNT, **extra}


def _bought(**overrides):
    data = {
        "id": "15",
        "ip": "2001:db8::1",
        "host": "192.0.2.10",
        "port": "8080",
        "user": "user",
        "pass": "password",
        "type": "http",
        "date": "2024-01-01 10:00:00",
        "date_end": "2024-02-01 10:00:00",
        "unixtime": 1704103200,
        "unixtime_end": 1706781600,
        "active": "1",
    }
    data.update(overrides)
    return data


def _owned(**overrides):
    data = _bought()
    data.update({"country": "ru", "descr": "my_description"})
    data.update(overrides)
    return data


def test_success_response_reads_account_fields():
    response = SuccessResponse.from_json(_with_account(extra_key=1))
    assert (response.status, response.user_id, response.balance, response.currency) == (
        "yes",
        "1",
        "42.5",
        "RUB",
    )


def test_success_response_missing_field():
    data = dict(ACCOUNT)
    del data["currency"]
    with pytest.raises(DeserializeError):
        SuccessResponse.from_json(data)


def test_success_response_rejects_non_object():
    with pytest.raises(DeserializeError):
        SuccessResponse.from_json([1, 2])


def test_get_price():
    response = GetPrice.from_json(
        _with_account(price=12.5, price_single="1.25", period=30, count=10)
    )
    assert response.price == Price(12.5)
    assert response.price_single == Price(1.25)
    assert response.period == ProxyPeriod(30)
    assert response.count == 10


def test_get_price_count_must_be_number():
    with pytest.raises(DeserializeError):
        GetPrice.from_json(
            _with_account(price=1, price_single=1, period=30, count="10")
        )


def test_get_count():
    assert GetCount.from_json(_with_account(count=971)).count == 971


def test_get_country():
    response = GetCountry.from_json(_with_account(list=["ru", "us"]))
    assert response.list == (Country("ru"), Country("us"))


def test_get_country_list_must_be_list():
    with pytest.raises(DeserializeError):
        GetCountry.from_json(_with_account(list="ru"))


def test_get_proxy():
    response = GetProxy.from_json(_with_account(list_count=1, list=[_owned()]))
    assert response.list_count == 1
    proxy = response.list[0]
    assert proxy.id == ProxyId("15")
    assert proxy.country == Country("ru")
    assert str(proxy.description) == "my_description"
    assert proxy.active is True


def test_set_description():
    assert SetDescription.from_json(_with_account(count=4)).count == 4


def test_bought_proxy():
    proxy = BoughtProxy.from_json(_bought(id=15, active="0"))
    assert proxy.id == ProxyId("15")
    assert proxy.ip == ipaddress.ip_address("2001:db8::1")
    assert proxy.host == ipaddress.ip_address("192.0.2.10")
    assert proxy.port == 8080
    assert proxy.user == "user"
    assert proxy.password == "password"
    assert proxy.type is ProxyType.HTTP
    assert proxy.unixtime == 1704103200
    assert proxy.active is False


def test_bought_proxy_password_hidden_from_repr():
    proxy = BoughtProxy.from_json(_bought())
    assert "password" not in repr(proxy)


def test_bought_proxy_bad_active():
    with pytest.raises(DeserializeError):
        BoughtProxy.from_json(_bought(active=1))


def test_bought_proxy_bad_ip():
    with pytest.raises(DeserializeError):
        BoughtProxy.from_json(_bought(ip="not an ip"))


def test_bought_proxy_bad_type():
    with pytest.raises(DeserializeError):
        BoughtProxy.from_json(_bought(type="ftp"))


def test_buy_accepts_count_as_string():
    response = Buy.from_json(
        _with_account(
            order_id=12345,
            count="1",
            price=6.3,
            period=7,
            country="ru",
            list=[_bought()],
        )
    )
    assert response.order_id == 12345
    assert response.count == 1
    assert response.price == Price(6.3)
    assert response.period == ProxyPeriod(7)
    assert response.country == "ru"
    assert [p.id for p in response.list] == [ProxyId("15")]


def test_prolonged_proxy():
    proxy = ProlongedProxy.from_json(
        {"id": 15, "date_end": "2024-02-01 10:00:00", "unixtime_end": 1706781600}
    )
    assert proxy == ProlongedProxy(
        id=ProxyId("15"), date_end="2024-02-01 10:00:00", unixtime_end=1706781600
    )


def test_prolong():
    response = Prolong.from_json(
        _with_account(
            order_id=7,
            price="10",
            period="30",
            count=2,
            list=[
                {"id": "1", "date_end": "x", "unixtime_end": 1},
                {"id": "2", "date_end": "y", "unixtime_end": 2},
            ],
        )
    )
    assert response.count == 2
    assert response.period == ProxyPeriod(30)
    assert [str(p.id) for p in response.list] == ["1", "2"]


def test_prolong_rejects_bad_count():
    with pytest.raises(DeserializeError):
        Prolong.from_json(
            _with_account(order_id=7, price=1, period=30, count="two", list=[])
        )


def test_delete():
    assert Delete.from_json(_with_account(count=3)).count == 3


def test_check_with_proxy_id():
    response = Check.from_json(
        _with_account(proxy_id=15, proxy_status=True, proxy_time=0.25)
    )
    assert response.proxy_id == ProxyId("15")
    assert response.proxy_status is True
    assert response.proxy_time == 0.25


def test_check_without_proxy_id():
    response = Check.from_json(_with_account(proxy_status=False, proxy_time=1))
    assert response.proxy_id is None
    assert response.proxy_time == 1.0


def test_check_status_must_be_bool():
    with pytest.raises(DeserializeError):
        Check.from_json(_with_account(proxy_status="1", proxy_time=1))