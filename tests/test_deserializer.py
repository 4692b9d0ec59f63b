import pytest

from proxy6.deserializer import (
    DeserializeError,
    parse_proxy_status,
    to_f64,
    to_string,
    to_u16,
    to_usize,
)


@pytest.mark.parametrize("value", ["8080", 8080])
def test_to_u16_accepts_number_and_string(value):
    assert to_u16(value) == 8080


def test_to_u16_accepts_upper_bound():
    assert to_u16(65535) == 65535


def test_to_u16_accepts_leading_plus():
    assert to_u16("+80") == 80


@pytest.mark.parametrize(
    "value", ["65536", 65536, "-1", -1, " 80", "8_0", "", "abc", 30.0, None, True, [], {}]
)
def test_to_u16_rejects(value):
    with pytest.raises(DeserializeError):
        to_u16(value)


@pytest.mark.parametrize("value", ["30", 30])
def test_to_usize_accepts_number_and_string(value):
    assert to_usize(value) == 30


def test_to_usize_accepts_u64_max():
    assert to_usize(2**64 - 1) == 2**64 - 1


@pytest.mark.parametrize("value", [2**64, "1.5", 30.0, "-3", None, False])
def test_to_usize_rejects(value):
    with pytest.raises(DeserializeError):
        to_usize(value)


def test_to_f64_parses_string():
    assert to_f64("1.5") == 1.5


def test_to_f64_accepts_integer_number():
    assert to_f64(3) == 3.0


def test_to_f64_accepts_float_number():
    assert to_f64(0.25) == 0.25


@pytest.mark.parametrize("value", ["abc", "1_0", " 1", "", ".", None, True, []])
def test_to_f64_rejects(value):
    with pytest.raises(DeserializeError):
        to_f64(value)


def test_parse_proxy_status_values():
    assert parse_proxy_status("1") is True
    assert parse_proxy_status("0") is False


@pytest.mark.parametrize("value", [1, 0, "2", "true", None, True])
def test_parse_proxy_status_rejects(value):
    with pytest.raises(DeserializeError):
        parse_proxy_status(value)


def test_to_string_from_integer():
    assert to_string(12345) == "12345"


def test_to_string_keeps_string():
    assert to_string("abc") == "abc"


@pytest.mark.parametrize("value", [None, [], {}, True])
def test_to_string_rejects(value):
    with pytest.raises(DeserializeError):
        to_string(value)