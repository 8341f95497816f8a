import pytest

from mockwire.errors import InvalidHeaderNameError, InvalidHeaderValueError
from mockwire.http.headers import HeaderName, HeaderValue


def test__header_name__when_case_differs__names_are_equal():
    # ARRANGE
    upper = HeaderName("Content-Type")
    lower = HeaderName(b"content-type")

    # ACT/ASSERT
    assert upper == lower
    assert hash(upper) == hash(lower)


def test__header_name__stores_lower_cased_bytes():
    # ACT
    name = HeaderName("X-Request-ID")

    # ASSERT
    assert name.raw == b"x-request-id"
    assert str(name) == "x-request-id"


def test__header_name__when_given_header_name__copies_it():
    # ARRANGE
    name = HeaderName("X-Test")

    # ACT/ASSERT
    assert HeaderName(name) == name


def test__header_name__when_token_has_special_chars__accepts_it():
    # ACT
    name = HeaderName("x-custom_header.v1!#$%&'*+^`|~")

    # ASSERT
    assert name.raw == b"x-custom_header.v1!#$%&'*+^`|~"


def test__header_name__when_compared_to_str__is_not_equal():
    # ACT/ASSERT
    assert HeaderName("x-test") != "x-test"


@pytest.mark.parametrize("name", ["", "X Test", "X(Test)", "X\r\nTest", b"x/y"])
def test__header_name__when_not_a_token__raises(name):
    # ACT/ASSERT
    with pytest.raises(InvalidHeaderNameError):
        HeaderName(name)


def test__header_name__when_invalid__error_names_operation():
    # ACT
    with pytest.raises(InvalidHeaderNameError) as exc_info:
        HeaderName("X Test")

    # ASSERT
    assert "header name" in str(exc_info.value)
    assert "X Test" in str(exc_info.value)


def test__header_value__when_str__stores_ascii_bytes():
    # ACT
    value = HeaderValue("text/plain; charset=utf-8")

    # ASSERT
    assert value.raw == b"text/plain; charset=utf-8"


def test__header_value__when_tab_inside__accepts_it():
    # ACT
    value = HeaderValue("a\tb")

    # ASSERT
    assert value.raw == b"a\tb"


def test__header_value__when_bytes_with_obs_text__keeps_bytes():
    # ACT
    value = HeaderValue(b"caf\xe9")

    # ASSERT
    assert value.raw == b"caf\xe9"


def test__header_value__when_values_differ_in_case__values_are_not_equal():
    # ACT/ASSERT
    assert HeaderValue("Text/Plain") != HeaderValue("text/plain")


def test__header_value__when_empty__accepts_it():
    # ACT/ASSERT
    assert HeaderValue("").raw == b""


@pytest.mark.parametrize(
    "value", ["line\nbreak", "carriage\rreturn", "del\x7f", "trailing ", True]
)
def test__header_value__when_invalid__raises(value):
    # ACT/ASSERT
    with pytest.raises(InvalidHeaderValueError):
        HeaderValue(value)
