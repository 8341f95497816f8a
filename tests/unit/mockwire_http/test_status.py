from http import HTTPStatus

import pytest

from mockwire.errors import InvalidStatusCodeError
from mockwire.http.status import to_status_code


def test__to_status_code__when_int__returns_http_status():
    # ACT
    status = to_status_code(418)

    # ASSERT
    assert status is HTTPStatus.IM_A_TEAPOT


def test__to_status_code__when_http_status__returns_it_unchanged():
    # ACT/ASSERT
    assert to_status_code(HTTPStatus.NO_CONTENT) is HTTPStatus.NO_CONTENT


def test__to_status_code__when_decimal_str__returns_http_status():
    # ACT/ASSERT
    assert to_status_code("301") is HTTPStatus.MOVED_PERMANENTLY


@pytest.mark.parametrize("status", [999, 0, 600, "2OO", " 200", False, b"200"])
def test__to_status_code__when_invalid__raises(status):
    # ACT/ASSERT
    with pytest.raises(InvalidStatusCodeError):
        to_status_code(status)


def test__to_status_code__when_unknown_code__chains_original_error():
    # ACT
    with pytest.raises(InvalidStatusCodeError) as exc_info:
        to_status_code(999)

    # ASSERT
    assert isinstance(exc_info.value.__cause__, ValueError)
