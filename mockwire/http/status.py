from http import HTTPStatus

from mockwire.errors import InvalidStatusCodeError


def to_status_code(status) -> HTTPStatus:
    """Convert an int, an HTTPStatus or a decimal string into an HTTPStatus.

    Only registered status codes are accepted, so 999 or 42 fail.
    """
    if isinstance(status, HTTPStatus):
        return status
    if isinstance(status, bool):
        raise InvalidStatusCodeError(status, "booleans are not status codes")
    if isinstance(status, str):
        if not (status.isascii() and status.isdigit()):
            raise InvalidStatusCodeError(status, "not a decimal number")
        status = int(status)
    if not isinstance(status, int):
        raise InvalidStatusCodeError(
            status, f"unsupported type {type(status).__name__}"
        )
    try:
        return HTTPStatus(status)
    except ValueError as e:
        raise InvalidStatusCodeError(status, "unknown status code") from e
