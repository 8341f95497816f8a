import logging
from copy import copy
from http import HTTPStatus

import orjson

from mockwire.errors import InvalidBodyError
from mockwire.http.headers import HeaderName, HeaderValue
from mockwire.http.response import HTTPResponse
from mockwire.http.status import to_status_code

LOGGER = logging.getLogger(__name__)

DEFAULT_BODY = b""
BODY_ENCODING = "utf-8"
JSON_CONTENT_TYPE = b"application/json"
TEXT_CONTENT_TYPE = b"text/plain"
CONTENT_TYPE = HeaderName(b"content-type")


class ResponseTemplate:
    """The blueprint for the response a mock server returns when a mock matches.

    Every builder method returns a new template and leaves the one it was
    called on untouched, so a template can be shared between mocks and
    extended per mock:

        not_found = ResponseTemplate(404).insert_header("content-type", "text/plain")
        template = not_found.set_body("no such user")

    Inputs are converted eagerly. A value that cannot be converted raises a
    `ConversionError` at the call that received it.
    """

    def __init__(self, status):
        self._status_code = to_status_code(status)
        self._headers: dict[HeaderName, list[HeaderValue]] = {}
        self._body: bytes | None = None
        LOGGER.debug(f"Created response template with status {self._status_code}")

    @property
    def status_code(self) -> HTTPStatus:
        return self._status_code

    @property
    def headers(self) -> dict[HeaderName, list[HeaderValue]]:
        return {name: list(values) for name, values in self._headers.items()}

    @property
    def body(self) -> bytes | None:
        return self._body

    def _updated(self):
        template = copy(self)
        template._headers = self.headers
        return template

    def append_header(self, name, value) -> "ResponseTemplate":
        """Append `value` to the values of header `name`.

        Existing values for `name` are kept and `value` goes after them.
        """
        header_name = HeaderName(name)
        header_value = HeaderValue(value)
        template = self._updated()
        template._headers.setdefault(header_name, []).append(header_value)
        return template

    def insert_header(self, name, value) -> "ResponseTemplate":
        """Set header `name` to `value`, dropping any values it already had."""
        header_name = HeaderName(name)
        header_value = HeaderValue(value)
        template = self._updated()
        template._headers[header_name] = [header_value]
        return template

    def set_body(self, body) -> "ResponseTemplate":
        if isinstance(body, str):
            body = body.encode(BODY_ENCODING)
        elif isinstance(body, (bytes, bytearray, memoryview)):
            body = bytes(body)
        else:
            raise InvalidBodyError(body, f"unsupported type {type(body).__name__}")
        template = self._updated()
        template._body = body
        return template

    def set_body_json(self, obj) -> "ResponseTemplate":
        try:
            body = orjson.dumps(obj)
        except TypeError as e:
            raise InvalidBodyError(obj, str(e)) from e
        return self.set_body_raw(body, JSON_CONTENT_TYPE)

    def set_body_string(self, text) -> "ResponseTemplate":
        if not isinstance(text, str):
            raise InvalidBodyError(text, "expected a str")
        return self.set_body_raw(text, TEXT_CONTENT_TYPE)

    def set_body_raw(self, body, mime) -> "ResponseTemplate":
        return self.set_body(body).insert_header(CONTENT_TYPE, mime)

    def generate_response(self) -> HTTPResponse:
        headers = [
            (name.raw, value.raw)
            for name, values in self._headers.items()
            for value in values
        ]
        body = self._body if self._body is not None else DEFAULT_BODY
        LOGGER.debug(
            f"Generating {self._status_code.value} response with "
            f"{len(headers)} header values and {len(body)} body bytes"
        )
        return HTTPResponse(
            status_code=self._status_code.value,
            headers=headers,
            body=body,
        )

    def __eq__(self, other):
        if not isinstance(other, ResponseTemplate):
            return NotImplemented
        return (
            self._status_code == other._status_code
            and self._headers == other._headers
            and self._body == other._body
        )

    def __repr__(self):
        return (
            f"ResponseTemplate(status_code={self._status_code.value!r}, "
            f"headers={self._headers!r}, body={self._body!r})"
        )
