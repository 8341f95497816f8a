import string

from mockwire.errors import InvalidHeaderNameError, InvalidHeaderValueError

TOKEN_CHARS = frozenset(
    (string.ascii_letters + string.digits + "!#$%&'*+-.^_`|~").encode("ascii")
)
HORIZONTAL_TAB = 0x09
DELETE = 0x7F


class HeaderName:
    """An HTTP header name, validated as a token and compared case-insensitively.

    The name is kept lower-cased as bytes, which is what ASGI servers expect
    in the `headers` list of a response.
    """

    def __init__(self, name):
        if isinstance(name, HeaderName):
            self.raw = name.raw
            return
        self.raw = self._convert(name)

    def _convert(self, name) -> bytes:
        if isinstance(name, str):
            if not name.isascii():
                raise InvalidHeaderNameError(name, "header names must be ASCII")
            name = name.encode("ascii")
        elif isinstance(name, (bytes, bytearray)):
            name = bytes(name)
        else:
            raise InvalidHeaderNameError(
                name, f"unsupported type {type(name).__name__}"
            )

        if not name:
            raise InvalidHeaderNameError(name, "header names cannot be empty")
        invalid = [chr(char) for char in name if char not in TOKEN_CHARS]
        if invalid:
            raise InvalidHeaderNameError(
                name, f"invalid characters {''.join(invalid)!r}"
            )
        return name.lower()

    def __str__(self):
        return self.raw.decode("ascii")

    def __repr__(self):
        return f"HeaderName({str(self)!r})"

    def __eq__(self, other):
        if isinstance(other, HeaderName):
            return self.raw == other.raw
        return NotImplemented

    def __hash__(self):
        return hash(self.raw)


class HeaderValue:
    def __init__(self, value):
        if isinstance(value, HeaderValue):
            self.raw = value.raw
            return
        self.raw = self._convert(value)

    def _convert(self, value) -> bytes:
        if isinstance(value, bool):
            raise InvalidHeaderValueError(value, "booleans are not header values")
        if isinstance(value, int):
            value = str(value)
        if isinstance(value, str):
            if not value.isascii():
                raise InvalidHeaderValueError(value, "header values must be ASCII")
            value = value.encode("ascii")
        elif isinstance(value, (bytes, bytearray)):
            value = bytes(value)
        else:
            raise InvalidHeaderValueError(
                value, f"unsupported type {type(value).__name__}"
            )

        for char in value:
            if (char < 0x20 and char != HORIZONTAL_TAB) or char == DELETE:
                raise InvalidHeaderValueError(
                    value, f"control character {chr(char)!r} is not allowed"
                )
        if value != value.strip(b" \t"):
            raise InvalidHeaderValueError(
                value, "leading or trailing whitespace is not allowed"
            )
        return value

    def __str__(self):
        return self.raw.decode("latin-1")

    def __repr__(self):
        return f"HeaderValue({str(self)!r})"

    def __eq__(self, other):
        if isinstance(other, HeaderValue):
            return self.raw == other.raw
        return NotImplemented

    def __hash__(self):
        return hash(self.raw)
