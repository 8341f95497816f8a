from mockwire.http.headers import HeaderName


class HTTPResponse:
    def __init__(
        self,
        status_code: int,
        headers: list[tuple[bytes, bytes]],
        body: bytes,
    ):
        self.status_code = status_code
        self.headers = headers
        self.body = body

    def header_values(self, name) -> list[bytes]:
        """Return every value sent under `name`, in order."""
        header_name = HeaderName(name)
        return [value for key, value in self.headers if key == header_name.raw]

    def to_dict(self):
        return {
            "status_code": self.status_code,
            "headers": self.headers,
            "body": self.body,
        }

    def to_asgi_messages(self):
        return [
            {
                "type": "http.response.start",
                "status": self.status_code,
                "headers": self.headers,
            },
            {
                "type": "http.response.body",
                "body": self.body,
            },
        ]

    def __eq__(self, other):
        if not isinstance(other, HTTPResponse):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (
            f"HTTPResponse(status_code={self.status_code!r}, "
            f"headers={self.headers!r}, body={self.body!r})"
        )
