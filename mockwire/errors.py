import logging

LOGGER = logging.getLogger(__name__)


class MockwireError(Exception):
    pass


class ConversionError(MockwireError, ValueError):
    """Raised when a value handed to a template cannot be converted.

    Mock declarations are written by test authors, so these errors are not
    meant to be caught: they surface the mistake at the line that made it.
    """

    operation = "value"

    def __init__(self, value, reason: str = None):
        self.value = value
        self.reason = reason
        message = f"Failed to convert into {self.operation}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        LOGGER.error(message)


class InvalidStatusCodeError(ConversionError):
    operation = "status code"


class InvalidHeaderNameError(ConversionError):
    operation = "header name"


class InvalidHeaderValueError(ConversionError):
    operation = "header value"


class InvalidBodyError(ConversionError):
    operation = "body"
