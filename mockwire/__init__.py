from mockwire.errors import (
    ConversionError,
    InvalidBodyError,
    InvalidHeaderNameError,
    InvalidHeaderValueError,
    InvalidStatusCodeError,
    MockwireError,
)
from mockwire.http.headers import HeaderName, HeaderValue
from mockwire.http.response import HTTPResponse
from mockwire.response_template import ResponseTemplate

__version__ = "0.1.0"
