"""
Exceptions raised by the FTC Events API client.

Everything the library raises derives from FtcApiError, so callers can
catch one type at the edge of their program.
"""
from http import HTTPStatus


class FtcApiError(Exception):
    """Base class for all client errors."""


class TransportError(FtcApiError):
    """The request could not be built or sent."""


class HTTPStatusError(FtcApiError):
    """The server answered with a status outside [200, 300)."""

    def __init__(self, code: int, text: str = ""):
        self.code = code
        self.text = text or status_text(code)
        super().__init__(f"HTTP Status Code: {self.code} ({self.text})")


class DecodeError(FtcApiError):
    """The response body was not the JSON we expected."""


class ParseError(FtcApiError, ValueError):
    """A timestamp did not match YYYY-MM-DDTHH:MM:SS."""


def status_text(code: int) -> str:
    """Standard reason phrase for an HTTP status code, or "" if unknown."""
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""
