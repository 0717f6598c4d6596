import enum
import re
import typing
from dataclasses import dataclass

from .exceptions import (
    MalformedRequest,
    MissingMethod,
    MissingTarget,
    MissingVersion,
    UnsupportedMethod,
    UnsupportedVersion,
)

CRLF = "\r\n"
HTTP_VERSION = "HTTP/1.1"
# unicode white space, which leaves out the \x1c-\x1f separators
TOKEN = re.compile(r"(?:[^\s]|[\x1c-\x1f])+")


class Method(str, enum.Enum):
    GET = "GET"
    HEAD = "HEAD"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"

    @property
    def requires_body(self) -> bool:
        return self in BODY_METHODS


BODY_METHODS = frozenset({Method.POST, Method.PUT, Method.PATCH})


@dataclass(frozen=True)
class HTTPRequest:
    method: Method
    target: str
    version: str
    body: typing.Optional[str] = None


def find_body(request: str) -> str:
    # the body runs from the end of the request line to the last CRLF
    start = request.find(CRLF)
    if start == -1:
        raise MalformedRequest()
    start += len(CRLF)
    if request.startswith(CRLF, start):
        start += len(CRLF)
    end = request.rfind(CRLF)
    if start >= end:
        raise MalformedRequest()
    return request[start:end]


def parse_request(request: str) -> HTTPRequest:
    """Parse a raw HTTP/1.1 request.

    The request line is tokenized on whitespace into method, target and
    version. For POST, PUT and PATCH the body is also located; a body method
    without a non-empty, CRLF terminated body is malformed.

    Raises a :class:`~.exceptions.RequestError` subclass for the first check
    that fails, checked in this order: line terminator, method, body, target,
    version.
    """
    request_line, newline, _ = request.partition("\n")
    if not newline:
        raise MalformedRequest()
    parts = iter(TOKEN.findall(request_line))
    token = next(parts, None)
    if token is None:
        raise MissingMethod()
    try:
        method = Method(token)
    except ValueError:
        raise UnsupportedMethod(token) from None
    body = find_body(request) if method.requires_body else None
    target = next(parts, None)
    if target is None:
        raise MissingTarget()
    version = next(parts, None)
    if version is None:
        raise MissingVersion()
    if version != HTTP_VERSION:
        raise UnsupportedVersion(version)
    return HTTPRequest(method, target, version, body)
