import enum
import typing


class ProtocolError(Exception):
    pass


class ErrorKind(enum.Enum):
    MISSING_METHOD = "missing method"
    UNSUPPORTED_METHOD = "unsupported method"
    MALFORMED_REQUEST = "malformed request"
    MISSING_TARGET = "missing target"
    MISSING_VERSION = "missing version"
    UNSUPPORTED_VERSION = "unsupported version"


class RequestError(ProtocolError):
    """A request that could not be parsed.

    ``kind`` tells which check failed and is None on this base class,
    ``token`` is the offending request line token when there is one.
    """

    kind: typing.Optional[ErrorKind] = None

    def __init__(self, token=None):
        self.token = token
        reason = "bad request" if self.kind is None else self.kind.value
        if token is None:
            super().__init__(reason)
        else:
            super().__init__(f"{reason}: {token!r}")


class MissingMethod(RequestError):
    kind = ErrorKind.MISSING_METHOD


class UnsupportedMethod(RequestError):
    kind = ErrorKind.UNSUPPORTED_METHOD


class MalformedRequest(RequestError):
    kind = ErrorKind.MALFORMED_REQUEST


class MissingTarget(RequestError):
    kind = ErrorKind.MISSING_TARGET


class MissingVersion(RequestError):
    kind = ErrorKind.MISSING_VERSION


class UnsupportedVersion(RequestError):
    kind = ErrorKind.UNSUPPORTED_VERSION
