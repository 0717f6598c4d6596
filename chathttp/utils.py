from .protocols.http import HTTPRequest


def describe(request: HTTPRequest) -> str:
    line = f"{request.method.value} {request.target} {request.version}"
    if request.body is None:
        return line
    size = len(request.body)
    return f"{line} -- body {size} char{'' if size == 1 else 's'}"
