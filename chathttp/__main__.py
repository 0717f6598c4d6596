import argparse
import logging
import sys

import curio

from . import __doc__ as desc
from . import __version__, gvars
from .models import models
from .protocols.exceptions import RequestError
from .protocols.http import parse_request
from .utils import describe


async def inspect_file(path, model=None):
    try:
        async with curio.aopen(path, "rb") as f:
            data = await f.read()
    except OSError as e:
        gvars.logger.error(f"{path}: {e}")
        return False
    gvars.logger.debug(f"{path}: read {len(data)} bytes")
    try:
        request = parse_request(data.decode(gvars.encoding))
    except UnicodeDecodeError as e:
        gvars.logger.error(f"{path}: not {gvars.encoding} text: {e}")
        return False
    except RequestError as e:
        gvars.logger.error(f"{path}: {e}")
        return False
    print(f"{path}: {describe(request)}")
    if model and request.body is not None:
        try:
            obj = models[model](request.body)
        except ValueError as e:
            gvars.logger.error(f"{path}: bad {model} body: {e}")
            return False
        print(f"{path}: {obj}")
    elif model:
        gvars.logger.info(f"{path}: {request.method.value} has no body to decode")
    return True


async def multi_inspect(paths, model=None):
    tasks = []
    async with curio.TaskGroup() as g:
        for path in paths:
            tasks.append(await g.spawn(inspect_file, path, model))
    results = [task.result for task in tasks]
    gvars.logger.info(f"{results.count(True)}/{len(results)} requests parsed")
    return all(results)


def main(arguments=None):
    parser = argparse.ArgumentParser(
        prog=__package__,
        description=desc,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v", dest="verbose", action="count", default=0, help="print verbose output"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-m",
        "--model",
        choices=sorted(models),
        default=gvars.default_model,
        help="decode request bodies as this model",
    )
    parser.add_argument("files", nargs="+", help="files holding one raw request each")
    args = parser.parse_args(arguments)
    if args.verbose == 0:
        level = logging.ERROR
    elif args.verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG
    gvars.logger.setLevel(level)
    ok = curio.run(multi_inspect, args.files, args.model)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
