"""Transfer data from or to a server."""

from __future__ import annotations

import base64
import os
import sys
import urllib.error
import urllib.request
from collections import deque
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version

from minicore.options import CommandError, UsageError, run_command

USAGE = """Usage: curl [options...] <url>
 -d <data> [plain|form|json]   HTTP POST data
 -f                            Fail fast with no output on HTTP errors
 -i                            Include response headers in output
 -h <headers...>               Pass custom header(s) to server
 -o <file>                     Write to file instead of stdout
 -O                            Write output to file named as remote file
 -v                            Verbose mode
 -T <file>                     Transfer local FILE to destination
 -u <user:password>            Server user and password
 -A <name>                     Send User-Agent <name> to server"""
DESCRIPTION = "Transfer data from or to a server"

CONNECT_TIMEOUT = 30
MAX_REDIRECTS = 5

_CONTENT_TYPES = {
    "json": "application/json; charset=utf-8",
    "form": "application/x-www-form-urlencoded",
}
_PLAIN = "text/plain; charset=utf-8"
_MIMES = frozenset(("plain", "form", "json"))


@dataclass
class RequestData:
    """A request body and the kind of content it is."""

    mime: str
    body: str


@dataclass
class CurlOptions:
    data: RequestData | None = None
    fail_fast: bool = False
    include_headers: bool = False
    headers: list[str] | None = None
    output: str | None = None
    remote_name: bool = False
    verbose: bool = False
    upload_file: str | None = None
    user: str | None = None
    user_agent: str | None = None


class _LimitedRedirects(urllib.request.HTTPRedirectHandler):
    max_redirections = MAX_REDIRECTS


def _package_version() -> str:
    try:
        return version("minicore")
    except PackageNotFoundError:
        return "unknown"


def _default_user_agent() -> str:
    return f"minicore/{_package_version()} urllib/{urllib.request.__version__}"


def build_request(url: str, options: CurlOptions) -> urllib.request.Request:
    """Return the request that ``options`` describe for ``url``."""
    request = urllib.request.Request(url)
    request.add_header("Accept", "*/*")

    if options.data is not None:
        request.add_header(
            "Content-Type", _CONTENT_TYPES.get(options.data.mime, _PLAIN)
        )
        request.data = options.data.body.encode("utf-8")
        request.method = "POST"

    if options.upload_file is not None:
        with open(options.upload_file, "rb") as handle:
            request.data = handle.read()
        request.method = "PUT"

    if options.user is not None:
        credentials = base64.b64encode(options.user.encode("utf-8")).decode("ascii")
        request.add_header("Authorization", f"Basic {credentials}")

    request.add_header("User-Agent", options.user_agent or _default_user_agent())

    for header in options.headers or []:
        name, sep, value = header.partition(":")
        if sep and name.strip():
            request.add_header(name.strip(), value.strip())
    return request


def _opener() -> urllib.request.OpenerDirector:
    handlers: list[urllib.request.BaseHandler] = [_LimitedRedirects()]
    proxy = os.environ.get("HTTP_PROXY")
    if proxy:
        handlers.append(urllib.request.ProxyHandler({"http": proxy, "https": proxy}))
    return urllib.request.build_opener(*handlers)


def _status_line(version_number: int, status: int, reason: str) -> str:
    major, minor = divmod(version_number or 11, 10)
    return f"HTTP/{major}.{minor} {status} {reason}"


def _header_block(status_line: str, headers) -> bytes:
    lines = [status_line, *(f"{name}: {value}" for name, value in headers.items())]
    return ("\r\n".join(lines) + "\r\n\r\n").encode("latin-1", "replace")


def _write_stdout(data: bytes) -> None:
    sys.stdout.flush()
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(data.decode("utf-8", "replace"))
    else:
        buffer.write(data)
        buffer.flush()


def send_request(url: str, options: CurlOptions) -> None:
    """Perform the transfer and write the response to the chosen output."""
    if options.headers:
        options.include_headers = True

    request = build_request(url, options)
    if options.verbose:
        print(f"> {request.get_method()} {request.full_url}", file=sys.stderr)
        for name, value in request.header_items():
            print(f"> {name}: {value}", file=sys.stderr)

    try:
        response = _opener().open(request, timeout=CONNECT_TIMEOUT)
        status, reason = response.status, response.reason
        version_number = getattr(response, "version", 11)
    except urllib.error.HTTPError as exc:
        response = exc
        status, reason = exc.code, str(exc.reason)
        version_number = getattr(exc.fp, "version", 11)

    with response:
        body = response.read()
        headers = response.headers
        effective_url = response.geturl()

    status_line = _status_line(version_number, status, reason)
    if options.verbose:
        print(f"< {status_line}", file=sys.stderr)

    result = body
    if options.include_headers:
        result = _header_block(status_line, headers) + body

    if options.remote_name:
        options.output = effective_url.rsplit("/", 1)[-1]

    if options.output is not None:
        with open(options.output, "wb") as handle:
            handle.write(result)
    else:
        _write_stdout(result)


def _take(queue: deque[str], letter: str) -> str:
    if not queue:
        raise UsageError(f"option requires an argument -- '{letter}'")
    return queue.popleft()


def _parse(args: list[str]) -> tuple[CurlOptions, str]:
    options = CurlOptions()
    url = ""
    queue = deque(args)
    while queue:
        arg = queue.popleft()
        if not (arg.startswith("-") and len(arg) > 1):
            url = arg
            continue
        for letter in arg[1:]:
            if letter == "v":
                options.verbose = True
            elif letter == "f":
                options.fail_fast = True
            elif letter == "i":
                options.include_headers = True
            elif letter == "O":
                options.remote_name = True
            elif letter == "o":
                options.output = _take(queue, letter)
            elif letter == "T":
                options.upload_file = _take(queue, letter)
            elif letter == "u":
                options.user = _take(queue, letter)
            elif letter == "A":
                options.user_agent = _take(queue, letter)
            elif letter == "h":
                options.headers = [
                    part.strip() for part in _take(queue, letter).split(",")
                ]
            elif letter == "d":
                body = _take(queue, letter)
                mime = queue.popleft() if queue and queue[0] in _MIMES else "plain"
                options.data = RequestData(mime=mime, body=body)
            else:
                raise UsageError(f"invalid option -- '{letter}'")
    return options, url


def _run(args: list[str]) -> int | None:
    options, url = _parse(args)
    if not url:
        raise UsageError("missing URL")
    try:
        send_request(url, options)
    except (OSError, ValueError) as exc:
        if options.fail_fast:
            return 1
        reason = getattr(exc, "reason", None) or getattr(exc, "strerror", None) or exc
        raise CommandError(f"request failed: {reason}") from None
    return None


def main(argv=None) -> int:
    """Run the curl command."""
    return run_command("curl", USAGE, _run, argv)