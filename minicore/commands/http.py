"""Make basic HTTP requests."""

from __future__ import annotations

import re
import socket
import sys

from minicore.options import CommandError, UsageError, run_command

USAGE = "usage: http [options] <url>"
DESCRIPTION = "Make basic HTTP requests."

_PORT = re.compile(r"\+?[0-9]+")
_CHUNK = 4096


def _parse_port(text: str) -> int:
    if _PORT.fullmatch(text):
        value = int(text)
        if value <= 0xFFFF:
            return value
    return 80


def parse_url(url: str) -> tuple[str, str, int, str]:
    """Split a URL into scheme, host, port and request path.

    An explicit port that is not a number gives 80.
    """
    scheme, sep, rest = url.partition("://")
    if not sep:
        raise ValueError("Invalid URL format")
    host, _, path = rest.partition("/")
    name, colon, port_text = host.rpartition(":")
    if colon:
        host, port = name, _parse_port(port_text)
    else:
        port = 443 if scheme == "https" else 80
    return scheme, host, port, f"/{path}"


def send_request(host: str, port: int, path: str) -> str:
    """Send a GET request and return the whole response as text."""
    request = (
        f"GET {path} HTTP/1.1\r\n"
        f"Host: {host}\r\n"
        "User-Agent: coreutils-http/0.1\r\n"
        "Connection: close\r\n"
        "\r\n"
    )
    with socket.create_connection((host, port)) as conn:
        conn.sendall(request.encode("utf-8"))
        chunks = list(iter(lambda: conn.recv(_CHUNK), b""))
    return b"".join(chunks).decode("utf-8")


def _run(args: list[str]) -> None:
    if not args:
        raise UsageError("missing URL")
    try:
        scheme, host, port, path = parse_url(args[0])
    except ValueError as exc:
        raise CommandError(str(exc)) from None
    if scheme != "http":
        raise CommandError("only HTTP scheme is supported")
    try:
        response = send_request(host, port, path)
    except UnicodeDecodeError:
        raise CommandError(
            "request failed: stream did not contain valid UTF-8"
        ) from None
    except OSError as exc:
        raise CommandError(f"request failed: {exc.strerror or exc}") from None
    sys.stdout.write(response)


def main(argv=None) -> int:
    """Run the http command."""
    return run_command("http", USAGE, _run, argv)