import base64
import json
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from minicore.commands.curl import (
    CurlOptions,
    RequestData,
    build_request,
    main,
    send_request,
)


class _Echo(BaseHTTPRequestHandler):
    def _reply(self):
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length)
        payload = json.dumps(
            {
                "method": self.command,
                "path": self.path,
                "body": body.decode("utf-8"),
                "headers": {k.lower(): v for k, v in self.headers.items()},
            }
        ).encode("utf-8")
        status = 404 if self.path.startswith("/missing") else 200
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    do_GET = _reply
    do_POST = _reply
    do_PUT = _reply

    def log_message(self, *args):
        pass


@pytest.fixture
def server(monkeypatch):
    for name in ("HTTP_PROXY", "http_proxy", "HTTPS_PROXY", "https_proxy"):
        monkeypatch.delenv(name, raising=False)
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _Echo)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{httpd.server_address[1]}"
    httpd.shutdown()
    httpd.server_close()


def _free_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_build_request_defaults():
    request = build_request("http://example.com/a", CurlOptions())
    assert request.get_method() == "GET"
    assert request.get_header("Accept") == "*/*"
    assert "minicore" in request.get_header("User-agent")
    assert request.data is None


@pytest.mark.parametrize(
    "mime, content_type",
    [
        ("json", "application/json; charset=utf-8"),
        ("form", "application/x-www-form-urlencoded"),
        ("plain", "text/plain; charset=utf-8"),
    ],
)
def test_build_request_data(mime, content_type):
    options = CurlOptions(data=RequestData(mime=mime, body="a=1"))
    request = build_request("http://example.com/", options)
    assert request.get_method() == "POST"
    assert request.data == b"a=1"
    assert request.get_header("Content-type") == content_type


def test_build_request_user_credentials_round_trip():
    options = CurlOptions(user="user:password")
    request = build_request("http://example.com/", options)
    scheme, _, encoded = request.get_header("Authorization").partition(" ")
    assert scheme == "Basic"
    assert base64.b64decode(encoded).decode() == "user:password"


def test_build_request_custom_headers_and_agent():
    options = CurlOptions(
        headers=["Accept: text/html", "X-Test: yes", "broken"], user_agent="agent/1"
    )
    request = build_request("http://example.com/", options)
    assert request.get_header("Accept") == "text/html"
    assert request.get_header("X-test") == "yes"
    assert request.get_header("User-agent") == "agent/1"
    assert request.get_header("Broken") is None


def test_build_request_upload_file(tmp_path):
    upload = tmp_path / "up.txt"
    upload.write_bytes(b"file contents")
    request = build_request("http://example.com/", CurlOptions(upload_file=str(upload)))
    assert request.get_method() == "PUT"
    assert request.data == b"file contents"


def test_send_request_get_to_file(server, tmp_path):
    out = tmp_path / "out.json"
    send_request(f"{server}/hello", CurlOptions(output=str(out)))
    echoed = json.loads(out.read_bytes())
    assert echoed["method"] == "GET"
    assert echoed["path"] == "/hello"
    assert echoed["headers"]["accept"] == "*/*"


def test_send_request_post_body_round_trip(server, tmp_path):
    out = tmp_path / "out.json"
    options = CurlOptions(data=RequestData("json", '{"k": 1}'), output=str(out))
    send_request(f"{server}/post", options)
    echoed = json.loads(out.read_bytes())
    assert echoed["method"] == "POST"
    assert echoed["body"] == '{"k": 1}'
    assert echoed["headers"]["content-type"] == "application/json; charset=utf-8"


def test_send_request_include_headers(server, tmp_path):
    out = tmp_path / "out"
    send_request(server + "/", CurlOptions(include_headers=True, output=str(out)))
    data = out.read_bytes()
    head, sep, body = data.partition(b"\r\n\r\n")
    assert head.startswith(b"HTTP/1.")
    assert b" 200 " in head.split(b"\r\n")[0] + b" "
    assert sep == b"\r\n\r\n"
    assert json.loads(body)["path"] == "/"


def test_custom_headers_turn_on_included_headers(server, tmp_path):
    out = tmp_path / "out"
    options = CurlOptions(headers=["X-Test: 1"], output=str(out))
    send_request(server + "/", options)
    assert options.include_headers is True
    head, _, body = out.read_bytes().partition(b"\r\n\r\n")
    assert head.startswith(b"HTTP/")
    assert json.loads(body)["headers"]["x-test"] == "1"


def test_http_error_still_writes_body(server, tmp_path):
    out = tmp_path / "out"
    send_request(f"{server}/missing", CurlOptions(output=str(out)))
    assert json.loads(out.read_bytes())["path"] == "/missing"


def test_remote_name_uses_last_segment(server, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    options = CurlOptions(remote_name=True)
    send_request(f"{server}/dir/file.txt", options)
    assert options.output == "file.txt"
    assert json.loads((tmp_path / "file.txt").read_bytes())["path"] == "/dir/file.txt"


def test_main_writes_stdout(server, capsysbinary):
    code = main([f"{server}/stdout"])
    captured = capsysbinary.readouterr()
    assert code == 0
    assert json.loads(captured.out)["path"] == "/stdout"


def test_main_upload_option(server, tmp_path):
    upload = tmp_path / "up.txt"
    upload.write_text("payload")
    out = tmp_path / "out"
    code = main(["-T", str(upload), "-o", str(out), f"{server}/put"])
    echoed = json.loads(out.read_bytes())
    assert code == 0
    assert echoed["method"] == "PUT"
    assert echoed["body"] == "payload"


def test_main_data_with_mime(server, tmp_path):
    out = tmp_path / "out"
    code = main(["-d", "a=b", "form", "-o", str(out), f"{server}/form"])
    echoed = json.loads(out.read_bytes())
    assert code == 0
    assert echoed["headers"]["content-type"] == "application/x-www-form-urlencoded"
    assert echoed["body"] == "a=b"


def test_main_missing_url(capsys):
    code = main([])
    assert code != 0
    assert "missing URL" in capsys.readouterr().err


def test_main_option_without_argument(capsys):
    code = main(["-o"])
    assert code != 0
    assert "option requires an argument -- 'o'" in capsys.readouterr().err


def test_main_invalid_option(capsys):
    code = main(["-z", "http://example.com/"])
    assert code != 0
    assert "invalid option -- 'z'" in capsys.readouterr().err


def test_main_connection_failure(capsys, monkeypatch):
    monkeypatch.delenv("HTTP_PROXY", raising=False)
    monkeypatch.delenv("http_proxy", raising=False)
    code = main([f"http://127.0.0.1:{_free_port()}/"])
    assert code != 0
    assert "request failed" in capsys.readouterr().err


def test_main_fail_fast_is_silent(capsys, monkeypatch):
    monkeypatch.delenv("HTTP_PROXY", raising=False)
    monkeypatch.delenv("http_proxy", raising=False)
    code = main(["-f", f"http://127.0.0.1:{_free_port()}/"])
    captured = capsys.readouterr()
    assert code == 1
    assert captured.err == ""
    assert captured.out == ""