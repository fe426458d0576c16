import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from dynalgo.api import JSON_CONTENT_TYPE, Request, Response, TradingAPI, WebAPI


class RecordingTransport:
    def __init__(self, response=None):
        self.requests = []
        self.response = response or Response(200, b'{"ok": true}')

    def __call__(self, request):
        self.requests.append(request)
        return self.response


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def api(transport):
    return WebAPI(transport)


@pytest.mark.parametrize(
    "send, method",
    [
        (lambda a: a.get("http://localhost/x"), "GET"),
        (lambda a: a.post("http://localhost/x", {}), "POST"),
        (lambda a: a.put("http://localhost/x", {}), "PUT"),
        (lambda a: a.delete("http://localhost/x"), "DELETE"),
    ],
)
def test_method_names(api, transport, send, method):
    result = send(api)
    assert result is transport.response
    assert transport.requests[0].method == method
    assert transport.requests[0].url == "http://localhost/x"


def test_get_has_no_body(api, transport):
    result = api.get("http://localhost/items")
    assert result is transport.response
    assert transport.requests[0].body is None
    assert transport.requests[0].headers == {}


def test_post_sends_json_body(api, transport):
    body = {"symbol": "ABC", "qty": 3}
    api.post("http://localhost/orders", body)
    sent = transport.requests[0]
    assert sent.headers["Content-Type"] == JSON_CONTENT_TYPE
    assert json.loads(sent.body) == body


def test_put_overrides_content_type(api, transport):
    result = api.put("http://localhost/orders/1", {"qty": 1}, [("content-type", "text/plain")])
    assert result is transport.response
    sent = transport.requests[0]
    assert sent.headers == {"Content-Type": JSON_CONTENT_TYPE}


def test_headers_skip_empty_and_duplicate_names(api, transport):
    result = api.get(
        "http://localhost/", [("X-A", "1"), ("", "skip"), ("X-A", "2"), ("X-B", "3")]
    )
    assert result is transport.response
    assert transport.requests[0].headers == {"X-A": "1", "X-B": "3"}


def test_callback_receives_response(api, transport):
    received = []
    result = api.get("http://localhost/", callback=received.append)
    assert received == [transport.response]
    assert result is transport.response


def test_body_must_be_mapping(api):
    with pytest.raises(TypeError):
        api.post("http://localhost/", ["not", "a", "mapping"])


def test_response_helpers():
    response = Response(201, b'{"a": [1, 2]}')
    assert response.ok is True
    assert response.json() == {"a": [1, 2]}
    assert response.text() == '{"a": [1, 2]}'
    assert Response(500).ok is False
    assert Response(200, error="boom").ok is False


def test_trading_api_uses_transport(transport):
    trading = TradingAPI(transport)
    trading.delete("http://localhost/orders/7")
    assert transport.requests == [Request("DELETE", "http://localhost/orders/7", {}, None)]


class _EchoHandler(BaseHTTPRequestHandler):
    def _reply(self):
        length = int(self.headers.get("Content-Length") or 0)
        payload = self.rfile.read(length) if length else b""
        status = 404 if self.path == "/missing" else 200
        answer = json.dumps(
            {
                "method": self.command,
                "path": self.path,
                "content_type": self.headers.get("Content-Type"),
                "x_test": self.headers.get("X-Test"),
                "body": payload.decode(),
            }
        ).encode()
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(answer)))
        self.end_headers()
        self.wfile.write(answer)

    do_GET = do_POST = do_PUT = do_DELETE = _reply

    def log_message(self, *args):
        pass


@pytest.fixture
def server_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _EchoHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()
        thread.join()


def test_default_transport_round_trip(server_url):
    response = WebAPI().post(f"{server_url}/orders", {"qty": 2}, [("X-Test", "yes")])
    assert response.status == 200
    echoed = response.json()
    assert echoed["method"] == "POST"
    assert echoed["content_type"] == JSON_CONTENT_TYPE
    assert echoed["x_test"] == "yes"
    assert json.loads(echoed["body"]) == {"qty": 2}


def test_default_transport_reports_http_errors(server_url):
    received = []
    response = WebAPI().get(f"{server_url}/missing", callback=received.append)
    assert response.status == 404
    assert response.ok is False
    assert received == [response]
    assert response.json()["path"] == "/missing"


def test_default_transport_reports_connection_failure():
    response = WebAPI(timeout=2.0).get("http://127.0.0.1:1/")
    assert response.status == 0
    assert response.error