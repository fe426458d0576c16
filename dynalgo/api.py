"""Small JSON-over-HTTP client used as the base of trading venue APIs."""

from __future__ import annotations

import functools
import json
import urllib.error
import urllib.request
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

JSON_CONTENT_TYPE = "application/json"
"""Content type sent with request bodies."""

DEFAULT_TIMEOUT = 30.0
"""Seconds to wait for a reply before giving up."""


@dataclass(frozen=True)
class Request:
    """An HTTP request ready to be sent."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True)
class Response:
    """The reply to a request; ``error`` describes a failed transfer."""

    status: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the request succeeded with a 2xx status."""
        return self.error is None and 200 <= self.status < 300

    def text(self, encoding: str = "utf-8") -> str:
        """The body decoded as text."""
        return self.body.decode(encoding, errors="replace")

    def json(self) -> Any:
        """The body parsed as JSON."""
        return json.loads(self.body)


Transport = Callable[[Request], Response]
Callback = Callable[[Response], object]


def urllib_transport(request: Request, timeout: float = DEFAULT_TIMEOUT) -> Response:
    """Send a request with the standard library and wrap whatever comes back."""
    prepared = urllib.request.Request(
        request.url,
        data=request.body,
        headers=request.headers,
        method=request.method,
    )
    try:
        with urllib.request.urlopen(prepared, timeout=timeout) as reply:
            return Response(reply.status, reply.read(), dict(reply.headers.items()))
    except urllib.error.HTTPError as exc:
        try:
            body = exc.read()
        finally:
            exc.close()
        headers = dict(exc.headers.items()) if exc.headers is not None else {}
        return Response(exc.code, body, headers, str(exc.reason))
    except OSError as exc:
        reason = getattr(exc, "reason", exc)
        return Response(0, error=str(reason))


class WebAPI:
    """Sends GET, POST, PUT and DELETE requests and hands replies to callbacks.

    Headers are ``(name, value)`` pairs; pairs with an empty name are skipped
    and only the first pair of a given name is sent. POST and PUT bodies are
    sent as JSON.
    """

    def __init__(self, transport: Transport | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._transport: Transport = transport or functools.partial(urllib_transport, timeout=timeout)

    def get(
        self,
        endpoint: str,
        headers: Iterable[tuple[str, str]] = (),
        callback: Callback | None = None,
    ) -> Response:
        """Send a GET request."""
        return self._send("GET", endpoint, None, headers, callback)

    def post(
        self,
        endpoint: str,
        body: Mapping[str, Any],
        headers: Iterable[tuple[str, str]] = (),
        callback: Callback | None = None,
    ) -> Response:
        """Send a POST request with a JSON body."""
        return self._send("POST", endpoint, body, headers, callback)

    def put(
        self,
        endpoint: str,
        body: Mapping[str, Any],
        headers: Iterable[tuple[str, str]] = (),
        callback: Callback | None = None,
    ) -> Response:
        """Send a PUT request with a JSON body."""
        return self._send("PUT", endpoint, body, headers, callback)

    def delete(
        self,
        endpoint: str,
        headers: Iterable[tuple[str, str]] = (),
        callback: Callback | None = None,
    ) -> Response:
        """Send a DELETE request."""
        return self._send("DELETE", endpoint, None, headers, callback)

    def _send(
        self,
        method: str,
        endpoint: str,
        body: Mapping[str, Any] | None,
        headers: Iterable[tuple[str, str]],
        callback: Callback | None,
    ) -> Response:
        prepared: dict[str, str] = {}
        for name, value in headers:
            if name and name not in prepared:
                prepared[name] = value

        data = None
        if method in ("POST", "PUT"):
            if body is None:
                body = {}
            if not isinstance(body, Mapping):
                raise TypeError(f"request body must be a mapping, got {type(body).__name__}")
            for name in [key for key in prepared if key.lower() == "content-type"]:
                del prepared[name]
            prepared["Content-Type"] = JSON_CONTENT_TYPE
            data = (json.dumps(dict(body), indent=4) + "\n").encode("utf-8")

        response = self._transport(Request(method, endpoint, prepared, data))
        if callback is not None:
            callback(response)
        return response


class TradingAPI(WebAPI):
    """Base class for the API a trading strategy uses to reach its venue."""