"""A small blocking HTTP client with a bounded number of requests in flight."""

from __future__ import annotations

import threading
import urllib.error
import urllib.request
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .headers import Headers
from .status import HttpMethod, HttpStatus

MAX_PARALLEL_REQUESTS = 64
"""Maximum number of requests performed at the same time."""

_request_slots = threading.BoundedSemaphore(MAX_PARALLEL_REQUESTS)

HeadersLike = Headers | Mapping[str, str] | Iterable[tuple[str, str]] | None
BodyLike = str | bytes | None


class NettError(Exception):
    """Raised when a request is invalid or cannot be performed."""


@dataclass
class Response:
    """The outcome of a request: the status code and the raw body."""

    status_code: HttpStatus | int = 0
    contents: bytes = b""

    @property
    def contents_size(self) -> int:
        """Number of bytes in the body."""
        return len(self.contents)

    def text(self) -> str:
        """Return the body decoded as UTF-8, replacing invalid bytes."""
        return self.contents.decode("utf-8", errors="replace")


def _as_headers(headers: HeadersLike) -> Headers:
    if headers is None:
        return Headers()
    if isinstance(headers, Headers):
        return headers
    if isinstance(headers, Mapping):
        return Headers(headers.items())
    return Headers(headers)


def _encode_body(body: BodyLike) -> bytes | None:
    if body is None:
        return None
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    raise TypeError("body must be str or bytes")


def _method_name(method: HttpMethod | str) -> str:
    name = method.value if isinstance(method, HttpMethod) else str(method).strip().upper()
    if not name:
        raise NettError("request method cannot be empty")
    return name


def request(
    method: HttpMethod | str,
    url: str,
    headers: HeadersLike = None,
    body: BodyLike = None,
) -> Response:
    """Perform a request and return its response.

    A body is required for every method except GET and DELETE. HTTP error
    statuses are returned as responses; transport failures raise NettError.
    """
    name = _method_name(method)
    if body is None and name not in (HttpMethod.GET.value, HttpMethod.DELETE.value):
        raise NettError("Body cannot be null.")

    req = urllib.request.Request(url, data=_encode_body(body), method=name)
    for line in _as_headers(headers).lines():
        key, _, value = line.partition(": ")
        req.add_header(key, value)

    with _request_slots:
        try:
            with urllib.request.urlopen(req) as reply:
                return Response(HttpStatus.from_code(reply.status), reply.read())
        except urllib.error.HTTPError as exc:
            with exc:
                return Response(HttpStatus.from_code(exc.code), exc.read())
        except (urllib.error.URLError, OSError, ValueError) as exc:
            raise NettError(f"request failed: {exc}") from exc


def get(url: str, headers: HeadersLike = None) -> Response:
    """Perform a GET request."""
    return request(HttpMethod.GET, url, headers)


def post(url: str, headers: HeadersLike = None, body: BodyLike = None) -> Response:
    """Perform a POST request; ``body`` is required."""
    return request(HttpMethod.POST, url, headers, body)


def patch(url: str, headers: HeadersLike = None, body: BodyLike = None) -> Response:
    """Perform a PATCH request; ``body`` is required."""
    return request(HttpMethod.PATCH, url, headers, body)


def put(url: str, headers: HeadersLike = None, body: BodyLike = None) -> Response:
    """Perform a PUT request; ``body`` is required."""
    return request(HttpMethod.PUT, url, headers, body)


def delete(url: str, headers: HeadersLike = None, body: BodyLike = None) -> Response:
    """Perform a DELETE request; ``body`` is optional."""
    return request(HttpMethod.DELETE, url, headers, body)