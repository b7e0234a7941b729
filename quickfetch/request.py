"""An HTTP request under construction: URL, method, headers and body."""

from __future__ import annotations

import copy
import json
from enum import IntEnum
from typing import Any

from .headers import Headers


class BodyKind(IntEnum):
    """What kind of payload a request carries."""

    NONE = 0
    RAW = 1
    FILE = 2
    JSON = 3


class Request:
    """A request to be sent; the body may be raw bytes or a JSON value."""

    def __init__(self, url: str, method: str = "GET") -> None:
        self.url = url
        self.method = method
        self.headers = Headers()
        self.body_kind = BodyKind.NONE
        self._body: Any = None

    @classmethod
    def from_format(cls, url_format: str, *args: Any) -> Request:
        """Build a request whose URL is ``url_format`` filled in with ``args``."""
        return cls(url_format % args if args else url_format)

    def set_url(self, url: str) -> None:
        self.url = url

    def set_method(self, method: str) -> None:
        self.method = method

    def add_header(self, key: str, value: str) -> None:
        """Set a header, replacing the value of an existing header of that exact name."""
        self.headers.set(key, value)

    def add_header_fmt(self, key: str, fmt: str, *args: Any) -> None:
        """Set a header whose value is ``fmt`` filled in with ``args``."""
        self.headers.set(key, fmt % args if args else fmt)

    @property
    def body(self) -> Any:
        """The raw bytes, the JSON value, or None when there is no body."""
        return self._body

    def clear_body(self) -> None:
        """Drop any body the request carries."""
        self._body = None
        self.body_kind = BodyKind.NONE

    def send_any(self, content: bytes | bytearray | memoryview) -> None:
        """Use a copy of ``content`` as the raw body."""
        self.clear_body()
        self._body = bytes(content)
        self.body_kind = BodyKind.RAW

    def send_body_str(self, content: str) -> None:
        """Use ``content``, encoded as UTF-8, as the raw body."""
        self.send_any(content.encode("utf-8"))

    def send_json(self, value: Any) -> None:
        """Use a deep copy of ``value`` as the JSON body."""
        self.clear_body()
        self._body = copy.deepcopy(value)
        self.body_kind = BodyKind.JSON

    def _adopt_json(self, value: Any) -> Any:
        self.clear_body()
        self._body = value
        self.body_kind = BodyKind.JSON
        return value

    def create_json_object(self) -> dict[str, Any]:
        """Make an empty JSON object the body and return it for filling in."""
        return self._adopt_json({})

    def create_json_array(self) -> list[Any]:
        """Make an empty JSON array the body and return it for filling in."""
        return self._adopt_json([])

    def body_bytes(self) -> bytes:
        """Return the body as it goes on the wire."""
        if self.body_kind is BodyKind.RAW:
            return self._body
        if self.body_kind is BodyKind.JSON:
            return json.dumps(self._body).encode("utf-8")
        return b""

    def represent(self) -> None:
        """Print the route, method, headers and raw body."""
        print(f"Route: {self.url}")
        print(f"Method: {self.method}")
        print("Headers:")
        for header in self.headers:
            print(f"\t{header.key}: {header.value}")
        if self.body_kind is BodyKind.RAW:
            print(f"Body: {self._body.decode('utf-8', errors='replace')}")
        elif self.body_kind is BodyKind.FILE:
            print(f"Body-File: {self._body}")

    def __repr__(self) -> str:
        return f"Request({self.url!r}, method={self.method!r})"