"""HTTP adapter – immutable response envelope."""
from __future__ import annotations

import dataclasses
import json
from typing import Any

import httpx


@dataclasses.dataclass(frozen=True)
class Response:
    """Status, headers and fully-read body of one HTTP exchange."""

    status_code: int
    reason: str
    headers: httpx.Headers
    content: bytes = dataclasses.field(repr=False)
    url: str = ""

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "Response":
        """Snapshot a response whose body has already been read."""
        return cls(
            status_code=response.status_code,
            reason=response.reason_phrase,
            headers=httpx.Headers(response.headers),
            content=response.content,
            url=str(response.request.url),
        )

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_redirect(self) -> bool:
        return 300 <= self.status_code < 400

    @property
    def location(self) -> str | None:
        """Absolute target of a redirect, ``None`` without a ``Location`` header."""
        location = self.headers.get("Location")
        if not location:
            return None
        if not self.url:
            return location
        return str(httpx.URL(self.url).join(location))

    @property
    def content_type(self) -> str | None:
        value = self.headers.get("Content-Type")
        return value.split(";", 1)[0].strip() if value else None

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.content)


__all__ = ["Response"]
