"""HTTP adapter – request descriptor and body encodings.

A :class:`RequestDescriptor` is an immutable plan for one call. Bodies
serialise their payload when constructed, so a retried request always
resends the bytes captured at call time, never a re-encoding of state the
caller may have mutated since.
"""
from __future__ import annotations

import dataclasses
import json
from typing import Any, Mapping, Sequence, Union

import filetype

OCTET_STREAM = "application/octet-stream"

HeaderValue = Union[str, Sequence[str]]


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def form_value(value: Any) -> str:
    """Render a scalar or JSON-typed value as a form field string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return _compact_json(value)
    return str(value)


@dataclasses.dataclass(frozen=True)
class JsonBody:
    """``application/json`` body, serialised once at construction."""

    payload: Any
    content: bytes = dataclasses.field(init=False, repr=False)

    content_type = "application/json"

    def __post_init__(self) -> None:
        object.__setattr__(self, "content", _compact_json(self.payload).encode("utf-8"))

    def request_kwargs(self) -> dict[str, Any]:
        return {"content": self.content, "headers": {"Content-Type": self.content_type}}


@dataclasses.dataclass(frozen=True)
class FormBody:
    """``application/x-www-form-urlencoded`` body."""

    fields: tuple[tuple[str, str], ...]

    def __init__(self, fields: Mapping[str, Any] | Sequence[tuple[str, Any]]) -> None:
        items = fields.items() if isinstance(fields, Mapping) else fields
        object.__setattr__(
            self,
            "fields",
            tuple((str(name), form_value(value)) for name, value in items if value is not None),
        )

    def request_kwargs(self) -> dict[str, Any]:
        data: dict[str, list[str]] = {}
        for name, value in self.fields:
            data.setdefault(name, []).append(value)
        return {"data": data}


@dataclasses.dataclass(frozen=True)
class FilePart:
    """One file in a multipart body; its MIME type is sniffed from the bytes."""

    name: str
    filename: str
    content: bytes = dataclasses.field(repr=False)
    content_type: str = ""

    def __post_init__(self) -> None:
        if not self.content_type:
            object.__setattr__(self, "content_type", sniff_content_type(self.content))


def sniff_content_type(content: bytes) -> str:
    """MIME type from magic numbers; ``application/octet-stream`` if unknown."""
    return filetype.guess_mime(content) or OCTET_STREAM


@dataclasses.dataclass(frozen=True)
class MultipartBody:
    """``multipart/form-data`` body of plain fields plus file parts.

    Booleans become ``true``/``false`` and mappings or lists are sent as
    JSON strings; ``None`` values are dropped.
    """

    fields: tuple[tuple[str, str], ...]
    files: tuple[FilePart, ...]

    def __init__(
        self,
        fields: Mapping[str, Any] | None = None,
        files: Sequence[FilePart] = (),
    ) -> None:
        object.__setattr__(
            self,
            "fields",
            tuple(
                (str(name), form_value(value))
                for name, value in (fields or {}).items()
                if value is not None
            ),
        )
        object.__setattr__(self, "files", tuple(files))

    def request_kwargs(self) -> dict[str, Any]:
        data: dict[str, list[str]] = {}
        for name, value in self.fields:
            data.setdefault(name, []).append(value)
        files = [
            (part.name, (part.filename, part.content, part.content_type))
            for part in self.files
        ]
        return {"data": data, "files": files}


Body = Union[JsonBody, FormBody, MultipartBody]


@dataclasses.dataclass(frozen=True)
class RequestDescriptor:
    """Everything needed to send one API request.

    ``retries`` / ``retry_wait`` override the client defaults when set.
    ``params`` keeps insertion order and allows repeated keys.
    """

    method: str
    path: str
    body: Body | None = None
    params: tuple[tuple[str, str], ...] = ()
    headers: tuple[tuple[str, str], ...] = ()
    retries: int | None = None
    retry_wait: float | None = None

    @classmethod
    def create(
        cls,
        method: str,
        path: str,
        *,
        body: Body | None = None,
        params: Mapping[str, Any] | Sequence[tuple[str, Any]] | None = None,
        headers: Mapping[str, HeaderValue] | None = None,
        retries: int | None = None,
        retry_wait: float | None = None,
    ) -> "RequestDescriptor":
        return cls(
            method=method.upper(),
            path=path,
            body=body,
            params=_pairs(params),
            headers=_header_pairs(headers),
            retries=retries,
            retry_wait=retry_wait,
        )


def _pairs(params: Mapping[str, Any] | Sequence[tuple[str, Any]] | None) -> tuple[tuple[str, str], ...]:
    if not params:
        return ()
    items = params.items() if isinstance(params, Mapping) else params
    out: list[tuple[str, str]] = []
    for name, value in items:
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            out.extend((name, form_value(v)) for v in value)
        else:
            out.append((name, form_value(value)))
    return tuple(out)


def _header_pairs(headers: Mapping[str, HeaderValue] | None) -> tuple[tuple[str, str], ...]:
    if not headers:
        return ()
    out: list[tuple[str, str]] = []
    for name, value in headers.items():
        if isinstance(value, str):
            out.append((name, value))
        else:
            out.extend((name, v) for v in value)
    return tuple(out)


__all__ = [
    "Body",
    "FilePart",
    "FormBody",
    "JsonBody",
    "MultipartBody",
    "OCTET_STREAM",
    "RequestDescriptor",
    "form_value",
    "sniff_content_type",
]
