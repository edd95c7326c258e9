"""Resources – shared model (de)serialisation and the Resource base class."""
from __future__ import annotations

import dataclasses
import functools
import types
import typing
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping, TypedDict, TypeVar, Union
from urllib.parse import quote

from onfido_sdk.adapters.http import HttpxTransport, RequestDescriptor, Response
from onfido_sdk.adapters.http.request import Body
from onfido_sdk.kernel.errors import ValidationError
from onfido_sdk.resilience.deadline import Context

M = TypeVar("M", bound="Model")


class CallOptions(TypedDict, total=False):
    """Per-call keyword arguments accepted by every operation."""

    ctx: Context | None
    retries: int | None
    retry_wait: float | None


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


def _dump(value: Any) -> Any:
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_dump(item) for item in value]
    if isinstance(value, dict):
        return {key: _dump(item) for key, item in value.items()}
    return value


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (str, list, dict)) and not value)


@functools.cache
def _hints(cls: type) -> dict[str, Any]:
    return typing.get_type_hints(cls)


def _parse_datetime(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _load(tp: Any, value: Any) -> Any:
    if value is None:
        return None
    origin = typing.get_origin(tp)
    if origin in (Union, types.UnionType):
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        return _load(args[0], value) if len(args) == 1 else value
    if origin is list:
        (item_tp,) = typing.get_args(tp)
        return [_load(item_tp, item) for item in value]
    if origin is dict:
        return dict(value)
    if isinstance(tp, type):
        if issubclass(tp, Model):
            return tp.from_dict(value)
        if issubclass(tp, Enum):
            try:
                return tp(value)
            except ValueError:
                return value
        if issubclass(tp, datetime):
            return _parse_datetime(value)
        if issubclass(tp, date):
            return date.fromisoformat(value[:10])
    return value


class Model:
    """Mixin for payload dataclasses.

    ``to_dict`` drops ``None`` and empty values and renders dates as
    ISO-8601; ``from_dict`` ignores unknown keys and parses nested models,
    enums and timestamps from the field annotations.
    """

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for field in dataclasses.fields(self):  # type: ignore[arg-type]
            value = _dump(getattr(self, field.name))
            if not _is_empty(value):
                out[field.name] = value
        return out

    @classmethod
    def from_dict(cls: type[M], data: Mapping[str, Any]) -> M:
        if not isinstance(data, Mapping):
            raise TypeError(f"{cls.__name__} expects an object, got {type(data).__name__}")
        hints = _hints(cls)
        kwargs = {
            field.name: _load(hints[field.name], data[field.name])
            for field in dataclasses.fields(cls)  # type: ignore[arg-type]
            if field.name in data
        }
        return cls(**kwargs)


def payload_dict(payload: Model | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(payload, Model):
        return payload.to_dict()
    return {key: _dump(value) for key, value in payload.items() if not _is_empty(_dump(value))}


# ---------------------------------------------------------------------------
# Resource
# ---------------------------------------------------------------------------


def require_id(name: str, value: str | None) -> str:
    """Return *value* URL-quoted, or raise :class:`ValidationError` when blank."""
    if value is None or not str(value).strip():
        raise ValidationError.required(name)
    return quote(str(value), safe="")


class Resource:
    """One API resource; builds descriptors and hands them to the transport."""

    def __init__(self, transport: HttpxTransport) -> None:
        self._transport = transport

    def _descriptor(
        self,
        method: str,
        path: str,
        *,
        body: Body | None = None,
        params: list[tuple[str, str]] | None = None,
        retries: int | None = None,
        retry_wait: float | None = None,
    ) -> RequestDescriptor:
        return RequestDescriptor.create(
            method,
            path,
            body=body,
            params=params,
            retries=retries,
            retry_wait=retry_wait,
        )

    def _send(
        self,
        method: str,
        path: str,
        *,
        body: Body | None = None,
        params: list[tuple[str, str]] | None = None,
        ctx: Context | None = None,
        retries: int | None = None,
        retry_wait: float | None = None,
    ) -> Response:
        descriptor = self._descriptor(
            method, path, body=body, params=params, retries=retries, retry_wait=retry_wait
        )
        return self._transport.execute(descriptor, ctx)


__all__ = ["CallOptions", "Model", "Resource", "payload_dict", "require_id"]
