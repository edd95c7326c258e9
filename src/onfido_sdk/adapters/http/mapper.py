"""HTTP adapter – classify responses into results or API errors.

``[200, 300)`` is success. Anything else is decoded as the API's
``{"error": {...}}`` envelope; an undecodable body becomes a
:class:`~onfido_sdk.kernel.errors.DecodeError` so callers always get one
error shape.
"""
from __future__ import annotations

from typing import Any, Callable, TypeVar

from onfido_sdk.adapters.http.response import Response
from onfido_sdk.kernel.errors import ApiError, DecodeError

T = TypeVar("T")

FOUND = 302


def error_from_response(response: Response) -> ApiError:
    """Decode the error envelope of a non-success *response*."""
    try:
        payload = response.json()
    except ValueError as exc:
        return DecodeError(
            f"OnfidoErrorDecode: {exc}",
            status_code=response.status_code,
            cause=exc,
        )
    error = payload.get("error") if isinstance(payload, dict) else None
    if not isinstance(error, dict):
        return DecodeError(
            "OnfidoErrorDecode: response has no error object",
            status_code=response.status_code,
        )
    return ApiError.from_envelope(error, status_code=response.status_code)


def raise_for_status(response: Response, *, allow_redirect: bool = False) -> None:
    """Raise the mapped :class:`ApiError` unless *response* is a success.

    With *allow_redirect* a ``302`` also passes, for endpoints that hand out
    a download location instead of a body.
    """
    if response.is_success:
        return
    if allow_redirect and response.status_code == FOUND:
        return
    raise error_from_response(response)


def classify(
    response: Response,
    into: Callable[[Any], T] | None = None,
    *,
    allow_redirect: bool = False,
) -> T | None:
    """Return the decoded body (via *into*) or raise the mapped error.

    Without *into* nothing is decoded and ``None`` is returned on success.
    """
    raise_for_status(response, allow_redirect=allow_redirect)
    if into is None:
        return None
    try:
        payload = response.json()
    except ValueError as exc:
        raise DecodeError(str(exc), status_code=response.status_code, cause=exc) from exc
    try:
        return into(payload)
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise DecodeError(
            f"cannot decode response body: {exc}",
            status_code=response.status_code,
            cause=exc,
        ) from exc


__all__ = ["classify", "error_from_response", "raise_for_status"]
