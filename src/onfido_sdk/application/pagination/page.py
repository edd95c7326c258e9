"""Application pagination – PageDetails and the ``Link`` header extractor.

List endpoints describe their position in a result set with two headers::

    X-Total-Count: 6
    Link: <https://api.eu.onfido.com/v3.6/applicants?page=2&per_page=2>; rel="next",
          <https://api.eu.onfido.com/v3.6/applicants?page=3&per_page=2>; rel="last"

:func:`extract_page_details` turns them into a :class:`PageDetails`. Every
field is optional: the server only emits the relations that exist (page 1
has no ``prev``) and omits ``Link`` entirely for single-page results.
"""
from __future__ import annotations

import dataclasses
import re
from typing import Mapping
from urllib.parse import parse_qs, urlsplit

import httpx

TOTAL_COUNT_HEADER = "X-Total-Count"
LINK_HEADER = "Link"

_ENTRY_RE = re.compile(r"<([^>]*)>([^<]*)")
_REL_RE = re.compile(r';\s*rel\s*=\s*"?([^";,\s]+)"?')

_REL_FIELDS = {
    "first": "first_page",
    "last": "last_page",
    "next": "next_page",
    "prev": "prev_page",
}


@dataclasses.dataclass(frozen=True)
class PageDetails:
    """Position of one list response within its result set.

    ``total`` is ``None`` when the count header is absent or unparseable;
    a genuine ``0`` is kept as ``0``.
    """

    total: int | None = None
    limit: int | None = None
    first_page: int | None = None
    last_page: int | None = None
    next_page: int | None = None
    prev_page: int | None = None

    @property
    def has_next(self) -> bool:
        return self.next_page is not None

    @property
    def has_previous(self) -> bool:
        return self.prev_page is not None


def _positive_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        number = int(value.strip())
    except ValueError:
        return None
    return number if number > 0 else None


def _parse_total(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        total = int(value.strip())
    except ValueError:
        return None
    return total if total >= 0 else None


def _query_value(url: str, name: str) -> str | None:
    try:
        query = urlsplit(url).query
    except ValueError:
        return None
    values = parse_qs(query).get(name)
    return values[0] if values else None


def extract_page_details(headers: httpx.Headers | Mapping[str, str]) -> PageDetails:
    """Build :class:`PageDetails` from response headers.

    ``limit`` comes from the ``per_page`` of any entry with a ``rel``, even
    one such as ``self`` that names no page field. Malformed entries (no
    ``rel``, no usable ``page``) are skipped without affecting the rest of
    the header.
    """
    headers = httpx.Headers(headers)
    found: dict[str, int] = {}
    limit: int | None = None

    for url, params in _ENTRY_RE.findall(headers.get(LINK_HEADER, "")):
        rel_match = _REL_RE.search(params)
        if rel_match is None:
            continue
        per_page = _positive_int(_query_value(url, "per_page"))
        if per_page is not None:
            limit = per_page
        field = _REL_FIELDS.get(rel_match.group(1).lower())
        if field is None:
            continue
        page = _positive_int(_query_value(url, "page"))
        if page is not None:
            found[field] = page

    return PageDetails(
        total=_parse_total(headers.get(TOTAL_COUNT_HEADER)),
        limit=limit,
        **found,
    )


__all__ = ["LINK_HEADER", "PageDetails", "TOTAL_COUNT_HEADER", "extract_page_details"]
