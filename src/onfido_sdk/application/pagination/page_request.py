"""Application pagination – page options and PageRequest."""
from __future__ import annotations

import dataclasses
from enum import Enum

from onfido_sdk.kernel.errors import ValidationError


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclasses.dataclass(frozen=True)
class WithPage:
    """Request a 1-based page number."""
    page: int

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError("page must be >= 1", fields={"page": ["must be >= 1"]})


@dataclasses.dataclass(frozen=True)
class WithPageLimit:
    """Request a page size (``per_page``)."""
    limit: int

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValidationError("limit must be >= 1", fields={"per_page": ["must be >= 1"]})


PageOption = WithPage | WithPageLimit


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Page parameters merged from any number of page options; last one wins."""
    page: int | None = None
    per_page: int | None = None

    def apply(self, option: PageOption) -> "PageRequest":
        if isinstance(option, WithPage):
            return dataclasses.replace(self, page=option.page)
        return dataclasses.replace(self, per_page=option.limit)

    def to_params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        if self.page is not None:
            params.append(("page", str(self.page)))
        if self.per_page is not None:
            params.append(("per_page", str(self.per_page)))
        return params


__all__ = ["PageOption", "PageRequest", "SortDirection", "WithPage", "WithPageLimit"]
