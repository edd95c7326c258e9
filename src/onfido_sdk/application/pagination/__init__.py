"""Application pagination – page details, Link header parsing and page options."""
from onfido_sdk.application.pagination.page import (
    LINK_HEADER,
    TOTAL_COUNT_HEADER,
    PageDetails,
    extract_page_details,
)
from onfido_sdk.application.pagination.page_request import (
    PageOption,
    PageRequest,
    SortDirection,
    WithPage,
    WithPageLimit,
)

__all__ = [
    "LINK_HEADER",
    "PageDetails",
    "PageOption",
    "PageRequest",
    "SortDirection",
    "TOTAL_COUNT_HEADER",
    "WithPage",
    "WithPageLimit",
    "extract_page_details",
]
