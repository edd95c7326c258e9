"""Resources – workflow runs and their signed evidence summary."""
from __future__ import annotations

import dataclasses
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping, Union, Unpack

from onfido_sdk.adapters.http import JsonBody, classify, raise_for_status, sniff_content_type
from onfido_sdk.application.pagination import (
    PageDetails,
    PageRequest,
    SortDirection,
    WithPage,
    WithPageLimit,
    extract_page_details,
)
from onfido_sdk.kernel.errors import EMPTY_RESPONSE, ApiError
from onfido_sdk.resources.base import CallOptions, Model, Resource, payload_dict, require_id


class WorkflowRunStatus(str, Enum):
    PROCESSING = "processing"
    AWAITING_INPUT = "awaiting_input"
    APPROVED = "approved"
    DECLINED = "declined"
    REVIEW = "review"
    ABANDONED = "abandoned"
    ERROR = "error"


@dataclasses.dataclass
class WorkflowRunLink(Model):
    """Hosted verification link; ``url`` is only set on responses."""

    url: str | None = None
    completed_redirect_url: str | None = None
    expired_redirect_url: str | None = None
    expires_at: datetime | None = None
    language: str | None = None


@dataclasses.dataclass
class WorkflowRun(Model):
    id: str = ""
    applicant_id: str | None = None
    workflow_id: str | None = None
    workflow_version_id: int | None = None
    status: WorkflowRunStatus | None = None
    dashboard_url: str | None = None
    tags: list[str] = dataclasses.field(default_factory=list)
    customer_user_id: str | None = None
    output: dict[str, Any] | None = None
    reasons: list[str] = dataclasses.field(default_factory=list)
    error: dict[str, Any] | None = None
    sdk_token: str | None = dataclasses.field(default=None, repr=False)
    link: WorkflowRunLink | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclasses.dataclass
class WorkflowRunPayload(Model):
    workflow_id: str | None = None
    applicant_id: str | None = None
    tags: list[str] = dataclasses.field(default_factory=list)
    customer_user_id: str | None = None
    link: WorkflowRunLink | None = None
    custom_data: dict[str, Any] = dataclasses.field(default_factory=dict)


@dataclasses.dataclass(frozen=True)
class EvidenceSummary:
    """Signed evidence summary file: where it lives and what it contains."""

    url: str
    content: bytes = dataclasses.field(default=b"", repr=False)
    content_type: str | None = None


# ---------------------------------------------------------------------------
# List options
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class WithWorkflowRunStatus:
    status: WorkflowRunStatus | str


@dataclasses.dataclass(frozen=True)
class WithWorkflowRunTags:
    """Filter by tags; repeated options accumulate."""

    tags: tuple[str, ...]

    def __init__(self, *tags: str) -> None:
        object.__setattr__(self, "tags", tuple(tags))


@dataclasses.dataclass(frozen=True)
class WithWorkflowRunCreatedAfter:
    """Runs created after *day*; only the calendar day is sent."""

    day: date


@dataclasses.dataclass(frozen=True)
class WithWorkflowRunCreatedBefore:
    """Runs created before *day*; only the calendar day is sent."""

    day: date


@dataclasses.dataclass(frozen=True)
class WithWorkflowRunSort:
    direction: SortDirection | str


WorkflowRunListOption = Union[
    WithPage,
    WithWorkflowRunStatus,
    WithWorkflowRunTags,
    WithWorkflowRunCreatedAfter,
    WithWorkflowRunCreatedBefore,
    WithWorkflowRunSort,
]


def _day(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def _enum_value(value: Enum | str) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def workflow_run_params(options: tuple[Any, ...]) -> list[tuple[str, str]]:
    """Query parameters for ``GET /workflow_runs``."""
    page = PageRequest()
    status: str | None = None
    tags: list[str] = []
    created_after: date | None = None
    created_before: date | None = None
    sort: str | None = None

    for option in options:
        if isinstance(option, WithPageLimit):
            raise TypeError("workflow runs do not support a page limit")
        if isinstance(option, WithPage):
            page = page.apply(option)
        elif isinstance(option, WithWorkflowRunStatus):
            status = _enum_value(option.status)
        elif isinstance(option, WithWorkflowRunTags):
            tags.extend(option.tags)
        elif isinstance(option, WithWorkflowRunCreatedAfter):
            created_after = option.day
        elif isinstance(option, WithWorkflowRunCreatedBefore):
            created_before = option.day
        elif isinstance(option, WithWorkflowRunSort):
            sort = _enum_value(option.direction)
        else:
            raise TypeError(f"unsupported workflow run list option: {option!r}")

    params = page.to_params()
    if status:
        params.append(("status", status))
    if tags:
        params.append(("tags", ",".join(tags)))
    if created_after is not None:
        params.append(("created_at_gt", _day(created_after)))
    if created_before is not None:
        params.append(("created_at_lt", _day(created_before)))
    if sort:
        params.append(("sort", sort))
    return params


def _workflow_run_list(body: Any) -> list[WorkflowRun]:
    if not isinstance(body, list):
        raise TypeError(f"expected a JSON array, got {type(body).__name__}")
    return [WorkflowRun.from_dict(item) for item in body]


class WorkflowRuns(Resource):
    """``/workflow_runs`` operations."""

    def create(
        self,
        payload: WorkflowRunPayload | Mapping[str, Any],
        **call: Unpack[CallOptions],
    ) -> WorkflowRun:
        response = self._send("POST", "/workflow_runs", body=JsonBody(payload_dict(payload)), **call)
        return classify(response, WorkflowRun.from_dict)

    def retrieve(self, workflow_run_id: str, **call: Unpack[CallOptions]) -> WorkflowRun:
        path = f"/workflow_runs/{require_id('workflow_run_id', workflow_run_id)}"
        return classify(self._send("GET", path, **call), WorkflowRun.from_dict)

    def list(
        self,
        *options: WorkflowRunListOption,
        **call: Unpack[CallOptions],
    ) -> tuple[list[WorkflowRun], PageDetails]:
        response = self._send("GET", "/workflow_runs", params=workflow_run_params(options), **call)
        runs = classify(response, _workflow_run_list)
        return runs or [], extract_page_details(response.headers)

    def retrieve_evidence_summary_file(
        self,
        workflow_run_id: str,
        **call: Unpack[CallOptions],
    ) -> EvidenceSummary:
        """Resolve the signed evidence file location and download it."""
        path = f"/workflow_runs/{require_id('workflow_run_id', workflow_run_id)}/signed_evidence_file"
        ctx = call.pop("ctx", None)
        url = self._transport.resolve_indirect(self._descriptor("GET", path, **call), ctx)
        download = self._transport.fetch_external(url, ctx)
        raise_for_status(download)
        if not download.content:
            raise ApiError(
                f"evidence summary file for {workflow_run_id} is empty",
                type=EMPTY_RESPONSE,
                status_code=download.status_code,
            )
        return EvidenceSummary(
            url=url,
            content=download.content,
            content_type=download.content_type or sniff_content_type(download.content),
        )


__all__ = [
    "EvidenceSummary",
    "WithWorkflowRunCreatedAfter",
    "WithWorkflowRunCreatedBefore",
    "WithWorkflowRunSort",
    "WithWorkflowRunStatus",
    "WithWorkflowRunTags",
    "WorkflowRun",
    "WorkflowRunLink",
    "WorkflowRunListOption",
    "WorkflowRunPayload",
    "WorkflowRunStatus",
    "WorkflowRuns",
    "workflow_run_params",
]
