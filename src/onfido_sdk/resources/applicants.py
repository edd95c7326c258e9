"""Resources – applicants.

An applicant is the person being verified; documents and workflow runs
hang off an applicant id.
"""
from __future__ import annotations

import dataclasses
from datetime import date, datetime
from typing import Any, Iterator, Mapping, Union, Unpack

from onfido_sdk.adapters.http import JsonBody, classify
from onfido_sdk.application.pagination import (
    PageDetails,
    PageRequest,
    WithPage,
    WithPageLimit,
    extract_page_details,
)
from onfido_sdk.resources.base import CallOptions, Model, Resource, payload_dict, require_id


@dataclasses.dataclass
class IdNumber(Model):
    type: str | None = None
    value: str | None = None
    state_code: str | None = None


@dataclasses.dataclass
class Consent(Model):
    name: str | None = None
    granted: bool | None = None


@dataclasses.dataclass
class Location(Model):
    ip_address: str | None = None
    country_of_residence: str | None = None


@dataclasses.dataclass
class Address(Model):
    country: str | None = None
    postcode: str | None = None
    flat_number: str | None = None
    building_number: str | None = None
    building_name: str | None = None
    street: str | None = None
    sub_street: str | None = None
    town: str | None = None
    state: str | None = None
    line1: str | None = None
    line2: str | None = None
    line3: str | None = None


@dataclasses.dataclass
class Applicant(Model):
    """An applicant as returned by the API."""

    id: str = ""
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    dob: date | None = None
    phone_number: str | None = None
    id_numbers: list[IdNumber] = dataclasses.field(default_factory=list)
    address: Address | None = None
    location: Location | None = None
    sandbox: bool | None = None
    href: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    delete_at: datetime | None = None


@dataclasses.dataclass
class ApplicantPayload(Model):
    """Body of ``create`` and ``update``; the API requires both names on create."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    dob: date | None = None
    phone_number: str | None = None
    id_numbers: list[IdNumber] = dataclasses.field(default_factory=list)
    consents: list[Consent] = dataclasses.field(default_factory=list)
    address: Address | None = None
    location: Location | None = None


@dataclasses.dataclass(frozen=True)
class WithIncludeDeleted:
    """Also list applicants scheduled for deletion."""


ApplicantListOption = Union[WithPage, WithPageLimit, WithIncludeDeleted]


def _applicant_list(body: Any) -> list[Applicant]:
    return [Applicant.from_dict(item) for item in body["applicants"]]


class Applicants(Resource):
    """``/applicants`` operations."""

    def create(
        self,
        payload: ApplicantPayload | Mapping[str, Any],
        **call: Unpack[CallOptions],
    ) -> Applicant:
        response = self._send("POST", "/applicants", body=JsonBody(payload_dict(payload)), **call)
        return classify(response, Applicant.from_dict)

    def retrieve(self, applicant_id: str, **call: Unpack[CallOptions]) -> Applicant:
        path = f"/applicants/{require_id('applicant_id', applicant_id)}"
        return classify(self._send("GET", path, **call), Applicant.from_dict)

    def update(
        self,
        applicant_id: str,
        payload: ApplicantPayload | Mapping[str, Any],
        **call: Unpack[CallOptions],
    ) -> Applicant:
        path = f"/applicants/{require_id('applicant_id', applicant_id)}"
        response = self._send("PUT", path, body=JsonBody(payload_dict(payload)), **call)
        return classify(response, Applicant.from_dict)

    def delete(self, applicant_id: str, **call: Unpack[CallOptions]) -> None:
        """Schedule the applicant for deletion; ``restore`` undoes it."""
        path = f"/applicants/{require_id('applicant_id', applicant_id)}"
        classify(self._send("DELETE", path, **call))

    def restore(self, applicant_id: str, **call: Unpack[CallOptions]) -> None:
        path = f"/applicants/{require_id('applicant_id', applicant_id)}/restore"
        classify(self._send("POST", path, **call))

    def list(
        self,
        *options: ApplicantListOption,
        **call: Unpack[CallOptions],
    ) -> tuple[list[Applicant], PageDetails]:
        """One page of applicants plus its position in the result set."""
        page = PageRequest()
        include_deleted = False
        for option in options:
            if isinstance(option, (WithPage, WithPageLimit)):
                page = page.apply(option)
            elif isinstance(option, WithIncludeDeleted):
                include_deleted = True
            else:
                raise TypeError(f"unsupported applicant list option: {option!r}")

        params = page.to_params()
        if include_deleted:
            params.append(("include_deleted", "true"))
        response = self._send("GET", "/applicants", params=params, **call)
        applicants = classify(response, _applicant_list)
        return applicants or [], extract_page_details(response.headers)

    def iter_all(
        self,
        *options: ApplicantListOption,
        **call: Unpack[CallOptions],
    ) -> Iterator[Applicant]:
        """Yield applicants from every page, following ``next`` links."""
        rest = [option for option in options if not isinstance(option, WithPage)]
        current = next(
            (option.page for option in reversed(options) if isinstance(option, WithPage)),
            1,
        )
        while True:
            applicants, details = self.list(*rest, WithPage(current), **call)
            yield from applicants
            if details.next_page is None or details.next_page <= current:
                return
            current = details.next_page


__all__ = [
    "Address",
    "Applicant",
    "ApplicantListOption",
    "ApplicantPayload",
    "Applicants",
    "Consent",
    "IdNumber",
    "Location",
    "WithIncludeDeleted",
]
