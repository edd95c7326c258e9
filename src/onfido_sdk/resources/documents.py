"""Resources – documents (upload, retrieval, downloads)."""
from __future__ import annotations

import dataclasses
import pathlib
from datetime import datetime
from enum import Enum
from typing import Any, Unpack

from onfido_sdk.adapters.http import FilePart, MultipartBody, classify, raise_for_status
from onfido_sdk.adapters.http.mapper import FOUND
from onfido_sdk.application.pagination import PageDetails, extract_page_details
from onfido_sdk.kernel.errors import EMPTY_RESPONSE, ApiError, ValidationError
from onfido_sdk.resources.applicants import Location
from onfido_sdk.resources.base import CallOptions, Model, Resource, require_id


class DocumentType(str, Enum):
    """Common document types; the API accepts more than are listed here."""

    UNKNOWN = "unknown"
    PASSPORT = "passport"
    DRIVING_LICENCE = "driving_licence"
    NATIONAL_IDENTITY_CARD = "national_identity_card"
    RESIDENCE_PERMIT = "residence_permit"
    WORK_PERMIT = "work_permit"
    VOTER_ID = "voter_id"
    TAX_ID = "tax_id"


class DocumentSide(str, Enum):
    FRONT = "front"
    BACK = "back"


@dataclasses.dataclass
class Document(Model):
    id: str = ""
    applicant_id: str | None = None
    type: DocumentType | None = None
    side: DocumentSide | None = None
    issuing_country: str | None = None
    file_type: str | None = None
    file_name: str | None = None
    file_size: int | None = None
    href: str | None = None
    download_href: str | None = None
    created_at: datetime | None = None


@dataclasses.dataclass
class DocumentUpload:
    """A document file plus its metadata, sent as ``multipart/form-data``.

    The file's content type is sniffed from its bytes; the API rejects
    ``application/octet-stream``.
    """

    applicant_id: str
    file: bytes = dataclasses.field(repr=False)
    file_name: str = "document"
    type: DocumentType | str | None = None
    side: DocumentSide | str | None = None
    issuing_country: str | None = None
    file_type: str | None = None
    location: Location | None = None
    validate_image_quality: bool | None = None

    @classmethod
    def from_path(cls, applicant_id: str, path: str | pathlib.Path, **kwargs: Any) -> "DocumentUpload":
        path = pathlib.Path(path)
        return cls(applicant_id=applicant_id, file=path.read_bytes(), file_name=path.name, **kwargs)

    def to_multipart(self) -> MultipartBody:
        fields: dict[str, Any] = {
            "applicant_id": self.applicant_id,
            "type": self.type.value if isinstance(self.type, Enum) else self.type,
            "side": self.side.value if isinstance(self.side, Enum) else self.side,
            "issuing_country": self.issuing_country,
            "file_type": self.file_type,
            "location": self.location.to_dict() if self.location else None,
            "validate_image_quality": self.validate_image_quality,
        }
        return MultipartBody(fields, files=[FilePart("file", self.file_name, self.file)])


def _document_list(body: Any) -> list[Document]:
    return [Document.from_dict(item) for item in body["documents"]]


class Documents(Resource):
    """``/documents`` operations."""

    def upload(self, payload: DocumentUpload, **call: Unpack[CallOptions]) -> Document:
        require_id("applicant_id", payload.applicant_id)
        if not payload.file:
            raise ValidationError.required("file")
        response = self._send("POST", "/documents", body=payload.to_multipart(), **call)
        return classify(response, Document.from_dict)

    def retrieve(self, document_id: str, **call: Unpack[CallOptions]) -> Document:
        path = f"/documents/{require_id('document_id', document_id)}"
        return classify(self._send("GET", path, **call), Document.from_dict)

    def list(self, applicant_id: str, **call: Unpack[CallOptions]) -> tuple[list[Document], PageDetails]:
        """Documents uploaded for *applicant_id*."""
        require_id("applicant_id", applicant_id)
        response = self._send("GET", "/documents", params=[("applicant_id", applicant_id)], **call)
        documents = classify(response, _document_list)
        return documents or [], extract_page_details(response.headers)

    def download(self, document_id: str, **call: Unpack[CallOptions]) -> bytes:
        return self._download(document_id, "download", **call)

    def download_nfc_face(self, document_id: str, **call: Unpack[CallOptions]) -> bytes:
        return self._download(document_id, "nfc_face", **call)

    def download_video(self, document_id: str, **call: Unpack[CallOptions]) -> bytes:
        return self._download(document_id, "video/download", **call)

    def _download(self, document_id: str, suffix: str, **call: Unpack[CallOptions]) -> bytes:
        path = f"/documents/{require_id('document_id', document_id)}/{suffix}"
        response = self._send("GET", path, **call)
        raise_for_status(response, allow_redirect=True)
        if response.status_code == FOUND:
            if not response.location:
                raise ApiError(
                    "response carries no download location",
                    type=EMPTY_RESPONSE,
                    status_code=response.status_code,
                )
            response = self._transport.fetch_external(response.location, call.get("ctx"))
            raise_for_status(response)
        if not response.content:
            raise ApiError(
                "unable to download document",
                type=EMPTY_RESPONSE,
                status_code=response.status_code,
            )
        return response.content


__all__ = [
    "Document",
    "DocumentSide",
    "DocumentType",
    "DocumentUpload",
    "Documents",
]
