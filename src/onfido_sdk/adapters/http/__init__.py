"""HTTP adapter – request plans, retrying httpx transport and response mapping."""
from onfido_sdk.adapters.http.client import HttpxTransport
from onfido_sdk.adapters.http.mapper import classify, error_from_response, raise_for_status
from onfido_sdk.adapters.http.request import (
    FilePart,
    FormBody,
    JsonBody,
    MultipartBody,
    RequestDescriptor,
    sniff_content_type,
)
from onfido_sdk.adapters.http.response import Response

__all__ = [
    "FilePart",
    "FormBody",
    "HttpxTransport",
    "JsonBody",
    "MultipartBody",
    "RequestDescriptor",
    "Response",
    "classify",
    "error_from_response",
    "raise_for_status",
    "sniff_content_type",
]
