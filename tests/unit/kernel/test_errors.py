"""Unit tests for the onfido_sdk error hierarchy."""

from __future__ import annotations

import pytest

from onfido_sdk.config.validation import ConfigError, InvalidSettingValueError
from onfido_sdk.kernel.errors import (
    UNKNOWN_INTERNAL_ERROR,
    ApiError,
    CancelledError,
    DeadlineExceededError,
    DecodeError,
    NotFoundError,
    OnfidoError,
    TransportError,
    ValidationError,
)


# ---------------------------------------------------------------------------
# OnfidoError
# ---------------------------------------------------------------------------


class TestOnfidoError:
    def test_message_is_stored(self) -> None:
        err = OnfidoError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_type(self) -> None:
        assert OnfidoError("m").type == "onfido_error"

    def test_custom_type(self) -> None:
        assert OnfidoError("m", type="custom").type == "custom"

    def test_empty_type_is_kept(self) -> None:
        assert OnfidoError("", type="", fields={"email": ["invalid"]}).type == ""

    def test_fields_default_empty(self) -> None:
        assert OnfidoError("m").fields == {}

    def test_cause_is_chained(self) -> None:
        cause = RuntimeError("boom")
        err = OnfidoError("wrapped", cause=cause)
        assert err.cause is cause
        assert err.__cause__ is cause

    def test_str_renders_type_message_and_fields(self) -> None:
        err = ApiError(
            "There was a validation error on this request",
            type="validation_error",
            fields={"first_name": ["must not be blank"]},
        )
        text = str(err)
        assert "Type: validation_error" in text
        assert "Message: There was a validation error on this request" in text
        assert "Fields:" in text
        assert "first_name - ['must not be blank']" in text

    def test_str_omits_empty_parts(self) -> None:
        text = str(OnfidoError(type="x"))
        assert "Message:" not in text
        assert "Fields:" not in text

    def test_to_dict(self) -> None:
        err = OnfidoError("m", type="t", fields={"a": 1}, cause=ValueError("v"))
        data = err.to_dict()
        assert data["type"] == "t"
        assert data["message"] == "m"
        assert data["fields"] == {"a": 1}
        assert "ValueError" in data["cause"]

    def test_repr(self) -> None:
        assert repr(NotFoundError("gone")) == "NotFoundError(type='resource_not_found', message='gone')"


# ---------------------------------------------------------------------------
# ApiError and subclasses
# ---------------------------------------------------------------------------


class TestApiError:
    def test_status_code_in_dict(self) -> None:
        assert ApiError("m", status_code=400).to_dict()["status_code"] == 400

    def test_status_code_omitted_when_local(self) -> None:
        assert "status_code" not in ApiError("m").to_dict()

    @pytest.mark.parametrize(
        ("error_type", "expected"),
        [
            ("validation_error", ValidationError),
            ("resource_not_found", NotFoundError),
            ("bad_request", ApiError),
            ("", ApiError),
        ],
    )
    def test_from_envelope_picks_subclass(self, error_type: str, expected: type[ApiError]) -> None:
        err = ApiError.from_envelope({"type": error_type, "message": "m"}, status_code=422)
        assert type(err) is expected
        assert err.type == error_type
        assert err.status_code == 422

    def test_from_envelope_copies_fields(self) -> None:
        fields = {"email": ["is invalid"], "address": {"postcode": ["too long"]}}
        err = ApiError.from_envelope({"type": "validation_error", "message": "m", "fields": fields})
        assert err.fields == fields

    def test_from_envelope_ignores_non_mapping_fields(self) -> None:
        err = ApiError.from_envelope({"type": "bad_request", "message": "m", "fields": ["x"]})
        assert err.fields == {}

    def test_validation_required(self) -> None:
        err = ValidationError.required("applicant_id")
        assert err.type == "validation_error"
        assert err.message == "applicant_id is required"
        assert err.fields == {"applicant_id": ["is required"]}
        assert err.status_code is None

    def test_decode_error_type(self) -> None:
        assert DecodeError("bad json").type == UNKNOWN_INTERNAL_ERROR == "unknown internal error"


# ---------------------------------------------------------------------------
# Non-API errors
# ---------------------------------------------------------------------------


class TestOtherErrors:
    def test_transport_error_attempts(self) -> None:
        err = TransportError("request failed after 2 retries", attempts=3)
        assert err.attempts == 3
        assert err.to_dict()["attempts"] == 3
        assert err.type == "transport_error"

    def test_deadline_is_a_cancellation(self) -> None:
        assert issubclass(DeadlineExceededError, CancelledError)
        assert DeadlineExceededError("late").type == "deadline_exceeded"

    def test_cancellation_is_not_transport(self) -> None:
        assert not issubclass(CancelledError, TransportError)

    def test_config_errors_share_root(self) -> None:
        err = InvalidSettingValueError("region", "mars", "must be one of eu, us, ca")
        assert isinstance(err, ConfigError)
        assert isinstance(err, OnfidoError)
        assert err.fields == {"region": ["must be one of eu, us, ca"]}

    def test_all_catchable_as_exception(self) -> None:
        for cls in (ApiError, TransportError, CancelledError, ConfigError):
            with pytest.raises(OnfidoError):
                raise cls("x")
