from __future__ import annotations

import httpx
import pytest

from httpx_object_mapper.core.errors import ResponseValidationError
from httpx_object_mapper.request_shared import (
    ContentTypeValidator,
    StatusCodeValidator,
    apply_validators,
)
from httpx_object_mapper.response import RawResponse
from tests.shared.models import WeatherResponse
from tests.shared.payloads import make_weather_payload
from tests.shared.transport import RecordingHandler, build_client, build_config


def _raw(
    status_code: int,
    *,
    content: bytes = b"{}",
    content_type: str | None = "application/json",
) -> RawResponse:
    request = httpx.Request("GET", "https://api.example.test/weather")
    headers = {"content-type": content_type} if content_type else {}
    response = httpx.Response(status_code, content=content, headers=headers, request=request)
    return RawResponse.from_httpx(request, response)


@pytest.mark.parametrize(
    ("status_code", "accepted"),
    [(200, True), (204, True), (299, True), (302, False), (404, False), (500, False)],
)
def test_status_code_validator_accepts_2xx_by_default(status_code: int, accepted: bool):
    error = StatusCodeValidator()(_raw(status_code))
    if accepted:
        assert error is None
    else:
        assert isinstance(error, httpx.HTTPStatusError)
        assert error.response.status_code == status_code


@pytest.mark.parametrize(
    ("content_type", "accepted"),
    [
        ("application/json", True),
        ("application/json; charset=utf-8", True),
        ("application/vnd.api+json", True),
        ("text/html", False),
    ],
)
def test_content_type_validator_matches_wildcards(content_type: str, accepted: bool):
    validator = ContentTypeValidator(("application/json", "application/*+json"))
    error = validator(_raw(200, content_type=content_type))
    assert (error is None) is accepted
    if not accepted:
        assert isinstance(error, ResponseValidationError)
        assert error.content_type == "text/html"


def test_content_type_validator_skips_empty_bodies():
    validator = ContentTypeValidator(("application/json",))
    assert validator(_raw(204, content=b"", content_type=None)) is None
    assert isinstance(validator(_raw(200, content_type=None)), ResponseValidationError)


def test_apply_validators_keeps_existing_error():
    request = httpx.Request("GET", "https://api.example.test/weather")
    transport_error = httpx.ConnectError("down", request=request)
    raw = RawResponse.from_error(request, transport_error)
    assert apply_validators(raw, [StatusCodeValidator()]) is raw


def test_validate_turns_bad_status_into_error_before_mapping():
    handler = RecordingHandler(make_weather_payload("NY"), status_code=500)
    with build_client(handler) as client:
        result = client.get("/weather").validate().response_object(WeatherResponse)
    assert isinstance(result.error, httpx.HTTPStatusError)
    assert result.value is None


def test_unvalidated_request_maps_error_status_body():
    handler = RecordingHandler(make_weather_payload("NY"), status_code=500)
    with build_client(handler) as client:
        result = client.get("/weather").response_object(WeatherResponse)
    assert result.value.location == "NY"


def test_validate_with_custom_status_codes_and_content_types():
    handler = RecordingHandler(make_weather_payload("NY"), status_code=404, content_type="text/plain")
    with build_client(handler) as client:
        status_ok = client.get("/weather").validate(status_codes={404}).response_object(WeatherResponse)
        content_bad = (
            client.get("/weather")
            .validate(status_codes={404}, content_types=["application/json"])
            .response_object(WeatherResponse)
        )
    assert status_ok.value.location == "NY"
    assert isinstance(content_bad.error, ResponseValidationError)


def test_config_enables_status_validation_for_every_request():
    handler = RecordingHandler(make_weather_payload("NY"), status_code=404)
    with build_client(handler, config=build_config(validate_status=True)) as client:
        result = client.get("/weather").response_object(WeatherResponse)
    assert isinstance(result.error, httpx.HTTPStatusError)
